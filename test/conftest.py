from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from shared.models import ControlSpecification, HorizontalSettings  # noqa: E402

# Rate table of a fixed-rate device in its normal sampling mode.
NORMAL_RATES = (1e3, 1e4, 1e5, 1e6, 1e7, 1e8)
# Rate table of the same device in fast-acquisition mode.
FAST_RATES = (1e5, 1e6, 1e7, 1e8, 2e8)


@pytest.fixture
def normal_rates() -> tuple:
    return NORMAL_RATES


@pytest.fixture
def fast_rates() -> tuple:
    return FAST_RATES


@pytest.fixture
def horizontal_settings() -> HorizontalSettings:
    return HorizontalSettings(samplerate=1e6, timebase=1e-3, calfreq=1e3, max_timebase=1e3)


@pytest.fixture
def control_spec() -> ControlSpecification:
    return ControlSpecification(calfreq_steps=(50.0, 100.0, 1e3, 10e3, 100e3))
