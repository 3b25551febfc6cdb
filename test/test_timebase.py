import math
import sys

import pytest

from core.timebase import ConfigurationFault, decade_exponent, decade_floor, grid_value, quantize_timebase, validate_steps
from shared.models import TIMEBASE_STEPS


@pytest.mark.parametrize(
    "requested, expected",
    [
        # decade 0.01, mantissa 3.7 falls in [2, 5)
        (0.037, 0.02),
        (1e-3, 1e-3),
        (3e-3, 2e-3),
        (4.99e-3, 2e-3),
        (5e-6, 5e-6),
        (7.5, 5.0),
        (10.0, 10.0),
        (999.0, 500.0),
        (1e-9, 1e-9),
    ],
)
def test_quantize_snaps_down_to_grid(requested, expected):
    assert quantize_timebase(requested) == expected


def test_quantize_tolerates_values_just_below_a_decade():
    # log10 of this value floors to -4 although it is 1e-3 to ten digits
    assert quantize_timebase(9.9999999999e-4) == 1e-3


def test_quantize_with_custom_steps():
    steps = (1.0, 2.5, 5.0, 10.0)
    assert quantize_timebase(0.3, steps) == 0.25
    assert quantize_timebase(2.4, steps) == 1.0
    assert quantize_timebase(2.5, steps) == 2.5


@pytest.mark.parametrize("requested", [0.0, -1e-3, float("nan"), float("inf")])
def test_quantize_rejects_non_positive_requests(requested):
    with pytest.raises(ValueError):
        quantize_timebase(requested)


@pytest.mark.parametrize(
    "steps",
    [
        (1.0,),
        (1.0, 2.0, 5.0),
        (1.0, 5.0, 2.0, 10.0),
        (2.0, 5.0, 10.0),
        (1.0, 2.0, 2.0, 10.0),
    ],
)
def test_malformed_steps_are_configuration_faults(steps):
    with pytest.raises(ConfigurationFault):
        validate_steps(steps)
    with pytest.raises(ConfigurationFault):
        quantize_timebase(1e-3, steps)


def test_default_steps_are_valid():
    assert validate_steps(TIMEBASE_STEPS) == (1.0, 2.0, 5.0, 10.0)


def test_decade_helpers():
    assert decade_exponent(0.037) == -2
    assert decade_exponent(1e3) == 3
    assert decade_floor(1.0 / 1e8) == 1e-8
    # 1 / 48 MS/s = 20.8 ns
    assert math.isclose(decade_floor(1.0 / 48e6), 1e-8)


@pytest.mark.parametrize(
    "requested, expected",
    [
        (1e-310, 1e-310),
        (3.7e-315, 2e-315),
        (5e-324, 5e-324),
        # Two units in the last place: 1e-323 is the nearest grid value not above
        (1.5e-323, 1e-323),
    ],
)
def test_quantize_subnormal_requests(requested, expected):
    assert quantize_timebase(requested) == expected


def test_quantize_largest_float():
    assert quantize_timebase(sys.float_info.max) == 1e308
    assert quantize_timebase(sys.float_info.min) == 2e-308


def test_grid_value_is_rounded_once():
    assert grid_value(5.0, -6) == 5e-6
    assert grid_value(2.0, -320) == 2e-320
    assert grid_value(1.0, 400) == math.inf
    assert grid_value(1.0, -400) == 0.0
