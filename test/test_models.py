import dataclasses

import pytest

from gui.types import AxisRange
from shared.models import ControlSpecification, GraphFormat, HorizontalLimits, HorizontalSettings


def test_graph_format_range_and_labels():
    assert [int(f) for f in GraphFormat] == [0, 1]
    assert GraphFormat.contains(0)
    assert GraphFormat.contains(GraphFormat.XY)
    assert not GraphFormat.contains(2)
    assert not GraphFormat.contains(-1)
    assert GraphFormat.TY.label == "T - Y"
    assert GraphFormat.XY.label == "X - Y"


def test_horizontal_settings_are_mutable_in_place():
    settings = HorizontalSettings()
    settings.timebase = 2e-3
    assert settings.timebase == 2e-3
    assert settings.format is GraphFormat.TY


def test_control_specification_normalizes_steps():
    spec = ControlSpecification(calfreq_steps=[50, 100, 1000])
    assert spec.calfreq_steps == (50.0, 100.0, 1000.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.calfreq_steps = (1.0,)


@pytest.mark.parametrize("steps", [[], [100.0, 50.0], [0.0, 50.0], [50.0, 50.0]])
def test_control_specification_rejects_bad_steps(steps):
    with pytest.raises(ValueError):
        ControlSpecification(calfreq_steps=steps)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"samplerate_min": 0.0},
        {"samplerate_min": 1e6, "samplerate_max": 1e3},
        {"timebase_min": 1.0, "timebase_max": 1e-3},
        {"min_samples_per_div": 2000.0},
        {"default_min_samplerate": -1.0},
    ],
)
def test_horizontal_limits_validation(kwargs):
    with pytest.raises(ValueError):
        HorizontalLimits(**kwargs)


class TestAxisRange:
    def test_clamp(self):
        axis = AxisRange(1.0, 10.0)
        assert axis.clamp(0.5) == 1.0
        assert axis.clamp(5.0) == 5.0
        assert axis.clamp(50.0) == 10.0
        assert axis.contains(10.0)
        assert not axis.contains(10.5)

    def test_minimum_drags_maximum(self):
        axis = AxisRange(1.0, 10.0)
        axis.set_minimum(20.0)
        assert axis.as_tuple() == (20.0, 20.0)

    def test_maximum_drags_minimum(self):
        axis = AxisRange(1.0, 10.0)
        axis.set_maximum(0.5)
        assert axis.as_tuple() == (0.5, 0.5)

    def test_set_range(self):
        axis = AxisRange(1.0, 10.0)
        axis.set_range(100.0, 50.0)
        assert axis.as_tuple() == (100.0, 100.0)
