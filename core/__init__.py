"""Core horizontal-axis algorithms (no Qt dependency)."""

from .samplerate import snap_to_rate, solve_samplerate_range, validate_rates
from .timebase import ConfigurationFault, decade_floor, grid_value, quantize_timebase, validate_steps
from shared.models import ControlSpecification, GraphFormat, HorizontalLimits, HorizontalSettings, TIMEBASE_STEPS

__all__ = [
    "TIMEBASE_STEPS",
    "GraphFormat",
    "HorizontalSettings",
    "ControlSpecification",
    "HorizontalLimits",
    "ConfigurationFault",
    "decade_floor",
    "grid_value",
    "quantize_timebase",
    "validate_steps",
    "solve_samplerate_range",
    "snap_to_rate",
    "validate_rates",
]
