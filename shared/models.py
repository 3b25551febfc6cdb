from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Tuple

import numpy as np


# Allowed first significant figures of a timebase, repeated in every decade.
TIMEBASE_STEPS: Tuple[float, ...] = (1.0, 2.0, 5.0, 10.0)


def _as_ascending(values, *, name: str) -> Tuple[float, ...]:
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1 or arr.size == 0:
        raise ValueError(f"{name} must be a non-empty sequence")
    if not np.all(np.isfinite(arr)) or np.any(arr <= 0):
        raise ValueError(f"{name} must contain positive finite values")
    if np.any(np.diff(arr) <= 0):
        raise ValueError(f"{name} must be strictly ascending")
    return tuple(float(v) for v in arr)


# ----------------------------
# Display format
# ----------------------------

class GraphFormat(IntEnum):
    """How the captured channels are plotted against each other."""

    TY = 0
    XY = 1

    @property
    def label(self) -> str:
        return _GRAPH_FORMAT_LABELS[self]

    @classmethod
    def contains(cls, index: int) -> bool:
        return min(cls) <= index <= max(cls)


_GRAPH_FORMAT_LABELS = {
    GraphFormat.TY: "T - Y",
    GraphFormat.XY: "X - Y",
}


# ----------------------------
# Horizontal settings
# ----------------------------

@dataclass
class HorizontalSettings:
    """Horizontal (time axis) settings of the scope.

    Owned by the application for the lifetime of a device session and mutated
    in place by :class:`gui.horizontal_coordinator.HorizontalCoordinator`.
    """

    samplerate: float = 1e6
    timebase: float = 1e-3
    format: GraphFormat = GraphFormat.TY
    calfreq: float = 1e3
    max_timebase: float = 1e3


@dataclass(frozen=True)
class ControlSpecification:
    """Device/mode dependent control ranges."""

    calfreq_steps: Tuple[float, ...] = (50.0, 100.0, 500.0, 1e3, 5e3, 10e3, 50e3, 100e3)

    def __post_init__(self) -> None:
        object.__setattr__(self, "calfreq_steps", _as_ascending(self.calfreq_steps, name="calfreq_steps"))


@dataclass(frozen=True)
class HorizontalLimits:
    """Initial control bounds and the samples-per-division policy."""

    samplerate_min: float = 1.0
    samplerate_max: float = 1e8
    timebase_min: float = 1e-9
    timebase_max: float = 1e3
    min_samples_per_div: float = 10.0
    max_samples_per_div: float = 1000.0
    default_min_samplerate: float = 10e3
    timebase_steps: Tuple[float, ...] = field(default=TIMEBASE_STEPS)

    def __post_init__(self) -> None:
        if not (0 < self.samplerate_min <= self.samplerate_max):
            raise ValueError("samplerate bounds must satisfy 0 < min <= max")
        if not (0 < self.timebase_min <= self.timebase_max):
            raise ValueError("timebase bounds must satisfy 0 < min <= max")
        if not (0 < self.min_samples_per_div <= self.max_samples_per_div):
            raise ValueError("samples per division must satisfy 0 < min <= max")
        if self.default_min_samplerate <= 0:
            raise ValueError("default_min_samplerate must be positive")
        object.__setattr__(self, "timebase_steps", tuple(float(s) for s in self.timebase_steps))


__all__ = [
    "TIMEBASE_STEPS",
    "GraphFormat",
    "HorizontalSettings",
    "ControlSpecification",
    "HorizontalLimits",
]
