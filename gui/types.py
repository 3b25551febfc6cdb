"""GUI type definitions for bounded control values.

:class:`AxisRange` mirrors the minimum/maximum bookkeeping of a Qt spin box so
the horizontal coordinator can keep its bounds without owning a widget.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AxisRange:
    minimum: float
    maximum: float

    def __post_init__(self) -> None:
        if self.maximum < self.minimum:
            self.maximum = self.minimum

    def set_minimum(self, value: float) -> None:
        # Like QDoubleSpinBox.setMinimum: a larger minimum drags the maximum along.
        self.minimum = float(value)
        if self.maximum < self.minimum:
            self.maximum = self.minimum

    def set_maximum(self, value: float) -> None:
        self.maximum = float(value)
        if self.minimum > self.maximum:
            self.minimum = self.maximum

    def set_range(self, minimum: float, maximum: float) -> None:
        self.minimum = float(minimum)
        self.maximum = max(float(maximum), self.minimum)

    def clamp(self, value: float) -> float:
        return min(max(float(value), self.minimum), self.maximum)

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum

    def as_tuple(self) -> tuple[float, float]:
        return (self.minimum, self.maximum)
