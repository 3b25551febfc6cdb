"""Timebase quantization onto a per-decade step grid.

A timebase (seconds/division) is only ever shown as one of a few first
significant figures per decade, by default 1, 2 and 5 (the trailing 10 closes
the decade). :func:`quantize_timebase` snaps an arbitrary positive value down
onto that grid.
"""
from __future__ import annotations

import math
from fractions import Fraction
from typing import Optional, Sequence, Tuple

from shared.models import TIMEBASE_STEPS

# Requests this close below a grid value snap up to it.
_RELATIVE_TOLERANCE = 1e-9

_DECADE_STEPS = (1.0, 10.0)


class ConfigurationFault(ValueError):
    """A step sequence or rate table is malformed (a setup bug, not a runtime condition)."""


def validate_steps(steps: Sequence[float]) -> Tuple[float, ...]:
    """Return ``steps`` as a tuple of floats, raising if it does not span one decade."""
    values = tuple(float(s) for s in steps)
    if len(values) < 2:
        raise ConfigurationFault("timebase steps need at least two entries")
    if values[0] != 1.0 or values[-1] != 10.0:
        raise ConfigurationFault("timebase steps must start at 1 and end at 10")
    if any(b <= a for a, b in zip(values, values[1:])):
        raise ConfigurationFault("timebase steps must be strictly ascending")
    return values


def grid_value(step: float, exponent: int) -> float:
    """``step * 10**exponent`` rounded once to the nearest float.

    Exact rational arithmetic keeps this valid over the whole float range,
    subnormals included; values beyond the largest float return ``inf``.
    """
    try:
        return float(Fraction(step) * Fraction(10) ** exponent)
    except OverflowError:
        return math.inf


def _grid_floor(value: float, steps: Tuple[float, ...]) -> Tuple[int, float]:
    if not math.isfinite(value) or value <= 0:
        raise ValueError("value must be positive and finite")
    limit = value * (1.0 + _RELATIVE_TOLERANCE)
    # log10 is only trusted to within one decade near powers of ten.
    guess = math.floor(math.log10(value))
    best: Optional[Tuple[int, float]] = None
    for exponent in (guess - 1, guess, guess + 1):
        for step in steps[:-1]:
            candidate = grid_value(step, exponent)
            # Grid values below the smallest subnormal round to zero, above the largest float to inf.
            if 0.0 < candidate <= limit and math.isfinite(candidate) and (best is None or candidate > best[1]):
                best = (exponent, candidate)
    if best is None:
        raise ConfigurationFault(f"no timebase step lies at or below {value!r}")
    return best


def decade_exponent(value: float) -> int:
    """Exponent ``k`` of the decade ``[10**k, 10**(k+1))`` holding ``value``."""
    return _grid_floor(value, _DECADE_STEPS)[0]


def decade_floor(value: float) -> float:
    """Largest power of ten not above ``value``."""
    return _grid_floor(value, _DECADE_STEPS)[1]


def quantize_timebase(requested: float, steps: Sequence[float] = TIMEBASE_STEPS) -> float:
    """Snap ``requested`` down to the nearest ``step * 10**k`` grid value.

    Args:
        requested: Timebase in seconds/division, must be positive and finite.
        steps: Ascending mantissas of one decade, starting at 1 and ending at 10.

    Returns:
        ``steps[i] * 10**k`` where ``steps[i] <= requested / 10**k < steps[i + 1]``,
        as the nearest float.
    """
    values = validate_steps(steps)
    return _grid_floor(requested, values)[1]


__all__ = [
    "ConfigurationFault",
    "decade_exponent",
    "decade_floor",
    "grid_value",
    "quantize_timebase",
    "validate_steps",
]
