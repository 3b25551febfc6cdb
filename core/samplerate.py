from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from .timebase import ConfigurationFault

logger = logging.getLogger(__name__)


def validate_rates(rates: Sequence[float]) -> Tuple[float, ...]:
    """Return the rate table as a tuple, raising if it is not positive and strictly ascending."""
    arr = np.asarray(rates, dtype=np.float64)
    if arr.ndim != 1 or arr.size == 0:
        raise ConfigurationFault("samplerate steps must be a non-empty sequence")
    if not np.all(np.isfinite(arr)) or np.any(arr <= 0):
        raise ConfigurationFault("samplerate steps must be positive and finite")
    if np.any(np.diff(arr) <= 0):
        raise ConfigurationFault("samplerate steps must be strictly ascending")
    return tuple(float(v) for v in arr)


def solve_samplerate_range(
    timebase: float,
    rates: Sequence[float],
    *,
    min_samples_per_div: float = 10.0,
    max_samples_per_div: float = 1000.0,
    default_min: float = 10e3,
) -> Optional[Tuple[float, float]]:
    """
    Find the admissible samplerate sub-range for a timebase.

    The floor is the fastest rate that still gives at most ``min_samples_per_div``
    samples per division (coarser traces look blocky), the ceiling the fastest
    rate giving at most ``max_samples_per_div`` (more only wastes capture memory
    and delays the data needed for triggering). The floor is then raised to
    ``default_min`` unless the ceiling is lower.

    Args:
        timebase: Seconds per division.
        rates: Ascending table of hardware samplerates.

    Returns:
        ``(minimum, maximum)`` taken from ``rates`` with ``minimum <= maximum``,
        or None if ``rates`` is empty.
    """
    arr = np.asarray(rates, dtype=np.float64)
    if arr.size == 0:
        return None

    per_div = arr * timebase
    index = np.arange(arr.size)

    # The floor must leave room above it, the ceiling room below it.
    lower = arr[(index < arr.size - 1) & (per_div <= min_samples_per_div)]
    upper = arr[(index > 0) & (per_div <= max_samples_per_div)]
    minimum = float(lower.max()) if lower.size else float(arr[0])
    maximum = float(upper.max()) if upper.size else float(arr[0])

    floor = max(minimum, min(default_min, maximum))
    # Keep the floor on the table; the ceiling itself always qualifies.
    minimum = float(arr[(arr >= floor) & (arr <= maximum)].min())

    logger.debug("samplerate range for timebase %g: %g .. %g", timebase, minimum, maximum)
    return minimum, maximum


def snap_to_rate(value: float, rates: Sequence[float], minimum: float, maximum: float) -> float:
    """Return the fastest table rate not above ``value`` within ``[minimum, maximum]``.

    Falls back to the slowest table rate in range when ``value`` is below all of
    them, and to ``value`` clamped into range when no table rate lies in range.
    """
    arr = np.asarray(rates, dtype=np.float64)
    in_range = arr[(arr >= minimum) & (arr <= maximum)]
    if in_range.size == 0:
        return float(min(max(value, minimum), maximum))
    below = in_range[in_range <= value]
    if below.size:
        return float(below.max())
    return float(in_range.min())


__all__ = ["solve_samplerate_range", "snap_to_rate", "validate_rates"]
