"""HorizontalCoordinator - Keeps samplerate and timebase consistent.

Owns the bounds of the horizontal controls (samplerate, timebase, format,
calibration output) and writes accepted values into the application's
HorizontalSettings. Changing one axis re-bounds the other silently; only the
operation invoked by the caller emits a change signal.
"""

from __future__ import annotations

import logging
import math
import operator
from typing import Optional, Sequence, Tuple

from PySide6 import QtCore

from core.samplerate import snap_to_rate, solve_samplerate_range, validate_rates
from core.timebase import decade_floor, quantize_timebase, validate_steps
from shared.models import ControlSpecification, GraphFormat, HorizontalLimits, HorizontalSettings

from .types import AxisRange

logger = logging.getLogger(__name__)

# Returned by set_format() when the requested ordinal is not a GraphFormat.
FORMAT_REJECTED = -1


def _is_positive(value: object) -> bool:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number) and number > 0


def _format_ordinal(index: object) -> int:
    # bool passes operator.index but is not a format
    if isinstance(index, bool):
        return FORMAT_REJECTED
    try:
        return operator.index(index)
    except TypeError:
        return FORMAT_REJECTED


class HorizontalCoordinator(QtCore.QObject):
    """
    Coordinates the horizontal controls of the scope.

    Responsibilities:
    - Quantize timebase requests onto the 1-2-5 grid
    - Derive the usable samplerate range from the timebase on fixed-rate devices
    - Track device dependent bounds (rate tables, maximum timebase)
    - Notify listeners of directly requested changes only

    Does NOT own widgets; the dock calls these methods when the user edits a
    control and connects the signals back to the rest of the application.
    """

    samplerateChanged = QtCore.Signal(float)
    timebaseChanged = QtCore.Signal(float)
    formatChanged = QtCore.Signal(object)  # GraphFormat
    calfreqChanged = QtCore.Signal(float)

    def __init__(
        self,
        settings: HorizontalSettings,
        spec: ControlSpecification,
        *,
        limits: Optional[HorizontalLimits] = None,
        parent: Optional[QtCore.QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._limits = limits if limits is not None else HorizontalLimits()
        self._timebase_steps = validate_steps(self._limits.timebase_steps)
        self._spec = spec
        self._settings = settings

        # Empty for devices with a continuously variable samplerate
        self._samplerate_steps: Tuple[float, ...] = ()
        self._samplerate_mode: int = 0

        self._samplerate_range = AxisRange(self._limits.samplerate_min, self._limits.samplerate_max)
        self._timebase_range = AxisRange(self._limits.timebase_min, self._limits.timebase_max)
        self._calfreq_range = AxisRange(spec.calfreq_steps[0], spec.calfreq_steps[-1])

        self.load_settings()

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def settings(self) -> HorizontalSettings:
        return self._settings

    @property
    def samplerate_steps(self) -> Tuple[float, ...]:
        """Hardware rate table, empty for variable-rate devices."""
        return self._samplerate_steps

    @property
    def samplerate_mode(self) -> int:
        return self._samplerate_mode

    @property
    def has_fixed_samplerates(self) -> bool:
        return bool(self._samplerate_steps)

    @property
    def samplerate_bounds(self) -> Tuple[float, float]:
        return self._samplerate_range.as_tuple()

    @property
    def timebase_bounds(self) -> Tuple[float, float]:
        return self._timebase_range.as_tuple()

    @property
    def calfreq_bounds(self) -> Tuple[float, float]:
        return self._calfreq_range.as_tuple()

    @property
    def calfreq_steps(self) -> Tuple[float, ...]:
        return self._spec.calfreq_steps

    def load_settings(self, settings: Optional[HorizontalSettings] = None) -> None:
        """Apply all values of ``settings`` (or the bound settings) without emitting signals."""
        if settings is not None:
            self._settings = settings
        s = self._settings

        if not _is_positive(s.samplerate):
            logger.debug("Invalid stored samplerate %r, using %g", s.samplerate, self._samplerate_range.minimum)
            s.samplerate = self._samplerate_range.minimum
        if not _is_positive(s.timebase):
            logger.debug("Invalid stored timebase %r, using %g", s.timebase, self._timebase_range.minimum)
            s.timebase = self._timebase_range.minimum

        self._refresh_timebase_maximum()
        self._store_samplerate(s.samplerate)
        self._store_timebase(s.timebase)

        ordinal = _format_ordinal(s.format)
        if GraphFormat.contains(ordinal):
            s.format = GraphFormat(ordinal)
        else:
            logger.debug("Invalid stored format %r, using %s", s.format, GraphFormat.TY.name)
            s.format = GraphFormat.TY

        calfreq = s.calfreq if _is_positive(s.calfreq) else self._calfreq_range.minimum
        s.calfreq = self._calfreq_range.clamp(calfreq)

    # -------------------------------------------------------------------------
    # Requested changes (emit)
    # -------------------------------------------------------------------------

    def set_timebase(self, timebase: float) -> float:
        """Quantize and store a timebase, re-bounding the samplerate.

        Returns:
            The stored timebase in seconds/division.
        """
        logger.debug("set_timebase(%r)", timebase)
        if not _is_positive(timebase):
            logger.debug("Rejected timebase %r", timebase)
            return self._settings.timebase
        previous = self._settings.timebase
        value = self._store_timebase(timebase)
        if value != previous:
            self.timebaseChanged.emit(value)
        return value

    def set_samplerate(self, samplerate: float) -> float:
        """Store a samplerate and refresh the timebase maximum for the current mode.

        Returns:
            The stored samplerate, clamped to the current bounds and, on
            fixed-rate devices, snapped onto the rate table.
        """
        logger.debug("set_samplerate(%r)", samplerate)
        if not _is_positive(samplerate):
            logger.debug("Rejected samplerate %r", samplerate)
            return self._settings.samplerate
        previous = self._settings.samplerate
        self._refresh_timebase_maximum()
        value = self._store_samplerate(samplerate)
        if value != previous:
            self.samplerateChanged.emit(value)
        return value

    def set_format(self, index: int) -> int:
        """Store a display format.

        Returns:
            The format ordinal, or FORMAT_REJECTED if ``index`` is not a GraphFormat.
        """
        ordinal = _format_ordinal(index)
        if not GraphFormat.contains(ordinal):
            logger.debug("Rejected format %r", index)
            return FORMAT_REJECTED
        value = GraphFormat(ordinal)
        previous = self._settings.format
        self._settings.format = value
        if value != previous:
            self.formatChanged.emit(value)
        return int(value)

    def set_calfreq(self, calfreq: float) -> float:
        """Store the calibration output frequency, clamped to the device range."""
        if not _is_positive(calfreq):
            logger.debug("Rejected calfreq %r", calfreq)
            return self._settings.calfreq
        previous = self._settings.calfreq
        # The step list only bounds the value, members are not enforced.
        value = self._calfreq_range.clamp(calfreq)
        self._settings.calfreq = value
        if value != previous:
            self.calfreqChanged.emit(value)
        return value

    def set_samplerate_limits(self, minimum: float, maximum: float) -> None:
        """Set samplerate bounds; a zero (or invalid) bound is left unchanged.

        The stored samplerate is reclamped silently, like any other bounds change.
        """
        logger.debug("set_samplerate_limits(%r, %r)", minimum, maximum)
        self._apply_samplerate_limits(minimum, maximum)

    def set_samplerate_steps(self, mode: int, steps: Sequence[float]) -> None:
        """Install the rate table of a fixed-rate device for a sampling mode.

        An empty table switches to a continuously variable samplerate and
        keeps the current bounds. This is a reconfiguration: the stored
        samplerate and timebase are adjusted silently.
        """
        logger.debug("set_samplerate_steps(%r, %d steps)", mode, len(steps))
        if len(steps) == 0:
            self._samplerate_mode = int(mode)
            self._samplerate_steps = ()
            return
        rates = validate_rates(steps)
        self._samplerate_mode = int(mode)
        self._samplerate_steps = rates
        self._samplerate_range.set_range(rates[0], rates[-1])
        # The fastest rate limits the shortest capture window worth showing
        self._timebase_range.set_minimum(decade_floor(1.0 / rates[-1]))
        self._store_timebase(self._settings.timebase)

    # -------------------------------------------------------------------------
    # Derived changes (silent)
    # -------------------------------------------------------------------------

    def _store_samplerate(self, samplerate: float) -> float:
        value = self._samplerate_range.clamp(samplerate)
        if self._samplerate_steps:
            value = snap_to_rate(value, self._samplerate_steps, *self._samplerate_range.as_tuple())
        self._settings.samplerate = value
        return value

    def _store_timebase(self, timebase: float) -> float:
        value = quantize_timebase(self._timebase_range.clamp(timebase), self._timebase_steps)
        self._settings.timebase = value
        self._apply_samplerate_range(value)
        return value

    def _refresh_timebase_maximum(self) -> None:
        maximum = self._settings.max_timebase
        if not _is_positive(maximum):
            logger.debug("Ignoring invalid max_timebase %r", maximum)
            return
        self._timebase_range.set_maximum(maximum)
        if not self._timebase_range.contains(self._settings.timebase):
            self._store_timebase(self._settings.timebase)

    def _apply_samplerate_range(self, timebase: float) -> None:
        if not self._samplerate_steps:
            return
        bounds = solve_samplerate_range(
            timebase,
            self._samplerate_steps,
            min_samples_per_div=self._limits.min_samples_per_div,
            max_samples_per_div=self._limits.max_samples_per_div,
            default_min=self._limits.default_min_samplerate,
        )
        if bounds is None:
            return
        self._apply_samplerate_limits(*bounds)

    def _apply_samplerate_limits(self, minimum: float, maximum: float) -> None:
        if _is_positive(minimum):
            self._samplerate_range.set_minimum(minimum)
        if _is_positive(maximum):
            self._samplerate_range.set_maximum(maximum)
        self._store_samplerate(self._settings.samplerate)


__all__ = ["FORMAT_REJECTED", "HorizontalCoordinator"]
