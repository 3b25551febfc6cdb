__all__ = ["AxisRange", "FORMAT_REJECTED", "HorizontalCoordinator"]

from .horizontal_coordinator import FORMAT_REJECTED, HorizontalCoordinator
from .types import AxisRange
