"""
Shared data structures available to both the core algorithms and the GUI.
"""

from .models import TIMEBASE_STEPS, ControlSpecification, GraphFormat, HorizontalLimits, HorizontalSettings

__all__ = ["TIMEBASE_STEPS", "ControlSpecification", "GraphFormat", "HorizontalLimits", "HorizontalSettings"]
