"""
Radar chart exception hierarchy.

Provides a base exception class with user-facing messages and debug context,
plus specialized subclasses for configuration and axis data problems.

Degenerate geometry (no axes, a single axis, zero pixel radius) is never an
error; those cases produce well-defined, possibly empty, geometry.
"""

from typing import Any, Dict, Optional


class RadarChartError(Exception):
    """Base exception for radar chart errors.

    Attributes:
        user_message: Safe, user-facing error message.
        context: Dictionary of debug information.
    """

    def __init__(
        self,
        message: str,
        *,
        user_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.user_message = user_message or message
        self.context = context or {}


class ConfigError(RadarChartError):
    """Configuration parse/validation errors (e.g. an unparsable color)."""

    pass


class InvalidConfigurationError(ConfigError):
    """A scale or layout setter received a value it must reject.

    Raised for axis_tick <= 0, axis_max < 0, non-finite scale values and a
    negative pixel radius. The rejected setter leaves prior state untouched.
    """

    pass


class AxisValueError(RadarChartError):
    """Axis entries must have a string name and a finite, non-negative value."""

    pass
