"""Scale state for the radar chart: axis maximum, tick spacing and auto-size.

Two modes:
    Auto   - axis_max tracks the largest axis value (kept when there are no axes)
    Manual - axis_max only changes through set_axis_max()

Setting axis_max explicitly always switches to Manual.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from radarchart.core.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_AXIS_MAX = 20.0
TICKS_PER_AXIS_MAX = 5


def _check_finite(option: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise InvalidConfigurationError(
            f"{option} must be a finite number, got {value!r}",
            context={"option": option, "value": value},
        )
    return float(value)


class ScaleModel:
    """Holds axis_max / axis_tick (data units) and the auto-size policy."""

    def __init__(
        self,
        axis_max: float = DEFAULT_AXIS_MAX,
        axis_tick: Optional[float] = None,
        auto_size: bool = True,
    ) -> None:
        axis_max = _check_finite("axis_max", axis_max)
        if axis_max < 0:
            raise InvalidConfigurationError(f"axis_max must be >= 0, got {axis_max}", context={"axis_max": axis_max})
        if axis_tick is None:
            # A zero maximum has no usable fifth; fall back to one data unit
            axis_tick = axis_max / TICKS_PER_AXIS_MAX if axis_max > 0 else 1.0
        self._axis_max = axis_max
        self._axis_tick = self._validated_tick(axis_tick)
        self._auto_size = bool(auto_size)

    @staticmethod
    def _validated_tick(axis_tick: float) -> float:
        axis_tick = _check_finite("axis_tick", axis_tick)
        if axis_tick <= 0:
            raise InvalidConfigurationError(
                f"axis_tick must be > 0, got {axis_tick}",
                user_message="Ring spacing must be greater than zero",
                context={"axis_tick": axis_tick},
            )
        return axis_tick

    @property
    def axis_max(self) -> float:
        return self._axis_max

    @property
    def axis_tick(self) -> float:
        return self._axis_tick

    @property
    def auto_size(self) -> bool:
        return self._auto_size

    def set_axis_max(self, axis_max: float) -> None:
        """Explicit maximum; forces Manual mode. Rejects negative values."""
        axis_max = _check_finite("axis_max", axis_max)
        if axis_max < 0:
            raise InvalidConfigurationError(f"axis_max must be >= 0, got {axis_max}", context={"axis_max": axis_max})
        self._auto_size = False
        self._axis_max = axis_max

    def set_axis_tick(self, axis_tick: float) -> None:
        self._axis_tick = self._validated_tick(axis_tick)

    def set_auto_size(self, auto_size: bool, values: Iterable[float] = ()) -> bool:
        """Switch mode. Entering Auto re-evaluates immediately.

        Returns:
            True if axis_max changed
        """
        self._auto_size = bool(auto_size)
        if self._auto_size:
            return self.evaluate(values)
        return False

    def evaluate(self, values: Iterable[float]) -> bool:
        """Re-derive axis_max from current axis values when in Auto mode.

        Returns:
            True if axis_max changed
        """
        if not self._auto_size:
            return False
        values = list(values)
        if not values:
            return False
        new_max = max(values)
        if new_max == self._axis_max:
            return False
        logger.debug("auto-size: axis_max %s -> %s", self._axis_max, new_max)
        self._axis_max = new_max
        return True

    def __repr__(self) -> str:
        mode = "auto" if self._auto_size else "manual"
        return f"ScaleModel(axis_max={self._axis_max}, axis_tick={self._axis_tick}, mode={mode})"
