"""Ordered axis name -> value container.

Insertion order is the angular order used for layout (axis 0 at 12 o'clock,
then clockwise), so the container is an explicit OrderedDict.
"""
from __future__ import annotations

import math
from collections import OrderedDict
from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterator, List, Tuple

from radarchart.core.errors import AxisValueError


def validate_axis(name: object, value: object) -> float:
    """Check one axis entry and return its value as float.

    Raises:
        AxisValueError: name is not a string, or value is not a finite number >= 0
    """
    if not isinstance(name, str):
        raise AxisValueError(f"Axis name must be a string, got {type(name).__name__}", context={"name": name})
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise AxisValueError(f"Axis {name!r}: value must be a number", context={"name": name, "value": value})
    fvalue = float(value)
    if not math.isfinite(fvalue) or fvalue < 0:
        raise AxisValueError(
            f"Axis {name!r}: value must be finite and >= 0, got {value!r}",
            user_message=f"Invalid value for axis '{name}'",
            context={"name": name, "value": value},
        )
    return fvalue


class AxisSet:
    """Ordered mapping from axis name to non-negative value.

    Re-adding an existing name replaces its value in place; its position is kept.
    """

    def __init__(self) -> None:
        self._axes: OrderedDict[str, float] = OrderedDict()

    def add_or_replace(self, name: str, value: float) -> None:
        self._axes[name] = validate_axis(name, value)

    def remove(self, name: str) -> bool:
        """Remove ``name``. Returns False if it was not present."""
        if name not in self._axes:
            return False
        del self._axes[name]
        return True

    def clear(self) -> None:
        self._axes.clear()

    def replace_all(self, axes: Mapping[str, float]) -> None:
        """Bulk replace, keeping the iteration order of ``axes``.

        All entries are validated before anything is replaced.
        """
        validated: List[Tuple[str, float]] = [(name, validate_axis(name, value)) for name, value in axes.items()]
        self._axes = OrderedDict(validated)

    def names(self) -> Tuple[str, ...]:
        return tuple(self._axes.keys())

    def values(self) -> Tuple[float, ...]:
        return tuple(self._axes.values())

    def snapshot(self) -> Mapping[str, float]:
        """Read-only copy; later mutations of this set do not show through."""
        return MappingProxyType(OrderedDict(self._axes))

    def __len__(self) -> int:
        return len(self._axes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._axes)

    def __contains__(self, name: object) -> bool:
        return name in self._axes

    def __getitem__(self, name: str) -> float:
        return self._axes[name]

    def __repr__(self) -> str:
        return f"AxisSet({dict(self._axes)!r})"
