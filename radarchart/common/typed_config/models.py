# radarchart/common/typed_config/models.py
#
# Frozen dataclass definitions and type-coercion helpers for chart options.
# Plain dicts (JSON, host toolkit attributes) come in; typed, immutable
# configuration comes out.

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

from radarchart.core.color_gradient import RGB, parse_color
from radarchart.core.errors import ConfigError
from radarchart.core.render_intent import GraphStyle

logger = logging.getLogger(__name__)

# Recognized bool strings
_TRUE_STRINGS = frozenset({"true", "1", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "no"})

DEFAULT_START_COLOR: RGB = (0x5F, 0x9C, 0xA1)
DEFAULT_END_COLOR: RGB = (0xC3, 0xE3, 0xE5)
DEFAULT_AXIS_COLOR: RGB = (0, 0, 0)
DEFAULT_GRAPH_COLOR: RGB = (0x22, 0x73, 0x7B)


# =============================================================================
# Helper Functions
# =============================================================================


def safe_float(value: Any, default: float) -> float:
    """float conversion. None/bool/non-finite/failed conversion -> default.

    Note:
        bool is a subclass of int but deliberately returns default.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(result):
        return default
    return result


def safe_bool(value: Any, default: bool = False) -> bool:
    """bool conversion. Unrecognized strings return default (typo protection).

    Note:
        "abc", "fasle" etc. return default so config typos are harmless.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lower = value.strip().lower()
        if lower in _TRUE_STRINGS:
            return True
        if lower in _FALSE_STRINGS:
            return False
    return default


def safe_color(value: Any, default: RGB) -> RGB:
    """Color conversion via parse_color(). Unparsable values -> default."""
    if value is None:
        return default
    try:
        return parse_color(value)
    except ConfigError:
        logger.warning("Ignoring invalid color %r, using %r", value, default)
        return default


def safe_graph_style(value: Any, default: GraphStyle) -> GraphStyle:
    """GraphStyle from its string value ("stroke", "fill", "stroke_and_fill")."""
    if isinstance(value, GraphStyle):
        return value
    if isinstance(value, str):
        try:
            return GraphStyle(value.strip().lower())
        except ValueError:
            pass
    return default


def _positive(value: float | None, default: float | None, option: str) -> float | None:
    if value is None or value > 0:
        return value
    logger.warning("Ignoring %s=%r (must be > 0)", option, value)
    return default


# =============================================================================
# Dataclasses
# =============================================================================


@dataclass(frozen=True)
class ChartConfig:
    """Chart options (chart section).

    Attributes:
        start_color: innermost ring color
        end_color: outermost ring color
        axis_color: axis line and label color
        graph_color: data polygon color
        axis_max: data-unit scale ceiling
        axis_tick: data-unit ring spacing; None means axis_max / 5
        axis_width: axis line stroke width
        graph_width: data polygon stroke width
        graph_style: data polygon paint style
        circles_only: always draw circular rings
        auto_size: axis_max tracks the largest axis value
        smooth_gradient: per-ring color sampling instead of stepped bands
        text_size: label font size
    """

    start_color: RGB = DEFAULT_START_COLOR
    end_color: RGB = DEFAULT_END_COLOR
    axis_color: RGB = DEFAULT_AXIS_COLOR
    graph_color: RGB = DEFAULT_GRAPH_COLOR
    axis_max: float = 20.0
    axis_tick: float | None = None
    axis_width: float = 1.0
    graph_width: float = 3.0
    graph_style: GraphStyle = GraphStyle.STROKE
    circles_only: bool = False
    auto_size: bool = True
    smooth_gradient: bool = False
    text_size: float = 15.0

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "ChartConfig":
        """Build from a dict. Missing keys use defaults, bad values are coerced safely.

        Note:
            axis_max < 0 and axis_tick <= 0 fall back to their defaults here;
            the ChartGeometry setters reject them outright.
        """
        axis_max = safe_float(d.get("axis_max"), 20.0)
        if axis_max < 0:
            logger.warning("Ignoring axis_max=%r (must be >= 0)", axis_max)
            axis_max = 20.0
        raw_tick = d.get("axis_tick")
        axis_tick = None if raw_tick is None else safe_float(raw_tick, math.nan)
        if axis_tick is not None and math.isnan(axis_tick):
            axis_tick = None

        return cls(
            start_color=safe_color(d.get("start_color"), DEFAULT_START_COLOR),
            end_color=safe_color(d.get("end_color"), DEFAULT_END_COLOR),
            axis_color=safe_color(d.get("axis_color"), DEFAULT_AXIS_COLOR),
            graph_color=safe_color(d.get("graph_color"), DEFAULT_GRAPH_COLOR),
            axis_max=axis_max,
            axis_tick=_positive(axis_tick, None, "axis_tick"),
            axis_width=safe_float(d.get("axis_width"), 1.0),
            graph_width=safe_float(d.get("graph_width"), 3.0),
            graph_style=safe_graph_style(d.get("graph_style"), GraphStyle.STROKE),
            circles_only=safe_bool(d.get("circles_only"), default=False),
            auto_size=safe_bool(d.get("auto_size"), default=True),
            smooth_gradient=safe_bool(d.get("smooth_gradient"), default=False),
            text_size=_positive(safe_float(d.get("text_size"), 15.0), 15.0, "text_size"),
        )


@dataclass(frozen=True)
class LayoutConfig:
    """Padding around the chart inside its drawing area (layout section)."""

    padding_left: float = 0.0
    padding_top: float = 0.0
    padding_right: float = 0.0
    padding_bottom: float = 0.0

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "LayoutConfig":
        # A single "padding" value applies to all four sides unless overridden
        base = max(0.0, safe_float(d.get("padding"), 0.0))
        return cls(
            padding_left=max(0.0, safe_float(d.get("padding_left"), base)),
            padding_top=max(0.0, safe_float(d.get("padding_top"), base)),
            padding_right=max(0.0, safe_float(d.get("padding_right"), base)),
            padding_bottom=max(0.0, safe_float(d.get("padding_bottom"), base)),
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        """(left, top, right, bottom)"""
        return (self.padding_left, self.padding_top, self.padding_right, self.padding_bottom)
