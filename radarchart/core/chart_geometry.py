"""ChartGeometry - owns radar chart state and every piece of derived geometry.

NO toolkit imports. Widgets own a ChartGeometry, feed layout into it and
draw its render_intent() through a Renderer.

Every mutator runs the full pipeline before returning:

    AxisSet -> ScaleModel (auto-size) -> build_rings -> VertexProjector

and then publishes exactly one redraw event. Derived state is rebuilt as new
tuples, never patched, so previously returned geometry is never stale-mutated.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Tuple

from radarchart.common.typed_config import ChartConfig
from radarchart.common.typed_config.models import (
    DEFAULT_AXIS_COLOR,
    DEFAULT_END_COLOR,
    DEFAULT_GRAPH_COLOR,
    DEFAULT_START_COLOR,
)
from radarchart.core.axis_set import AxisSet
from radarchart.core.color_gradient import RGB, parse_color
from radarchart.core.errors import ConfigError, InvalidConfigurationError
from radarchart.core.render_intent import (
    AxisLine,
    DataPolygon,
    GraphStyle,
    RenderIntent,
    RingMode,
    RingShape,
    ring_mode_for,
    ring_stroke_width,
)
from radarchart.core.ring_builder import Ring, build_rings
from radarchart.core.scale_model import ScaleModel
from radarchart.core.state import REDRAW_EVENTS, Event, EventType, StateNotifier
from radarchart.core.vertex_projector import Point, VertexProjector

logger = logging.getLogger(__name__)

Padding = Tuple[float, float, float, float]  # left, top, right, bottom


def layout_for_size(width: float, height: float, padding: Padding = (0.0, 0.0, 0.0, 0.0)) -> Tuple[float, Point]:
    """Pixel radius and center for a drawing area.

    Args:
        width, height: drawing area size in pixels
        padding: (left, top, right, bottom) insets

    Returns:
        (pixel_radius, (cx, cy)); pixel_radius is half the smaller usable
        extent, clamped to >= 0
    """
    left, top, right, bottom = padding
    usable_w = width - left - right
    usable_h = height - top - bottom
    pixel_radius = max(0.0, min(usable_w, usable_h)) / 2
    return pixel_radius, (left + usable_w / 2, top + usable_h / 2)


def _option_float(option: str, value: Any) -> float:
    """Paint option as float; rejects bools, non-numbers and non-finite values."""
    try:
        result = float(value)
    except (TypeError, ValueError):
        result = math.nan
    if isinstance(value, bool) or not math.isfinite(result):
        raise ConfigError(
            f"{option} must be a finite number, got {value!r}",
            context={"option": option, "value": value},
        )
    return result


def _option_style(value: Any) -> GraphStyle:
    try:
        return GraphStyle(value)
    except ValueError:
        raise ConfigError(
            f"graph_style must be one of {[s.value for s in GraphStyle]}, got {value!r}",
            context={"option": "graph_style", "value": value},
        ) from None


class ChartGeometry:
    """Radar chart state plus the geometry derived from it.

    Properties mirror the chart options (see ChartConfig). Setters that affect
    rings or vertices publish GEOMETRY_CHANGED; paint-only setters publish
    STYLE_CHANGED.
    """

    def __init__(
        self,
        *,
        start_color: RGB = DEFAULT_START_COLOR,
        end_color: RGB = DEFAULT_END_COLOR,
        axis_color: RGB = DEFAULT_AXIS_COLOR,
        graph_color: RGB = DEFAULT_GRAPH_COLOR,
        axis_max: float = 20.0,
        axis_tick: Optional[float] = None,
        axis_width: float = 1.0,
        graph_width: float = 3.0,
        graph_style: GraphStyle = GraphStyle.STROKE,
        circles_only: bool = False,
        auto_size: bool = True,
        smooth_gradient: bool = False,
        text_size: float = 15.0,
    ) -> None:
        self._axes = AxisSet()
        self._scale = ScaleModel(axis_max, axis_tick, auto_size)
        self._start_color = parse_color(start_color)
        self._end_color = parse_color(end_color)
        self._axis_color = parse_color(axis_color)
        self._graph_color = parse_color(graph_color)
        self._axis_width = _option_float("axis_width", axis_width)
        self._graph_width = _option_float("graph_width", graph_width)
        self._graph_style = _option_style(graph_style)
        self._circles_only = bool(circles_only)
        self._smooth_gradient = bool(smooth_gradient)
        self._text_size = _option_float("text_size", text_size)

        self._pixel_radius = 0.0
        self._projector = VertexProjector((0.0, 0.0))
        self._notifier = StateNotifier()

        # Derived state, replaced wholesale by _rebuild()
        self._rings: Tuple[Ring, ...] = ()
        self._ring_vertices: Tuple[Tuple[Point, ...], ...] = ()
        self._axis_vertices: Tuple[Point, ...] = ()
        self._data_vertices: Tuple[Point, ...] = ()
        self._rebuild()

    @classmethod
    def from_config(cls, config: ChartConfig) -> "ChartGeometry":
        return cls(
            start_color=config.start_color,
            end_color=config.end_color,
            axis_color=config.axis_color,
            graph_color=config.graph_color,
            axis_max=config.axis_max,
            axis_tick=config.axis_tick,
            axis_width=config.axis_width,
            graph_width=config.graph_width,
            graph_style=config.graph_style,
            circles_only=config.circles_only,
            auto_size=config.auto_size,
            smooth_gradient=config.smooth_gradient,
            text_size=config.text_size,
        )

    def config_snapshot(self) -> ChartConfig:
        """Current options as an immutable ChartConfig."""
        return ChartConfig(
            start_color=self._start_color,
            end_color=self._end_color,
            axis_color=self._axis_color,
            graph_color=self._graph_color,
            axis_max=self._scale.axis_max,
            axis_tick=self._scale.axis_tick,
            axis_width=self._axis_width,
            graph_width=self._graph_width,
            graph_style=self._graph_style,
            circles_only=self._circles_only,
            auto_size=self._scale.auto_size,
            smooth_gradient=self._smooth_gradient,
            text_size=self._text_size,
        )

    # -------------------------------------------------------------------------
    # Redraw notification
    # -------------------------------------------------------------------------

    def subscribe(self, callback: Callable[[Event], None]) -> None:
        """Call ``callback`` once after every mutation (redraw needed)."""
        self._notifier.subscribe_all(REDRAW_EVENTS, callback)

    def unsubscribe(self, callback: Callable[[Event], None]) -> None:
        for event_type in REDRAW_EVENTS:
            self._notifier.unsubscribe(event_type, callback)

    def _publish(self, event_type: EventType, **payload: Any) -> None:
        self._notifier.notify(Event.create(event_type, payload or None))

    def _geometry_changed(self, reason: str) -> None:
        self._rebuild()
        self._publish(EventType.GEOMETRY_CHANGED, reason=reason)

    def _style_changed(self, option: str) -> None:
        self._publish(EventType.STYLE_CHANGED, option=option)

    # -------------------------------------------------------------------------
    # Axis API
    # -------------------------------------------------------------------------

    def add_or_replace(self, name: str, value: float) -> None:
        """Add an axis, or replace the value of an existing one in place."""
        self._axes.add_or_replace(name, value)
        self._scale.evaluate(self._axes.values())
        self._geometry_changed("axis")

    def remove(self, name: str) -> None:
        """Remove an axis. Unknown names are ignored (no redraw)."""
        if not self._axes.remove(name):
            logger.debug("remove(%r): no such axis", name)
            return
        self._scale.evaluate(self._axes.values())
        self._geometry_changed("axis")

    def clear_axis(self) -> None:
        self._axes.clear()
        self._geometry_changed("axis")

    def get_axis(self) -> Mapping[str, float]:
        """Read-only ordered snapshot of the axes."""
        return self._axes.snapshot()

    def set_axis(self, axes: Mapping[str, float]) -> None:
        """Replace all axes, keeping the order of ``axes``."""
        self._axes.replace_all(axes)
        self._scale.evaluate(self._axes.values())
        self._geometry_changed("axis")

    @property
    def axis_count(self) -> int:
        return len(self._axes)

    # -------------------------------------------------------------------------
    # Scale options
    # -------------------------------------------------------------------------

    @property
    def axis_max(self) -> float:
        return self._scale.axis_max

    @axis_max.setter
    def axis_max(self, value: float) -> None:
        """Explicit maximum; turns auto-size off."""
        try:
            self._scale.set_axis_max(value)
        except InvalidConfigurationError as e:
            logger.warning("Rejected axis_max: %s", e)
            raise
        self._geometry_changed("axis_max")

    @property
    def axis_tick(self) -> float:
        return self._scale.axis_tick

    @axis_tick.setter
    def axis_tick(self, value: float) -> None:
        try:
            self._scale.set_axis_tick(value)
        except InvalidConfigurationError as e:
            logger.warning("Rejected axis_tick: %s", e)
            raise
        self._geometry_changed("axis_tick")

    @property
    def auto_size(self) -> bool:
        return self._scale.auto_size

    @auto_size.setter
    def auto_size(self, value: bool) -> None:
        self._scale.set_auto_size(value, self._axes.values())
        self._geometry_changed("auto_size")

    # -------------------------------------------------------------------------
    # Ring options
    # -------------------------------------------------------------------------

    @property
    def start_color(self) -> RGB:
        return self._start_color

    @start_color.setter
    def start_color(self, value: Any) -> None:
        self._start_color = parse_color(value)
        self._geometry_changed("start_color")

    @property
    def end_color(self) -> RGB:
        return self._end_color

    @end_color.setter
    def end_color(self, value: Any) -> None:
        self._end_color = parse_color(value)
        self._geometry_changed("end_color")

    @property
    def smooth_gradient(self) -> bool:
        return self._smooth_gradient

    @smooth_gradient.setter
    def smooth_gradient(self, value: bool) -> None:
        self._smooth_gradient = bool(value)
        self._geometry_changed("smooth_gradient")

    @property
    def circles_only(self) -> bool:
        return self._circles_only

    @circles_only.setter
    def circles_only(self, value: bool) -> None:
        self._circles_only = bool(value)
        self._geometry_changed("circles_only")

    # -------------------------------------------------------------------------
    # Paint-only options
    # -------------------------------------------------------------------------

    @property
    def axis_color(self) -> RGB:
        return self._axis_color

    @axis_color.setter
    def axis_color(self, value: Any) -> None:
        self._axis_color = parse_color(value)
        self._style_changed("axis_color")

    @property
    def graph_color(self) -> RGB:
        return self._graph_color

    @graph_color.setter
    def graph_color(self, value: Any) -> None:
        self._graph_color = parse_color(value)
        self._style_changed("graph_color")

    @property
    def axis_width(self) -> float:
        return self._axis_width

    @axis_width.setter
    def axis_width(self, value: float) -> None:
        self._axis_width = _option_float("axis_width", value)
        self._style_changed("axis_width")

    @property
    def graph_width(self) -> float:
        return self._graph_width

    @graph_width.setter
    def graph_width(self, value: float) -> None:
        self._graph_width = _option_float("graph_width", value)
        self._style_changed("graph_width")

    @property
    def graph_style(self) -> GraphStyle:
        return self._graph_style

    @graph_style.setter
    def graph_style(self, value: GraphStyle) -> None:
        self._graph_style = _option_style(value)
        self._style_changed("graph_style")

    @property
    def text_size(self) -> float:
        return self._text_size

    @text_size.setter
    def text_size(self, value: float) -> None:
        self._text_size = _option_float("text_size", value)
        self._style_changed("text_size")

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    @property
    def pixel_radius(self) -> float:
        return self._pixel_radius

    @property
    def center(self) -> Point:
        return self._projector.center

    def set_layout(self, pixel_radius: float, center: Point) -> None:
        """Apply the drawing area's usable radius and center."""
        if not math.isfinite(pixel_radius) or pixel_radius < 0:
            raise InvalidConfigurationError(
                f"pixel_radius must be finite and >= 0, got {pixel_radius!r}",
                context={"pixel_radius": pixel_radius},
            )
        cx, cy = float(center[0]), float(center[1])
        if not (math.isfinite(cx) and math.isfinite(cy)):
            raise InvalidConfigurationError(f"center must be finite, got {center!r}", context={"center": center})
        self._pixel_radius = float(pixel_radius)
        self._projector = VertexProjector((cx, cy))
        self._geometry_changed("layout")

    def resize(self, width: float, height: float, padding: Padding = (0.0, 0.0, 0.0, 0.0)) -> None:
        """set_layout() from a drawing area size (see layout_for_size)."""
        pixel_radius, center = layout_for_size(width, height, padding)
        self.set_layout(pixel_radius, center)

    # -------------------------------------------------------------------------
    # Derived geometry
    # -------------------------------------------------------------------------

    @property
    def ratio(self) -> float:
        """Pixels per data unit. A zero axis_max uses 1."""
        axis_max = self._scale.axis_max
        return self._pixel_radius / axis_max if axis_max > 0 else 1.0

    @property
    def ring_mode(self) -> RingMode:
        return ring_mode_for(self.axis_count, self._circles_only)

    @property
    def rings(self) -> Tuple[Ring, ...]:
        return self._rings

    @property
    def ring_vertices(self) -> Tuple[Tuple[Point, ...], ...]:
        """One vertex buffer per ring, aligned with ``rings``."""
        return self._ring_vertices

    @property
    def axis_vertices(self) -> Tuple[Point, ...]:
        """Full-extent axis endpoints, one per axis."""
        return self._axis_vertices

    @property
    def data_vertices(self) -> Tuple[Point, ...]:
        """Data polygon vertices; the center point alone when axis_count == 1."""
        return self._data_vertices

    def _rebuild(self) -> None:
        # Derive everything first, then swap it in together
        count = len(self._axes)
        rings = build_rings(
            self._scale.axis_max,
            self._scale.axis_tick,
            self._pixel_radius,
            self._start_color,
            self._end_color,
            self._smooth_gradient,
        )
        ring_vertices = tuple(self._projector.project_all(ring.fixed_radius, count) for ring in rings)
        axis_vertices = self._projector.project_all(self._pixel_radius, count)
        if count == 0:
            data_vertices: Tuple[Point, ...] = ()
        elif count == 1:
            data_vertices = (self._projector.center,)
        else:
            data_vertices = self._projector.project_values(self._axes.values(), self.ratio)

        self._rings = rings
        self._ring_vertices = ring_vertices
        self._axis_vertices = axis_vertices
        self._data_vertices = data_vertices
        logger.debug(
            "Rebuilt geometry: %d axes, %d rings, axis_max=%s, pixel_radius=%s",
            count,
            len(rings),
            self._scale.axis_max,
            self._pixel_radius,
        )

    def render_intent(self) -> RenderIntent:
        """Everything a renderer needs for one frame."""
        count = self.axis_count
        mode = self.ring_mode
        ring_shapes = tuple(
            RingShape(ring=ring, stroke_width=ring_stroke_width(ring, mode, count), vertices=vertices)
            for ring, vertices in zip(self._rings, self._ring_vertices)
        )
        axes = tuple(
            AxisLine(name=name, start=self.center, end=end) for name, end in zip(self._axes.names(), self._axis_vertices)
        )
        data = None
        if count > 0:
            data = DataPolygon(
                points=self._data_vertices,
                style=self._graph_style,
                color=self._graph_color,
                width=self._graph_width,
                is_point=count <= 1,
            )
        return RenderIntent(
            center=self.center,
            pixel_radius=self._pixel_radius,
            ring_mode=mode,
            rings=ring_shapes,
            axes=axes,
            data=data,
            axis_color=self._axis_color,
            axis_width=self._axis_width,
            text_size=self._text_size,
        )

    def describe(self) -> Dict[str, Any]:
        """Small summary for logs and debugging."""
        return {
            "axis_count": self.axis_count,
            "ring_count": len(self._rings),
            "ring_mode": self.ring_mode.value,
            "axis_max": self._scale.axis_max,
            "axis_tick": self._scale.axis_tick,
            "auto_size": self._scale.auto_size,
            "pixel_radius": self._pixel_radius,
        }
