"""Renderer contract and the frame painter.

A Renderer wraps one drawing surface (QPainter, Kivy canvas, a test
recorder). Every call carries its own style; renderers keep no pen/brush
state between calls.
"""
from __future__ import annotations

from typing import Protocol, Sequence, Tuple

from radarchart.core.color_gradient import RGB
from radarchart.core.render_intent import GraphStyle, RenderIntent, RingMode
from radarchart.core.vertex_projector import Point


class Renderer(Protocol):
    """Drawing capabilities the chart needs from its host surface."""

    def draw_circle(self, center: Point, radius: float, color: RGB, width: float) -> None: ...

    def draw_closed_path(self, points: Sequence[Point], style: GraphStyle, color: RGB, width: float) -> None: ...

    def draw_line(self, start: Point, end: Point, color: RGB, width: float) -> None: ...

    def draw_point(self, point: Point, color: RGB, width: float) -> None: ...

    def draw_text(self, text: str, x: float, y: float, font_size: float, color: RGB) -> None: ...

    def measure_text(self, text: str, font_size: float) -> Tuple[float, float]: ...


def label_anchor(point: Point, center: Point, text_size: Tuple[float, float]) -> Point:
    """Text baseline origin for an axis label so the text falls away from the center.

    Right of center the text starts at the point, otherwise it ends there.
    Below center (screen y down) the text hangs under the point, otherwise it
    sits on it.
    """
    width, height = text_size
    x = point[0] if point[0] > center[0] else point[0] - width
    y = point[1] + height if point[1] > center[1] else point[1]
    return (x, y)


def paint_chart(intent: RenderIntent, renderer: Renderer) -> None:
    """Issue the draw calls for one frame.

    Order: rings, data polygon, axis lines with labels.
    """
    for shape in intent.rings:
        ring = shape.ring
        if intent.ring_mode is RingMode.CIRCLES:
            renderer.draw_circle(intent.center, ring.fixed_radius, ring.color, shape.stroke_width)
        else:
            renderer.draw_closed_path(shape.vertices, GraphStyle.STROKE, ring.color, shape.stroke_width)

    data = intent.data
    if data is not None:
        if data.is_point:
            renderer.draw_point(data.points[0], data.color, data.width)
        else:
            renderer.draw_closed_path(data.points, data.style, data.color, data.width)

    for axis in intent.axes:
        renderer.draw_line(axis.start, axis.end, intent.axis_color, intent.axis_width)
        size = renderer.measure_text(axis.name, intent.text_size)
        x, y = label_anchor(axis.end, intent.center, size)
        renderer.draw_text(axis.name, x, y, intent.text_size, intent.axis_color)
