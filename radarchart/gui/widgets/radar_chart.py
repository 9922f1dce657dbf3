"""Radar chart Kivy widget."""
from __future__ import annotations

import logging
from typing import Any, Sequence, Tuple

from kivy.clock import Clock
from kivy.core.text import Label as CoreLabel
from kivy.graphics import Color, Ellipse, Line, Mesh, Rectangle
from kivy.metrics import dp
from kivy.properties import ListProperty, ObjectProperty
from kivy.uix.relativelayout import RelativeLayout

from radarchart.core.chart_geometry import ChartGeometry
from radarchart.core.color_gradient import RGB
from radarchart.core.render_intent import GraphStyle
from radarchart.core.renderer import paint_chart
from radarchart.core.state import Event
from radarchart.core.vertex_projector import Point
from radarchart.gui.widgets.mesh import build_mesh_data, flatten_closed

logger = logging.getLogger(__name__)


def _rgba(color: RGB) -> Tuple[float, float, float, float]:
    return (color[0] / 255.0, color[1] / 255.0, color[2] / 255.0, 1.0)


class KivyCanvasRenderer:
    """Renderer issuing Kivy canvas instructions.

    Must be used inside a ``with canvas:`` block. Chart geometry is in screen
    coordinates (y down); Kivy's y axis points up, so every y is flipped
    against the widget height.
    """

    def __init__(self, height: float, fan_center: Point) -> None:
        self._height = height
        # Filled polygons are star-shaped around the chart center
        self._fan_center = self._flip(fan_center)

    def _flip(self, point: Point) -> Point:
        return (point[0], self._height - point[1])

    def draw_circle(self, center: Point, radius: float, color: RGB, width: float) -> None:
        cx, cy = self._flip(center)
        Color(*_rgba(color))
        # Kivy's Line width is measured from the center line outward
        Line(circle=(cx, cy, radius), width=width / 2)

    def draw_closed_path(self, points: Sequence[Point], style: GraphStyle, color: RGB, width: float) -> None:
        flipped = [self._flip(p) for p in points]
        Color(*_rgba(color))
        if style in (GraphStyle.FILL, GraphStyle.STROKE_AND_FILL):
            vertices, indices = build_mesh_data(flipped, self._fan_center)
            if vertices:
                Mesh(vertices=vertices, indices=indices, mode="triangles")
        if style in (GraphStyle.STROKE, GraphStyle.STROKE_AND_FILL):
            Line(points=flatten_closed(flipped), width=width / 2, joint="miter")

    def draw_line(self, start: Point, end: Point, color: RGB, width: float) -> None:
        (x0, y0), (x1, y1) = self._flip(start), self._flip(end)
        Color(*_rgba(color))
        Line(points=[x0, y0, x1, y1], width=width / 2)

    def draw_point(self, point: Point, color: RGB, width: float) -> None:
        x, y = self._flip(point)
        Color(*_rgba(color))
        Ellipse(pos=(x - width / 2, y - width / 2), size=(width, width))

    def _texture(self, text: str, font_size: float) -> Any:
        label = CoreLabel(text=text, font_size=font_size)
        label.refresh()
        return label.texture

    def draw_text(self, text: str, x: float, y: float, font_size: float, color: RGB) -> None:
        texture = self._texture(text, font_size)
        Color(*_rgba(color))
        # (x, y) is the screen-space baseline origin; the texture hangs above it
        Rectangle(texture=texture, pos=(x, self._height - y), size=texture.size)

    def measure_text(self, text: str, font_size: float) -> Tuple[float, float]:
        width, height = self._texture(text, font_size).size
        return (float(width), float(height))


class RadarChartWidget(RelativeLayout):
    """Radar chart widget.

    Properties:
        chart: the ChartGeometry drawn by this widget
        chart_padding: [left, top, right, bottom] insets
    """

    chart = ObjectProperty(None, rebind=True)
    chart_padding = ListProperty([dp(24), dp(24), dp(24), dp(24)])

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        if self.chart is None:
            self.chart = ChartGeometry()
        self._subscribed: ChartGeometry | None = None
        self._redraw_trigger = Clock.create_trigger(self._do_redraw, 0)
        self._relayout_trigger = Clock.create_trigger(self._do_relayout, 0)
        self._attach(self.chart)

        self.bind(chart=lambda _, chart: self._attach(chart))
        for prop in ("size", "chart_padding"):
            self.bind(**{prop: self._schedule_relayout})

    def _attach(self, chart: ChartGeometry) -> None:
        if self._subscribed is not None:
            self._subscribed.unsubscribe(self._on_chart_changed)
        chart.subscribe(self._on_chart_changed)
        self._subscribed = chart
        self._schedule_relayout()

    def _on_chart_changed(self, event: Event) -> None:
        self._redraw_trigger()

    def _schedule_relayout(self, *_: Any) -> None:
        self._relayout_trigger()

    def _do_relayout(self, *_: Any) -> None:
        left, top, right, bottom = self.chart_padding
        self.chart.resize(self.width, self.height, (left, top, right, bottom))
        logger.debug("Kivy relayout %sx%s -> pixel_radius=%s", self.width, self.height, self.chart.pixel_radius)

    def _do_redraw(self, *_: Any) -> None:
        self.canvas.before.clear()

        # Guard: Skip if widget not properly sized
        if self.width <= 0 or self.height <= 0:
            return

        with self.canvas.before:
            paint_chart(self.chart.render_intent(), KivyCanvasRenderer(self.height, self.chart.center))
