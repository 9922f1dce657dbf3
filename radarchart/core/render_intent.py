"""Immutable render-intent payload handed to renderers.

Everything a renderer needs to draw one frame; nothing here refers back to
the mutable chart state.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Tuple

from radarchart.core.color_gradient import RGB
from radarchart.core.ring_builder import Ring
from radarchart.core.vertex_projector import Point

# Rings are stroked slightly wider than their band so neighbours overlap
RING_STROKE_EXTRA = 2.0


class RingMode(StrEnum):
    """How ring bands are drawn."""

    CIRCLES = "circles"
    POLYGONS = "polygons"


class GraphStyle(StrEnum):
    """Paint style of the data polygon."""

    STROKE = "stroke"
    FILL = "fill"
    STROKE_AND_FILL = "stroke_and_fill"


def ring_mode_for(axis_count: int, circles_only: bool) -> RingMode:
    """Fewer than 3 axes cannot form a polygon, so rings fall back to circles."""
    if axis_count < 3 or circles_only:
        return RingMode.CIRCLES
    return RingMode.POLYGONS


def ring_stroke_width(ring: Ring, mode: RingMode, axis_count: int) -> float:
    """Pen width for a ring band.

    Polygon edges are closer to the center than their corners by cos(pi/n);
    scaling the band width by that keeps the band visually uniform.
    """
    if mode is RingMode.CIRCLES:
        return ring.width + RING_STROKE_EXTRA
    return ring.width * math.cos(math.pi / axis_count) + RING_STROKE_EXTRA


@dataclass(frozen=True)
class RingShape:
    ring: Ring
    stroke_width: float
    vertices: Tuple[Point, ...]


@dataclass(frozen=True)
class AxisLine:
    name: str
    start: Point
    end: Point


@dataclass(frozen=True)
class DataPolygon:
    """The data sample outline.

    Attributes:
        points: closed path vertices; a single center point when is_point
        is_point: fewer than two axes, nothing to connect
    """

    points: Tuple[Point, ...]
    style: GraphStyle
    color: RGB
    width: float
    is_point: bool = False


@dataclass(frozen=True)
class RenderIntent:
    center: Point
    pixel_radius: float
    ring_mode: RingMode
    rings: Tuple[RingShape, ...]
    axes: Tuple[AxisLine, ...]
    data: DataPolygon | None
    axis_color: RGB
    axis_width: float
    text_size: float
