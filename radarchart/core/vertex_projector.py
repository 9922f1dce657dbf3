"""Pure geometry calculations for the radar chart.

NO toolkit imports - all functions are pure and deterministic.

Coordinate System (screen):
- Origin at top-left, Y increases downward
- Angle -pi/2 = up (12 o'clock), angles increase clockwise on screen

Radar Layout:
- Axis 0 at 12 o'clock (top)
- Axis i at START_ANGLE + i * 2*pi / axis_count (clockwise)
"""
from __future__ import annotations

import math
from typing import Iterable, List, Tuple

Point = Tuple[float, float]

START_ANGLE = -math.pi / 2  # 12 o'clock position in screen coordinates


def axis_angle(angle_index: int, axis_count: int, start_angle: float = START_ANGLE) -> float:
    """Angle (radians) of axis ``angle_index`` out of ``axis_count``."""
    return start_angle + angle_index * 2 * math.pi / axis_count


def project(
    magnitude: float,
    angle_index: int,
    axis_count: int,
    center: Point,
    start_angle: float = START_ANGLE,
) -> Point:
    """Calculate (x, y) from a polar (magnitude, axis index) pair.

    Args:
        magnitude: distance from center in pixels
        angle_index: 0..axis_count-1 (clockwise, 0=top)
        axis_count: number of axes (> 0)
        center: (cx, cy) center coordinate

    Returns:
        (x, y) pixel coordinate (screen coordinate system: Y increases downward)
    """
    angle = axis_angle(angle_index, axis_count, start_angle)
    return (
        center[0] + magnitude * math.cos(angle),
        center[1] + magnitude * math.sin(angle),
    )


class VertexProjector:
    """Projects magnitudes onto the chart's axes around a fixed center."""

    def __init__(self, center: Point = (0.0, 0.0), start_angle: float = START_ANGLE) -> None:
        self.center = center
        self.start_angle = start_angle

    def project(self, magnitude: float, angle_index: int, axis_count: int) -> Point:
        return project(magnitude, angle_index, axis_count, self.center, self.start_angle)

    def project_all(self, magnitude: float, axis_count: int) -> Tuple[Point, ...]:
        """Same magnitude on every axis: a ring outline or the axis-line endpoints.

        Returns:
            axis_count points, empty when axis_count == 0
        """
        return tuple(self.project(magnitude, i, axis_count) for i in range(axis_count))

    def project_values(self, values: Iterable[float], ratio: float) -> Tuple[Point, ...]:
        """Data polygon vertices: each value scaled by ``ratio`` on its own axis."""
        values = list(values)
        count = len(values)
        points: List[Point] = [self.project(value * ratio, i, count) for i, value in enumerate(values)]
        return tuple(points)
