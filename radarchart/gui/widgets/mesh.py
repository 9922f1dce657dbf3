"""Triangle-fan mesh data for filling a radar polygon.

NO Kivy imports - used by the Kivy renderer, tested headless.

Radar polygons are star-shaped around the chart center, so a fan anchored
at the center covers them exactly even when they are not convex.
"""
from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from radarchart.core.vertex_projector import Point


def build_mesh_data(
    polygon: Sequence[Point],
    center: Point,
) -> Tuple[List[float], List[int]]:
    """Generate vertices and indices for a Kivy Mesh (triangles mode).

    Args:
        polygon: open vertex list (the closing point is implied)
        center: fan anchor

    Returns:
        (vertices, indices)
        vertices: [cx, cy, 0, 0, x0, y0, 0, 0, ...]
        indices: [0, 1, 2, 0, 2, 3, ..., 0, n, 1]
        Both are empty for fewer than 3 points or non-finite coordinates.
    """
    n = len(polygon)
    if n < 3:
        return ([], [])
    coords = [center[0], center[1]] + [c for point in polygon for c in point]
    if not all(math.isfinite(c) for c in coords):
        return ([], [])

    vertices: List[float] = [center[0], center[1], 0.0, 0.0]
    for x, y in polygon:
        vertices.extend([x, y, 0.0, 0.0])

    indices: List[int] = []
    for i in range(1, n):
        indices.extend([0, i, i + 1])
    indices.extend([0, n, 1])
    return (vertices, indices)


def flatten_closed(points: Sequence[Point]) -> List[float]:
    """[x0, y0, x1, y1, ..., x0, y0] for Kivy Line(points=...)."""
    flat: List[float] = [c for point in points for c in point]
    if points:
        flat.extend(points[0])
    return flat
