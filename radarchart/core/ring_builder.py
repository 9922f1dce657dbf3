"""Concentric ring bands for the radar chart background.

NO toolkit imports - ring construction is pure and deterministic.

Rings are ordered innermost -> outermost. Each ring is a band ``width`` pixels
wide whose outer edge is ``radius``; renderers stroke it along
``fixed_radius`` (the band's middle) with a pen as wide as the band.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from radarchart.core.color_gradient import RGB, sample

logger = logging.getLogger(__name__)

# Upper bound on ring count; a tinier axis_tick is spread over this many rings
MAX_RINGS = 1000


@dataclass(frozen=True)
class Ring:
    """One reference band.

    Attributes:
        radius: outer edge in pixels
        width: band width in pixels
        color: band color
    """

    radius: float
    width: float
    color: RGB

    @property
    def fixed_radius(self) -> float:
        """Radius of the band's center line (where the stroke is drawn)."""
        return self.radius - self.width / 2


def tick_pixels(axis_max: float, axis_tick: float, pixel_radius: float) -> float:
    """Convert axis_tick from data units to pixels.

    A zero axis_max has no meaningful data->pixel ratio; the tick is then
    taken as-is (ratio 1).
    """
    if axis_max > 0:
        return axis_tick * pixel_radius / axis_max
    return axis_tick


def _uncapped_count(tick_px: float, pixel_radius: float) -> Optional[int]:
    """Rings needed at ``tick_px`` spacing, or None above MAX_RINGS.

    A tick that underflows to 0 px counts as needing infinitely many rings.
    """
    quotient = pixel_radius / tick_px if tick_px > 0 else math.inf
    if not quotient <= MAX_RINGS:
        return None
    count = max(int(math.ceil(quotient)), 1)
    # Float drift can push ceil() one ring past an exact multiple
    while count > 1 and tick_px * (count - 1) >= pixel_radius:
        count -= 1
    return count


def ring_count(axis_max: float, axis_tick: float, pixel_radius: float) -> int:
    """Number of rings for the given scale; always in 1..MAX_RINGS."""
    if axis_max <= 0 or pixel_radius <= 0:
        return 1
    count = _uncapped_count(tick_pixels(axis_max, axis_tick, pixel_radius), pixel_radius)
    return MAX_RINGS if count is None else count


def build_rings(
    axis_max: float,
    axis_tick: float,
    pixel_radius: float,
    start_color: RGB,
    end_color: RGB,
    smooth: bool = True,
) -> Tuple[Ring, ...]:
    """Build the ring sequence.

    Args:
        axis_max: data-unit maximum (>= 0)
        axis_tick: data-unit ring spacing (> 0)
        pixel_radius: usable chart radius in pixels (>= 0)
        start_color: innermost ring color
        end_color: outermost ring color
        smooth: per-ring gradient sampling (True) or stepped bands (False)

    Returns:
        Rings ordered innermost -> outermost. The outermost radius is exactly
        pixel_radius and its width spans the gap to the previous ring. When the
        tick would need more than MAX_RINGS rings, MAX_RINGS evenly spaced
        rings are built instead.
    """
    if axis_max <= 0 or pixel_radius <= 0:
        return (Ring(radius=pixel_radius, width=pixel_radius, color=start_color),)

    tick_px = tick_pixels(axis_max, axis_tick, pixel_radius)
    count = _uncapped_count(tick_px, pixel_radius)
    if count is None:
        logger.warning(
            "axis_max=%s, axis_tick=%s needs more than %d rings; check the tick spacing",
            axis_max,
            axis_tick,
            MAX_RINGS,
        )
        count = MAX_RINGS
        tick_px = pixel_radius / MAX_RINGS
    if count == 1:
        return (Ring(radius=pixel_radius, width=pixel_radius, color=start_color),)

    rings: List[Ring] = [
        Ring(radius=tick_px * (i + 1), width=tick_px, color=sample(start_color, end_color, i, count, smooth))
        for i in range(count - 1)
    ]
    # Pin the outer edge to pixel_radius; tick multiplication drifts
    rings.append(Ring(radius=pixel_radius, width=pixel_radius - rings[-1].radius, color=end_color))
    return tuple(rings)
