"""Two-color linear gradient used for ring band colors.

Pure functions, no toolkit imports. Colors are plain ``(r, g, b)`` integer
tuples in the 0-255 range so every renderer can convert them its own way.
"""
from __future__ import annotations

import math
from typing import Any, Sequence, Tuple

from radarchart.core.errors import ConfigError

RGB = Tuple[int, int, int]

# Maximum number of distinct bands in stepped (non-smooth) sampling
STEPPED_LEVELS = 5


def _clamp_channel(value: float) -> int:
    # Round half up (round() would use banker's rounding)
    return int(math.floor(max(0.0, min(255.0, value)) + 0.5))


def interpolate(start: RGB, end: RGB, step: int, total_steps: int) -> RGB:
    """Interpolate each channel linearly between ``start`` and ``end``.

    Args:
        start: color at step 0
        end: color at step total_steps - 1
        step: 0 <= step < total_steps
        total_steps: >= 1; a single step always yields ``start``

    Returns:
        (r, g, b) with each channel clamped to [0, 255] and rounded
    """
    if total_steps <= 1:
        return (_clamp_channel(start[0]), _clamp_channel(start[1]), _clamp_channel(start[2]))
    fraction = step / (total_steps - 1)
    return (
        _clamp_channel(start[0] + (end[0] - start[0]) * fraction),
        _clamp_channel(start[1] + (end[1] - start[1]) * fraction),
        _clamp_channel(start[2] + (end[2] - start[2]) * fraction),
    )


def sample(start: RGB, end: RGB, index: int, count: int, smooth: bool = True) -> RGB:
    """Pick the gradient color for ring ``index`` out of ``count`` rings.

    Smooth sampling interpolates once per ring. Stepped sampling groups the
    rings into at most STEPPED_LEVELS bands that share a color.
    """
    if smooth:
        return interpolate(start, end, index, count)
    levels = min(count, STEPPED_LEVELS)
    bucket = index * levels // count if count > 0 else 0
    return interpolate(start, end, bucket, levels)


def parse_color(value: Any) -> RGB:
    """Parse ``"#rrggbb"``, ``"#rgb"`` or a 3-sequence of ints into RGB.

    Raises:
        ConfigError: value is not a recognizable color
    """
    if isinstance(value, str):
        text = value.strip().lstrip("#")
        if len(text) == 3:
            text = "".join(ch * 2 for ch in text)
        if len(text) == 6:
            try:
                return (int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))
            except ValueError:
                pass
        raise ConfigError(f"Invalid color string: {value!r}", context={"value": value})

    if isinstance(value, Sequence) and len(value) == 3:
        channels = []
        for channel in value:
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ConfigError(f"Invalid color channel in {value!r}", context={"value": value})
            channels.append(channel)
        return (channels[0], channels[1], channels[2])

    raise ConfigError(f"Unsupported color value: {value!r}", context={"value": value})
