"""Complementary color functions.

Two notions of "complement" are provided:

- `rgb_complement`: per-channel inversion (255 - channel). Exact; applying
  it twice returns the original color.
- `hsv_complement`: 180 degree hue rotation with saturation and value kept.
  The round trip through floating point HSV may move a channel by up to 1,
  so applying it twice returns the original color within +/-1 per channel.

Both are pure functions returning new `Color` instances.
"""

import logging

from colorcomp.models import Color

logger = logging.getLogger(__name__)


def rgb_complement(color: Color) -> Color:
    """Invert each channel in RGB space."""
    return Color(r=255 - color.r, g=255 - color.g, b=255 - color.b)


def hsv_complement(color: Color) -> Color:
    """Rotate the hue by 180 degrees, keeping saturation and value."""
    hue, saturation, value = color.to_hsv()
    new_hue = (hue + 180.0) % 360.0
    logger.debug(f"HSV complement of {color}: hue {hue} -> {new_hue}")
    return Color.from_hsv(new_hue, saturation, value)
