"""colorcomp: RGB, HEX and HSV color conversion with complementary colors."""

__version__ = "0.1.0"

from .complement import hsv_complement, rgb_complement
from .models import Color, ConverterConfig, HuePolicy

__all__ = [
    "Color",
    "ConverterConfig",
    "HuePolicy",
    "hsv_complement",
    "rgb_complement",
]
