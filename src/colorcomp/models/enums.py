"""Enumerations for color conversion."""

from enum import Enum


class HuePolicy(str, Enum):
    """How HSV->RGB conversion treats hue values outside [0, 360]."""

    BLACK = "black"
    """Out-of-domain hue selects no sextant; chroma components drop to zero."""

    WRAP = "wrap"
    """Finite hue is reduced modulo 360 before the sextant is selected."""
