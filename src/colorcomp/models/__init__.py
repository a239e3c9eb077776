"""Data models for colorcomp."""

from .color import Color
from .config import ConverterConfig
from .enums import HuePolicy

__all__ = [
    # Models
    "Color",
    "ConverterConfig",
    # Enums
    "HuePolicy",
]
