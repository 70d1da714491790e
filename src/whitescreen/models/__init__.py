"""Data models for whitescreen."""

from .color import Color
from .config import AppConfig
from .enums import InputTab
from .state import ColorSnapshot, ColorState
from .swatch import DEFAULT_SWATCHES, Swatch

__all__ = [
    # Models
    "AppConfig",
    "Color",
    "ColorSnapshot",
    "ColorState",
    "DEFAULT_SWATCHES",
    # Enums
    "InputTab",
    "Swatch",
]
