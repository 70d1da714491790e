"""Whitescreen: full-screen adjustable light source."""

__version__ = "0.1.0"

# Core state and conversions
from .models import Color, ColorState

# Rendering
from .rendering import ImageExporter, composite

# Session service
from .services import LightService

__all__ = [
    "Color",
    "ColorState",
    "ImageExporter",
    "LightService",
    "composite",
]
