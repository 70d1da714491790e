"""Enumerations for whitescreen."""

from enum import Enum


class InputTab(str, Enum):
    """Control dock tabs (how the current color was chosen)."""

    PRESETS = "presets"  # Swatch palette
    CUSTOM = "custom"  # Hex picker and RGB inputs
    TEMPERATURE = "temperature"  # Kelvin slider
