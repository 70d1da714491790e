"""Domain events for observer pattern.

Light events describe ephemeral session changes. Nothing here is saved
to disk.
"""

from enum import Enum


class LightEvent(Enum):
    """Events from the light session."""

    COLOR_CHANGED = "color_changed"            # Color set from hex, RGB or a swatch
    TEMPERATURE_CHANGED = "temperature_changed"  # Kelvin applied (color changed too)
    BRIGHTNESS_CHANGED = "brightness_changed"  # Brightness percent changed
    TAB_CHANGED = "tab_changed"                # Active control tab changed
