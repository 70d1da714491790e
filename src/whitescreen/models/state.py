"""Color state model: the single source of truth for the light surface."""

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from whitescreen.colors import DEFAULT_KELVIN, encode_hex
from whitescreen.exceptions import InvalidInputTabError
from whitescreen.utils import clamp

from .color import Color
from .enums import InputTab

if TYPE_CHECKING:
    from .config import AppConfig

logger = logging.getLogger(__name__)


class ColorSnapshot(BaseModel):
    """Immutable copy of a ColorState taken at one instant.

    Exports read a snapshot so that later state changes cannot produce a
    half-updated image.
    """

    model_config = ConfigDict(frozen=True)

    color: Color
    brightness: int = Field(ge=0, le=100)
    kelvin: int | float
    active_tab: InputTab

    @property
    def hex(self) -> str:
        """Canonical ``#RRGGBB`` form of the color."""
        return self.color.to_hex()

    @property
    def rgb(self) -> tuple[int, int, int]:
        """The color as an RGB tuple."""
        return self.color.to_rgb_tuple()


class ColorState(BaseModel):
    """
    Current color, brightness and temperature of the light surface.

    The RGB ``color`` is the only stored color representation; ``hex`` and
    ``rgb`` are derived views, so after any mutator returns all three agree.
    ``kelvin`` records the last temperature that was applied. It is an
    input only: setting a color from hex or RGB leaves it untouched because
    there is no color -> temperature inverse.

    Mutators are atomic. A rejected input raises before any field changes.
    Numeric inputs outside their range are clamped rather than rejected.
    Refreshing widgets or the rendered surface is the caller's job; see
    ``LightService`` for a wrapper that notifies observers.

    Example:
        ```python
        state = ColorState()
        state.set_kelvin(2700).set_brightness(80)
        state.hex         # '#FFA757'
        state.brightness  # 80
        ```
    """

    color: Color = Field(default_factory=Color.white, description="Current color")
    brightness: int = Field(default=100, ge=0, le=100, description="Brightness percent (100 = no dimming)")
    kelvin: int | float = Field(default=DEFAULT_KELVIN, description="Last applied color temperature")
    active_tab: InputTab = Field(default=InputTab.PRESETS, description="Active control tab")

    @classmethod
    def from_config(cls, config: "AppConfig") -> "ColorState":
        """Build the initial state from configured defaults."""
        state = cls(kelvin=config.default_kelvin, active_tab=config.default_tab)
        state.set_color(config.default_color)
        state.set_brightness(config.default_brightness)
        return state

    # =================================================================
    # Derived views
    # =================================================================

    @property
    def hex(self) -> str:
        """Canonical ``#RRGGBB`` form of the current color."""
        return self.color.to_hex()

    @property
    def rgb(self) -> tuple[int, int, int]:
        """The current color as an RGB tuple."""
        return self.color.to_rgb_tuple()

    # =================================================================
    # Mutators
    # =================================================================

    def set_color(self, hex_color: str) -> "ColorState":
        """
        Replace the current color.

        Args:
            hex_color: 6-digit hex color, ``#`` optional, any case

        Returns:
            self, for chaining

        Raises:
            InvalidColorFormatError: If the text is not a hex color.
                The state is left unchanged.
        """
        self.color = Color.from_hex(hex_color)
        logger.debug(f"Color set to {self.hex}")
        return self

    def set_kelvin(self, kelvin: int | float) -> "ColorState":
        """
        Apply a color temperature.

        The temperature is stored as given (no bounds are enforced) and the
        color is replaced by its approximate RGB equivalent.

        Args:
            kelvin: Color temperature in Kelvin

        Returns:
            self, for chaining
        """
        hex_color = Color.from_kelvin(kelvin).to_hex()
        self.kelvin = kelvin
        self.set_color(hex_color)
        logger.debug(f"Temperature set to {kelvin}K ({hex_color})")
        return self

    def set_brightness(self, percent: float) -> "ColorState":
        """
        Set brightness, clamped to 0-100.

        Args:
            percent: Brightness percent (100 = full intensity, 0 = dark)

        Returns:
            self, for chaining
        """
        self.brightness = clamp(percent, 0, 100)
        return self

    def set_from_rgb_channels(self, r: float, g: float, b: float) -> "ColorState":
        """
        Replace the current color from individual channel inputs.

        Each channel is clamped to 0-255. The stored temperature is not
        changed.

        Returns:
            self, for chaining
        """
        hex_color = encode_hex(clamp(r, 0, 255), clamp(g, 0, 255), clamp(b, 0, 255))
        return self.set_color(hex_color)

    def set_active_tab(self, tab: InputTab | str) -> "ColorState":
        """
        Record which control tab is active.

        Raises:
            InvalidInputTabError: If ``tab`` is not a known tab
        """
        try:
            self.active_tab = InputTab(tab)
        except ValueError as e:
            raise InvalidInputTabError(tab, [t.value for t in InputTab]) from e
        return self

    def snapshot(self) -> ColorSnapshot:
        """Take an immutable copy of the current state."""
        return ColorSnapshot(
            color=self.color,
            brightness=self.brightness,
            kelvin=self.kelvin,
            active_tab=self.active_tab,
        )
