"""Swatch model and the built-in swatch palette."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from whitescreen.colors import normalize_hex
from whitescreen.exceptions import InvalidColorFormatError

from .color import Color


class Swatch(BaseModel):
    """A named one-click color preset."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Display name")
    color: str = Field(description="Hex color (#RRGGBB)")

    @field_validator("color", mode="before")
    @classmethod
    def validate_color(cls, v: object) -> str:
        """Normalize to canonical ``#RRGGBB``."""
        try:
            return normalize_hex(v)
        except InvalidColorFormatError as e:
            raise ValueError(e.user_message) from e

    def to_color(self) -> Color:
        """The swatch color as a Color model."""
        return Color.from_hex(self.color)


# Built-in palette, shown in the Presets tab in this order.
# Whites first (cool to warm), then saturated colors for tinted lighting.
DEFAULT_SWATCHES: list[Swatch] = [
    Swatch(name="White", color="#FFFFFF"),
    Swatch(name="Daylight", color="#FFF9FD"),
    Swatch(name="Neutral", color="#FFF4E5"),
    Swatch(name="Warm", color="#FFD6AA"),
    Swatch(name="Candle", color="#FF9329"),
    Swatch(name="Red", color="#FF0000"),
    Swatch(name="Orange", color="#FF8000"),
    Swatch(name="Yellow", color="#FFFF00"),
    Swatch(name="Green", color="#00FF00"),
    Swatch(name="Cyan", color="#00FFFF"),
    Swatch(name="Blue", color="#0000FF"),
    Swatch(name="Magenta", color="#FF00FF"),
    Swatch(name="Pink", color="#FF80C0"),
    Swatch(name="Black", color="#000000"),
]
