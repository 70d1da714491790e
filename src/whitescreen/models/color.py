"""Color model for the light surface."""

from pydantic import BaseModel, ConfigDict, Field

from whitescreen.colors import decode_hex, encode_hex, kelvin_to_rgb
from whitescreen.utils import clamp


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    The RGB triple is the canonical representation; the ``#RRGGBB`` string
    is derived from it on demand so the two can never disagree.

    The model is frozen: a color is replaced wholesale, never edited one
    channel at a time.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def black(cls) -> "Color":
        """Create black."""
        return cls(r=0, g=0, b=0)

    @classmethod
    def white(cls) -> "Color":
        """Create full white."""
        return cls(r=255, g=255, b=255)

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Create a color from a 6-digit hex string.

        Raises:
            InvalidColorFormatError: If the text is not a valid hex color

        Example:
            >>> Color.from_hex("#ff0080")
            Color(r=255, g=0, b=128)
        """
        r, g, b = decode_hex(text)
        return cls(r=r, g=g, b=b)

    @classmethod
    def from_channels(cls, r: float, g: float, b: float) -> "Color":
        """Create a color from raw channel input, clamping each to 0-255.

        Example:
            >>> Color.from_channels(300, -10, 128)
            Color(r=255, g=0, b=128)
        """
        return cls(r=clamp(r, 0, 255), g=clamp(g, 0, 255), b=clamp(b, 0, 255))

    @classmethod
    def from_kelvin(cls, kelvin: float) -> "Color":
        """Create the approximate color of a black-body at ``kelvin``."""
        r, g, b = kelvin_to_rgb(kelvin)
        return cls(r=r, g=g, b=b)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to canonical hex color string (e.g., '#FF0000').

        Returns:
            str: Hex color string in format '#RRGGBB'
        """
        return encode_hex(self.r, self.g, self.b)
