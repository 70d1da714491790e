"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer, field_validator

from whitescreen.colors import DEFAULT_KELVIN, KELVIN_MAX, KELVIN_MIN, normalize_hex
from whitescreen.exceptions import InvalidColorFormatError, UnknownSwatchError
from whitescreen.model_manager.persistence import PydanticPersistence

from .enums import InputTab
from .swatch import DEFAULT_SWATCHES, Swatch

DEFAULT_CONFIG_PATH = Path.home() / ".whitescreen" / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings.

    These are startup defaults, not session state: the color, brightness
    and temperature a user picks while running are never written back.
    """

    # Startup state
    default_color: str = Field(default="#FFFFFF", description="Color shown at startup (#RRGGBB)")
    default_brightness: int = Field(
        default=100, ge=0, le=100, description="Brightness percent at startup"
    )
    default_kelvin: int = Field(
        default=DEFAULT_KELVIN,
        ge=KELVIN_MIN,
        le=KELVIN_MAX,
        description="Initial position of the temperature slider (Kelvin)",
    )
    default_tab: InputTab = Field(default=InputTab.PRESETS, description="Control tab open at startup")

    # Export settings
    export_dir: Path = Field(
        default_factory=lambda: Path.home() / "Pictures",
        description="Directory where exported images are written",
    )
    export_width: int = Field(
        default=1920, gt=0, description="Export width in pixels when the screen size is unknown"
    )
    export_height: int = Field(
        default=1080, gt=0, description="Export height in pixels when the screen size is unknown"
    )

    # Presets tab
    swatches: list[Swatch] = Field(
        default_factory=lambda: list(DEFAULT_SWATCHES),
        description="Swatch palette shown in the Presets tab",
    )

    @field_validator("default_color", mode="before")
    @classmethod
    def validate_default_color(cls, v: object) -> str:
        """Normalize to canonical ``#RRGGBB``."""
        try:
            return normalize_hex(v)
        except InvalidColorFormatError as e:
            raise ValueError(e.user_message) from e

    @field_validator("swatches")
    @classmethod
    def validate_unique_swatch_names(cls, v: list[Swatch]) -> list[Swatch]:
        """Swatch names are looked up case-insensitively, so they must be unique."""
        seen: set[str] = set()
        for swatch in v:
            key = swatch.name.casefold()
            if key in seen:
                raise ValueError(f"Duplicate swatch name: {swatch.name}")
            seen.add(key)
        return v

    @field_serializer("export_dir")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    @property
    def export_resolution(self) -> tuple[int, int]:
        """Default export size as (width, height)."""
        return (self.export_width, self.export_height)

    def find_swatch(self, name: str) -> Swatch:
        """
        Look up a swatch by name (case-insensitive).

        Raises:
            UnknownSwatchError: If no swatch has that name
        """
        key = name.casefold()
        for swatch in self.swatches:
            if swatch.name.casefold() == key:
                return swatch
        raise UnknownSwatchError(name, [s.name for s in self.swatches])

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.whitescreen/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
