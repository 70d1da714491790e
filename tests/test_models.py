"""Unit tests for Pydantic models."""

import math

import pytest
from pydantic import ValidationError

from whitescreen.exceptions import (
    InvalidColorFormatError,
    InvalidInputTabError,
    UnknownSwatchError,
)
from whitescreen.models import (
    DEFAULT_SWATCHES,
    AppConfig,
    Color,
    ColorSnapshot,
    ColorState,
    InputTab,
    Swatch,
)


class TestColor:
    """Test Color model."""

    @pytest.mark.unit
    def test_create_valid(self):
        """Test creating a valid color."""
        color = Color(r=255, g=0, b=128)
        assert color.to_rgb_tuple() == (255, 0, 128)
        assert color.to_hex() == "#FF0080"

    @pytest.mark.unit
    def test_channel_bounds(self):
        """Test channels outside 0-255 fail validation."""
        with pytest.raises(ValidationError):
            Color(r=256, g=0, b=0)
        with pytest.raises(ValidationError):
            Color(r=0, g=-1, b=0)

    @pytest.mark.unit
    def test_frozen(self):
        """Test colors cannot be edited in place."""
        color = Color.white()
        with pytest.raises(ValidationError):
            color.r = 0

    @pytest.mark.unit
    def test_factories(self):
        """Test the named constructors."""
        assert Color.black().to_hex() == "#000000"
        assert Color.white().to_hex() == "#FFFFFF"
        assert Color.from_hex("ff0080") == Color(r=255, g=0, b=128)
        assert Color.from_channels(300, -10, 127.5) == Color(r=255, g=0, b=128)
        assert Color.from_kelvin(6500).to_rgb_tuple() == (255, 254, 250)

    @pytest.mark.unit
    def test_from_hex_invalid(self):
        """Test invalid hex raises the domain error, not a ValidationError."""
        with pytest.raises(InvalidColorFormatError):
            Color.from_hex("not a color")


class TestSwatch:
    """Test Swatch model."""

    @pytest.mark.unit
    def test_color_normalized(self):
        """Test the swatch color is stored in canonical form."""
        swatch = Swatch(name="Amber", color="ffbf00")
        assert swatch.color == "#FFBF00"
        assert swatch.to_color() == Color(r=255, g=191, b=0)

    @pytest.mark.unit
    def test_invalid_color(self):
        """Test invalid swatch colors fail validation."""
        with pytest.raises(ValidationError):
            Swatch(name="Bad", color="#GGGGGG")

    @pytest.mark.unit
    def test_empty_name(self):
        """Test swatches need a name."""
        with pytest.raises(ValidationError):
            Swatch(name="", color="#FFFFFF")

    @pytest.mark.unit
    def test_default_palette(self):
        """Test the built-in palette starts with white and has unique names."""
        assert DEFAULT_SWATCHES[0].name == "White"
        assert DEFAULT_SWATCHES[0].color == "#FFFFFF"
        names = [s.name.casefold() for s in DEFAULT_SWATCHES]
        assert len(names) == len(set(names))


class TestAppConfig:
    """Test AppConfig model."""

    @pytest.mark.unit
    def test_defaults(self):
        """Test default configuration values."""
        config = AppConfig()
        assert config.default_color == "#FFFFFF"
        assert config.default_brightness == 100
        assert config.default_kelvin == 6500
        assert config.default_tab == InputTab.PRESETS
        assert config.export_resolution == (1920, 1080)
        assert len(config.swatches) == len(DEFAULT_SWATCHES)

    @pytest.mark.unit
    def test_default_color_normalized(self):
        """Test the startup color is normalized."""
        assert AppConfig(default_color="ffd6aa").default_color == "#FFD6AA"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "field,value",
        [
            ("default_color", "#12345"),
            ("default_brightness", 101),
            ("default_brightness", -1),
            ("default_kelvin", 999),
            ("default_kelvin", 40001),
            ("default_tab", "sliders"),
            ("export_width", 0),
            ("export_height", -5),
        ],
    )
    def test_invalid_values(self, field, value):
        """Test out-of-range settings are rejected."""
        with pytest.raises(ValidationError):
            AppConfig(**{field: value})

    @pytest.mark.unit
    def test_duplicate_swatch_names(self):
        """Test swatch names must be unique ignoring case."""
        with pytest.raises(ValidationError, match="Duplicate swatch name"):
            AppConfig(
                swatches=[
                    Swatch(name="Warm", color="#FFD6AA"),
                    Swatch(name="warm", color="#FF9329"),
                ]
            )

    @pytest.mark.unit
    def test_find_swatch_case_insensitive(self):
        """Test swatch lookup ignores case."""
        config = AppConfig()
        assert config.find_swatch("candle").color == "#FF9329"
        assert config.find_swatch("WHITE").color == "#FFFFFF"

    @pytest.mark.unit
    def test_find_swatch_unknown(self):
        """Test unknown swatch names raise with the available names in the hint."""
        config = AppConfig(swatches=[Swatch(name="Only", color="#010203")])
        with pytest.raises(UnknownSwatchError) as exc_info:
            config.find_swatch("Missing")
        assert "Only" in exc_info.value.recovery_hint

    @pytest.mark.unit
    def test_export_dir_serialized_as_string(self, temp_dir):
        """Test Path fields dump to plain strings."""
        config = AppConfig(export_dir=temp_dir)
        assert config.model_dump(mode="json")["export_dir"] == str(temp_dir)

    @pytest.mark.unit
    def test_save_and_load(self, temp_dir):
        """Test config survives a save/load cycle."""
        path = temp_dir / "config.json"
        config = AppConfig(default_color="#FF9329", default_brightness=40, default_tab=InputTab.TEMPERATURE)
        config.save(path)

        loaded = AppConfig.load_or_default(path)
        assert loaded.default_color == "#FF9329"
        assert loaded.default_brightness == 40
        assert loaded.default_tab == InputTab.TEMPERATURE

    @pytest.mark.unit
    def test_load_missing_returns_default(self, temp_dir):
        """Test a missing config file gives the defaults."""
        config = AppConfig.load_or_default(temp_dir / "nope.json")
        assert config.default_color == "#FFFFFF"
        assert config.default_kelvin == 6500


class TestColorState:
    """Test ColorState model."""

    @pytest.mark.unit
    def test_initial_state(self, state):
        """Test the default state is full white at 6500K."""
        assert state.hex == "#FFFFFF"
        assert state.rgb == (255, 255, 255)
        assert state.brightness == 100
        assert state.kelvin == 6500
        assert state.active_tab == InputTab.PRESETS

    @pytest.mark.unit
    def test_set_kelvin(self, state):
        """Test applying a temperature updates color and stored Kelvin."""
        state.set_kelvin(6500)
        assert state.hex == "#FFFEFA"
        assert state.rgb == (255, 254, 250)
        assert state.kelvin == 6500

        state.set_kelvin(2700)
        assert state.hex == "#FFA757"
        assert state.kelvin == 2700

    @pytest.mark.unit
    def test_set_color(self, state):
        """Test setting a hex color."""
        state.set_color("#FF0000")
        assert state.rgb == (255, 0, 0)
        assert state.hex == "#FF0000"

    @pytest.mark.unit
    def test_set_color_canonicalizes(self, state):
        """Test lowercase input without # is stored canonically."""
        state.set_color("abcdef")
        assert state.hex == "#ABCDEF"

    @pytest.mark.unit
    def test_set_from_rgb_channels_clamps(self, state):
        """Test out-of-range channels are clamped."""
        state.set_from_rgb_channels(300, -10, 128)
        assert state.hex == "#FF0080"
        assert state.rgb == (255, 0, 128)

    @pytest.mark.unit
    def test_set_from_rgb_channels_rounds(self, state):
        """Test fractional channels round half up."""
        state.set_from_rgb_channels(0.5, 127.5, 254.4)
        assert state.rgb == (1, 128, 254)

    @pytest.mark.unit
    def test_invalid_color_leaves_state_unchanged(self, state):
        """Test a rejected color does not modify any field."""
        state.set_kelvin(2700).set_brightness(40)
        before = state.model_dump()

        with pytest.raises(InvalidColorFormatError):
            state.set_color("zzzzzz")

        assert state.model_dump() == before

    @pytest.mark.unit
    def test_color_input_keeps_kelvin(self, state):
        """Test hex and RGB input do not touch the stored temperature."""
        state.set_kelvin(3000)
        state.set_color("#00FF00")
        assert state.kelvin == 3000
        state.set_from_rgb_channels(1, 2, 3)
        assert state.kelvin == 3000

    @pytest.mark.unit
    def test_kelvin_unbounded(self, state):
        """Test out-of-range temperatures are stored as given."""
        state.set_kelvin(500)
        assert state.kelvin == 500
        assert all(0 <= c <= 255 for c in state.rgb)

        state.set_kelvin(100_000)
        assert state.kelvin == 100_000
        assert state.rgb[2] == 255

    @pytest.mark.unit
    def test_kelvin_nan(self, state):
        """Test NaN temperature still yields a valid color."""
        state.set_kelvin(math.nan)
        assert state.hex == "#000000"

    @pytest.mark.unit
    def test_brightness_clamped(self, state):
        """Test brightness is clamped to 0-100."""
        assert state.set_brightness(150).brightness == 100
        assert state.set_brightness(-20).brightness == 0
        assert state.set_brightness(49.5).brightness == 50

    @pytest.mark.unit
    def test_brightness_keeps_color(self, red_state):
        """Test brightness does not change the stored color."""
        red_state.set_brightness(10)
        assert red_state.hex == "#FF0000"

    @pytest.mark.unit
    def test_chaining(self, state):
        """Test mutators return the state."""
        result = state.set_kelvin(2700).set_brightness(80).set_active_tab("temperature")
        assert result is state
        assert state.hex == "#FFA757"
        assert state.brightness == 80

    @pytest.mark.unit
    def test_set_active_tab(self, state):
        """Test tabs can be set by enum or value."""
        state.set_active_tab(InputTab.CUSTOM)
        assert state.active_tab == InputTab.CUSTOM
        state.set_active_tab("temperature")
        assert state.active_tab == InputTab.TEMPERATURE

    @pytest.mark.unit
    def test_set_active_tab_invalid(self, state):
        """Test unknown tabs are rejected and the tab is unchanged."""
        with pytest.raises(InvalidInputTabError) as exc_info:
            state.set_active_tab("sliders")
        assert "presets" in exc_info.value.recovery_hint
        assert state.active_tab == InputTab.PRESETS

    @pytest.mark.unit
    def test_snapshot_is_independent(self, state):
        """Test a snapshot does not follow later changes."""
        state.set_color("#123456").set_brightness(30)
        snap = state.snapshot()
        assert isinstance(snap, ColorSnapshot)

        state.set_color("#FFFFFF").set_brightness(100)
        assert snap.hex == "#123456"
        assert snap.rgb == (0x12, 0x34, 0x56)
        assert snap.brightness == 30

    @pytest.mark.unit
    def test_snapshot_frozen(self, state):
        """Test snapshots cannot be modified."""
        snap = state.snapshot()
        with pytest.raises(ValidationError):
            snap.brightness = 10

    @pytest.mark.unit
    def test_from_config(self):
        """Test the initial state follows configured defaults."""
        config = AppConfig(
            default_color="#FFD6AA",
            default_brightness=70,
            default_kelvin=3200,
            default_tab=InputTab.TEMPERATURE,
        )
        state = ColorState.from_config(config)
        assert state.hex == "#FFD6AA"
        assert state.brightness == 70
        assert state.kelvin == 3200
        assert state.active_tab == InputTab.TEMPERATURE

    @pytest.mark.unit
    def test_huge_integer_inputs(self, state):
        """Test integers too large for a float are clamped, not raised."""
        state.set_from_rgb_channels(10**400, -10**400, 128)
        assert state.hex == "#FF0080"

        state.set_brightness(10**400)
        assert state.brightness == 100

        state.set_kelvin(10**400)
        assert state.kelvin == 10**400
        assert state.rgb == (0, 0, 255)
