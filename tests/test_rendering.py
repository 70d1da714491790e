"""Tests for brightness compositing and PNG export."""

import numpy as np
import pytest

from whitescreen.exceptions import ExportFailedError, InvalidDimensionsError
from whitescreen.models import Color, ColorState
from whitescreen.rendering import (
    ImageExporter,
    composite,
    export_filename,
    overlay_alpha,
    render_params,
    render_surface,
)


class TestComposite:
    """Test the brightness overlay rule."""

    @pytest.mark.unit
    def test_overlay_alpha(self):
        """Test overlay opacity is 1 - brightness / 100."""
        assert overlay_alpha(100) == 0.0
        assert overlay_alpha(0) == 1.0
        assert overlay_alpha(25) == pytest.approx(0.75)
        assert overlay_alpha(150) == 0.0
        assert overlay_alpha(-5) == 1.0

    @pytest.mark.unit
    def test_full_brightness_is_identity(self):
        """Test brightness 100 leaves the color unchanged."""
        color = Color(r=12, g=200, b=255)
        assert composite(color, 100) == color

    @pytest.mark.unit
    def test_zero_brightness_is_black(self):
        """Test brightness 0 gives black for any color."""
        assert composite(Color.white(), 0) == Color.black()
        assert composite(Color(r=12, g=200, b=255), 0) == Color.black()

    @pytest.mark.unit
    def test_half_brightness_rounds_half_up(self):
        """Test 255 at 50% becomes 128."""
        assert composite(Color(r=255, g=0, b=0), 50).to_rgb_tuple() == (128, 0, 0)

    @pytest.mark.unit
    def test_channels_scaled_equally(self):
        """Test every channel uses the same factor."""
        assert composite(Color(r=200, g=100, b=40), 25).to_rgb_tuple() == (50, 25, 10)

    @pytest.mark.unit
    def test_monotonic_in_brightness(self):
        """Test raising brightness never darkens a channel."""
        color = Color(r=255, g=180, b=90)
        previous = composite(color, 0).to_rgb_tuple()
        for brightness in range(1, 101):
            current = composite(color, brightness).to_rgb_tuple()
            assert all(c >= p for c, p in zip(current, previous))
            previous = current

    @pytest.mark.unit
    def test_render_params(self, red_state):
        """Test render parameters carry base and effective colors."""
        red_state.set_brightness(50)
        params = render_params(red_state)
        assert params.base_hex == "#FF0000"
        assert params.brightness == 50
        assert params.overlay_alpha == pytest.approx(0.5)
        assert params.effective_hex == "#800000"


class TestRenderSurface:
    """Test rendering the surface to a pixel array."""

    @pytest.mark.unit
    def test_shape_and_dtype(self, state):
        """Test the array is (height, width, 3) uint8."""
        surface = render_surface(state.snapshot(), 4, 3)
        assert surface.shape == (3, 4, 3)
        assert surface.dtype == np.uint8

    @pytest.mark.unit
    def test_uniform_fill(self, red_state):
        """Test every pixel matches the composited color."""
        red_state.set_brightness(50)
        surface = render_surface(red_state.snapshot(), 5, 2)
        assert (surface == np.array([128, 0, 0], dtype=np.uint8)).all()

    @pytest.mark.unit
    def test_matches_composite(self):
        """Test the array path agrees with composite() at every brightness."""
        state = ColorState().set_color("#FF9329")
        for brightness in (0, 1, 33, 50, 67, 99, 100):
            state.set_brightness(brightness)
            expected = composite(state.color, brightness).to_rgb_tuple()
            pixel = tuple(int(v) for v in render_surface(state.snapshot(), 1, 1)[0, 0])
            assert pixel == expected, brightness

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "width,height",
        [(0, 10), (10, 0), (-1, 10), (1.5, 10), (10, "10"), (True, 10), (None, 10)],
    )
    def test_invalid_dimensions(self, state, width, height):
        """Test non-positive or non-integer sizes are rejected."""
        with pytest.raises(InvalidDimensionsError):
            render_surface(state.snapshot(), width, height)


class TestImageExporter:
    """Test PNG export."""

    @pytest.mark.unit
    def test_export_png(self, red_state, decode_png):
        """Test a 2x2 export at 50% is all (128, 0, 0)."""
        red_state.set_brightness(50)
        data = ImageExporter(red_state).export(2, 2)

        pixels = decode_png(data)
        assert pixels.shape == (2, 2, 3)
        assert (pixels == [128, 0, 0]).all()

    @pytest.mark.unit
    def test_export_full_brightness(self, decode_png):
        """Test a full-brightness export uses the base color."""
        state = ColorState().set_kelvin(6500)
        pixels = decode_png(ImageExporter(state).export(3, 1))
        assert pixels.shape == (1, 3, 3)
        assert (pixels == [255, 254, 250]).all()

    @pytest.mark.unit
    def test_export_deterministic(self, red_state):
        """Test the same state and size give identical bytes."""
        red_state.set_brightness(42)
        exporter = ImageExporter(red_state)
        assert exporter.export(8, 6) == exporter.export(8, 6)

    @pytest.mark.unit
    def test_export_reads_live_state(self, state, decode_png):
        """Test an exporter built on a live state sees later changes."""
        exporter = ImageExporter(state)
        state.set_color("#00FF00")
        assert (decode_png(exporter.export(1, 1)) == [0, 255, 0]).all()

    @pytest.mark.unit
    def test_export_from_snapshot(self, state, decode_png):
        """Test an exporter built on a snapshot ignores later changes."""
        state.set_color("#0000FF")
        exporter = ImageExporter(state.snapshot())
        state.set_color("#FFFFFF").set_brightness(0)
        assert (decode_png(exporter.export(1, 1)) == [0, 0, 255]).all()

    @pytest.mark.unit
    def test_invalid_dimensions(self, state):
        """Test invalid sizes raise InvalidDimensionsError, not ExportFailedError."""
        with pytest.raises(InvalidDimensionsError):
            ImageExporter(state).export(0, 1080)

    @pytest.mark.unit
    def test_allocation_failure(self, state, monkeypatch):
        """Test a failed allocation is reported as ExportFailedError."""
        def _no_memory(*args, **kwargs):
            raise MemoryError("cannot allocate")

        monkeypatch.setattr("whitescreen.rendering.exporter.np.empty", _no_memory)

        with pytest.raises(ExportFailedError) as exc_info:
            ImageExporter(state).export(1920, 1080)

        error = exc_info.value
        assert error.recoverable is False
        assert error.width == 1920
        assert "cannot allocate" in error.technical_message

    @pytest.mark.unit
    def test_encode_failure(self, state, monkeypatch):
        """Test an encoder error is reported as ExportFailedError."""
        def _broken(*args, **kwargs):
            raise OSError("encoder unavailable")

        monkeypatch.setattr("whitescreen.rendering.exporter.Image.fromarray", _broken)

        with pytest.raises(ExportFailedError):
            ImageExporter(state).export(2, 2)

    @pytest.mark.unit
    def test_export_filename(self):
        """Test the conventional export file name."""
        assert export_filename("#FFF4E5", 1920, 1080) == "whitescreen-FFF4E5-1920x1080.png"
        assert export_filename("ff0000", 2, 2) == "whitescreen-FF0000-2x2.png"

    @pytest.mark.integration
    def test_export_to_directory(self, red_state, temp_dir, decode_png):
        """Test exporting into a directory uses the conventional name."""
        path = ImageExporter(red_state).export_to_file(temp_dir, 4, 2)

        assert path == temp_dir / "whitescreen-FF0000-4x2.png"
        assert path.exists()
        assert decode_png(path.read_bytes()).shape == (2, 4, 3)

    @pytest.mark.integration
    def test_export_to_file_creates_parents(self, state, temp_dir):
        """Test exporting to a nested file path creates its parents."""
        target = temp_dir / "a" / "b" / "light.png"
        path = ImageExporter(state).export_to_file(target, 2, 2)

        assert path == target
        assert target.read_bytes().startswith(b"\x89PNG")

    @pytest.mark.integration
    def test_export_to_file_write_failure(self, state, temp_dir):
        """Test an unwritable target is reported as ExportFailedError."""
        blocker = temp_dir / "not-a-dir"
        blocker.write_text("x")

        with pytest.raises(ExportFailedError):
            ImageExporter(state).export_to_file(blocker / "light.png", 2, 2)

    @pytest.mark.integration
    def test_no_file_on_invalid_dimensions(self, state, temp_dir):
        """Test nothing is written when the size is rejected."""
        with pytest.raises(InvalidDimensionsError):
            ImageExporter(state).export_to_file(temp_dir, -1, 2)
        assert list(temp_dir.iterdir()) == []
