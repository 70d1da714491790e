"""Pytest fixtures for tests."""

import io
from pathlib import Path
from tempfile import TemporaryDirectory

import numpy as np
import pytest
from PIL import Image

from whitescreen.models import AppConfig, ColorState


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config(temp_dir):
    """Default config exporting into the temp directory."""
    return AppConfig(export_dir=temp_dir / "exports")


@pytest.fixture
def state():
    """A fresh default ColorState (white, 100%, 6500K)."""
    return ColorState()


@pytest.fixture
def red_state():
    """Pure red at full brightness."""
    return ColorState().set_color("#FF0000")


@pytest.fixture
def decode_png():
    """Decode PNG bytes into a (height, width, 3) uint8 array."""
    def _decode(data: bytes) -> np.ndarray:
        with Image.open(io.BytesIO(data)) as image:
            assert image.format == "PNG"
            return np.asarray(image.convert("RGB"))
    return _decode
