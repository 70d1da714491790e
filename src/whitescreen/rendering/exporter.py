"""Static image export of the light surface."""

import io
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from whitescreen.exceptions import ExportFailedError, InvalidDimensionsError
from whitescreen.models import ColorSnapshot, ColorState

from .compositor import composite_channel, overlay_alpha

logger = logging.getLogger(__name__)


def export_filename(hex_color: str, width: int, height: int) -> str:
    """
    Conventional file name for an exported image.

    Example:
        >>> export_filename("#FFF4E5", 1920, 1080)
        'whitescreen-FFF4E5-1920x1080.png'
    """
    return f"whitescreen-{hex_color.lstrip('#').upper()}-{width}x{height}.png"


def _validate_dimensions(width: object, height: object) -> None:
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
            raise InvalidDimensionsError(width, height)


def render_surface(snapshot: ColorSnapshot, width: int, height: int) -> np.ndarray:
    """
    Render the light surface as a ``(height, width, 3)`` uint8 array.

    The surface is filled with the base color, then the brightness overlay
    is applied to every pixel through a 256-entry lookup table that uses
    the same rounding as ``composite``.

    Raises:
        InvalidDimensionsError: If width or height is not a positive integer
        MemoryError: If the surface cannot be allocated
    """
    _validate_dimensions(width, height)

    surface = np.empty((height, width, 3), dtype=np.uint8)
    surface[...] = snapshot.rgb

    alpha = overlay_alpha(snapshot.brightness)
    if alpha > 0:
        lut = np.array([composite_channel(v, alpha) for v in range(256)], dtype=np.uint8)
        surface = lut[surface]

    return surface


class ImageExporter:
    """
    Renders a ColorState to PNG.

    Each export reads an immutable snapshot of the state taken when the
    export starts, so changes made while encoding do not leak into the
    image. Output is deterministic: the same state and size always give
    byte-identical PNG data.

    Example:
        ```python
        exporter = ImageExporter(state)
        png = exporter.export(1920, 1080)
        path = exporter.export_to_file(Path("~/Pictures").expanduser(), 1920, 1080)
        ```
    """

    def __init__(self, state: ColorState | ColorSnapshot):
        """
        Initialize the exporter.

        Args:
            state: The live state (snapshotted on every export) or a snapshot
        """
        self._state = state

    def snapshot(self) -> ColorSnapshot:
        """Snapshot of the exported state."""
        if isinstance(self._state, ColorState):
            return self._state.snapshot()
        return self._state

    def export(self, width: int, height: int) -> bytes:
        """
        Render the surface and encode it as PNG.

        Args:
            width: Image width in pixels (normally the screen width)
            height: Image height in pixels (normally the screen height)

        Returns:
            PNG file contents

        Raises:
            InvalidDimensionsError: If width or height is not a positive integer
            ExportFailedError: If the surface cannot be allocated or encoded
        """
        return self._encode(self.snapshot(), width, height)

    def export_to_file(self, target: Path, width: int, height: int) -> Path:
        """
        Export to a file.

        Args:
            target: Output file, or an existing directory to write
                ``whitescreen-<HEX>-<W>x<H>.png`` into
            width: Image width in pixels
            height: Image height in pixels

        Returns:
            Path of the written file

        Raises:
            InvalidDimensionsError: If width or height is not a positive integer
            ExportFailedError: If rendering, encoding or writing fails
        """
        snapshot = self.snapshot()
        data = self._encode(snapshot, width, height)

        if target.is_dir():
            path = target / export_filename(snapshot.hex, width, height)
        else:
            path = target

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            logger.error(f"Could not write {path}: {e}")
            raise ExportFailedError(width, height, f"Could not write {path}: {e}") from e

        logger.info(f"Exported {width}x{height} {snapshot.hex} at {snapshot.brightness}% to {path}")
        return path

    def _encode(self, snapshot: ColorSnapshot, width: int, height: int) -> bytes:
        try:
            surface = render_surface(snapshot, width, height)
            image = Image.fromarray(surface)
            buffer = io.BytesIO()
            image.save(buffer, format="PNG")
        except InvalidDimensionsError:
            raise
        except (MemoryError, ValueError, OSError) as e:
            logger.error(f"Failed to export {width}x{height} image: {e}")
            raise ExportFailedError(width, height, str(e)) from e

        return buffer.getvalue()
