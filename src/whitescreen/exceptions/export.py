"""Image export exceptions.

This module defines exceptions raised while rendering the light surface
to an image:
- ExportError: Base class for export errors
- InvalidDimensionsError: Requested size is not a positive integer pair
- ExportFailedError: The surface could not be allocated, encoded or written
"""

from typing import Any, Optional

from .base import WhitescreenError


class ExportError(WhitescreenError):
    """Image export failed."""
    pass


class InvalidDimensionsError(ExportError):
    """Requested image dimensions are unusable."""

    def __init__(self, width: Any, height: Any):
        """
        Initialize invalid dimensions error.

        Args:
            width: Requested width
            height: Requested height
        """
        super().__init__(
            user_message=f"Invalid image size {width!r} x {height!r}: width and height must be positive integers",
            recoverable=True,
            recovery_hint="Pass a size such as --size 1920x1080",
        )
        self.width = width
        self.height = height


class ExportFailedError(ExportError):
    """The export surface could not be allocated, encoded or written.

    Never retried automatically and never downgraded to a smaller image.
    """

    def __init__(self, width: int, height: int, original_error: Optional[str] = None):
        """
        Initialize export failure.

        Args:
            width: Requested width
            height: Requested height
            original_error: Message from the underlying library
        """
        user_msg = f"Could not export a {width}x{height} image"
        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            recoverable=False,
            recovery_hint="Try a smaller resolution or check free memory and disk space.",
        )
        self.width = width
        self.height = height
        self.original_error = original_error
