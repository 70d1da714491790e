"""Color input exceptions.

This module defines exceptions for rejected color input:
- ColorError: Base class for color input errors
- InvalidColorFormatError: Text is not a 6-digit hex color
- InvalidInputTabError: Unknown control tab name
- UnknownSwatchError: Swatch name not in the palette
"""

from typing import Any, Optional

from .base import WhitescreenError


class ColorError(WhitescreenError):
    """Color input was rejected."""
    pass


class InvalidColorFormatError(ColorError):
    """A color string does not match the `#RRGGBB` grammar.

    The state that received the value is left unchanged.
    """

    def __init__(self, value: Any, reason: Optional[str] = None):
        """
        Initialize invalid color format error.

        Args:
            value: The rejected input
            reason: What is wrong with it (defaults to a generic message)
        """
        reason = reason or "expected 6 hexadecimal digits"
        super().__init__(
            user_message=f"Invalid color {value!r}: {reason}",
            technical_message=f"Hex decode failed for {value!r} ({type(value).__name__}): {reason}",
            recoverable=True,
            recovery_hint="Use a hex color such as #FFFFFF or ff9944 (the leading # is optional)",
        )
        self.value = value
        self.reason = reason


class InvalidInputTabError(ColorError):
    """Requested control tab does not exist."""

    def __init__(self, tab: Any, valid: list[str]):
        super().__init__(
            user_message=f"Unknown input tab {tab!r}",
            recoverable=True,
            recovery_hint=f"Valid tabs: {', '.join(valid)}",
        )
        self.tab = tab


class UnknownSwatchError(ColorError):
    """Requested swatch is not in the configured palette."""

    def __init__(self, name: str, available: list[str]):
        super().__init__(
            user_message=f"No swatch named '{name}'",
            recoverable=True,
            recovery_hint=(
                f"Available swatches: {', '.join(available)}\n"
                "Run 'whitescreen swatches' to list them with their colors."
            ),
        )
        self.name = name
