"""Hex string <-> RGB channel conversion.

The canonical hex form is ``#RRGGBB``: a ``#`` followed by six uppercase
hexadecimal digits, no alpha. Input is accepted with or without the ``#``
and in any letter case.
"""

import re

from whitescreen.exceptions import InvalidColorFormatError

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def decode_hex(text: str) -> tuple[int, int, int]:
    """Decode a 6-digit hex color into an RGB triple.

    Args:
        text: Hex color, e.g. ``"#ff9944"`` or ``"FF9944"``

    Returns:
        Tuple of (red, green, blue), each 0-255

    Raises:
        InvalidColorFormatError: If the text is not exactly 6 hex digits
            (optionally prefixed with ``#``)

    Examples:
        >>> decode_hex("#FF0080")
        (255, 0, 128)
    """
    if not isinstance(text, str):
        raise InvalidColorFormatError(text, "expected a string")

    match = _HEX_PATTERN.match(text)
    if match is None:
        digits = text[1:] if text.startswith("#") else text
        if len(digits) != 6:
            raise InvalidColorFormatError(text, f"expected 6 hexadecimal digits, got {len(digits)} characters")
        raise InvalidColorFormatError(text, "contains non-hexadecimal characters")

    return (
        int(match.group(1), 16),
        int(match.group(2), 16),
        int(match.group(3), 16),
    )


def encode_hex(r: int, g: int, b: int) -> str:
    """Encode an RGB triple as a canonical ``#RRGGBB`` string.

    Channels must already be clamped to 0-255; this function does not
    clamp them again.

    Raises:
        ValueError: If a channel is outside 0-255

    Examples:
        >>> encode_hex(255, 0, 128)
        '#FF0080'
    """
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ValueError(f"RGB channel out of range (0-255): {channel}")
    return f"#{r:02X}{g:02X}{b:02X}"


def normalize_hex(text: str) -> str:
    """Return the canonical form of a hex color string.

    Examples:
        >>> normalize_hex("ff9944")
        '#FF9944'
    """
    return encode_hex(*decode_hex(text))
