"""Path and size formatting helpers."""

import re

_RESOLUTION_PATTERN = re.compile(r"^\s*(\d+)\s*[xX×]\s*(\d+)\s*$")


def parse_resolution(text: str) -> tuple[int, int]:
    """Parse a ``WIDTHxHEIGHT`` string.

    Args:
        text: Resolution such as ``"1920x1080"`` or ``"3840 X 2160"``

    Returns:
        Tuple of (width, height)

    Raises:
        ValueError: If the text is not two integers separated by ``x``

    Examples:
        >>> parse_resolution("1920x1080")
        (1920, 1080)
    """
    match = _RESOLUTION_PATTERN.match(text)
    if not match:
        raise ValueError(f"Expected WIDTHxHEIGHT, got {text!r}")
    return int(match.group(1)), int(match.group(2))


def format_resolution(width: int, height: int) -> str:
    """Format a resolution for display, e.g. ``"1920 x 1080"``."""
    return f"{width} x {height}"


def format_bytes(size: int) -> str:
    """Format a byte count as a human-readable string.

    Examples:
        >>> format_bytes(500)
        '500 B'
        >>> format_bytes(1536)
        '1.5 KB'
    """
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"
