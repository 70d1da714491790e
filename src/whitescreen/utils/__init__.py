"""Generic utility modules for whitescreen.

This package contains generic utilities that are not specific to any domain:
- numeric: Channel clamping
- paths: Resolution parsing and size formatting
"""

from .numeric import clamp
from .paths import format_bytes, format_resolution, parse_resolution

__all__ = ["clamp", "format_bytes", "format_resolution", "parse_resolution"]
