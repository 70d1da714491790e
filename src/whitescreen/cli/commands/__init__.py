"""CLI commands for whitescreen."""

from .config import config
from .convert import convert_group
from .export import export
from .swatches import swatches

__all__ = ["config", "convert_group", "export", "swatches"]
