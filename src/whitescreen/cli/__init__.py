"""Command-line interface for whitescreen."""

from .main import cli

__all__ = ["cli"]
