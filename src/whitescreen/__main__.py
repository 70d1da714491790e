"""Main entry point for ``python -m whitescreen``."""

from whitescreen.cli import cli

if __name__ == "__main__":
    cli()
