"""Color conversion commands."""

import click

from whitescreen.colors import KELVIN_MAX, KELVIN_MIN
from whitescreen.exceptions import InvalidColorFormatError
from whitescreen.models import Color

from .common import report_error


def _describe(color: Color) -> str:
    r, g, b = color.to_rgb_tuple()
    return f"{color.to_hex()}  rgb({r}, {g}, {b})"


@click.group(name="convert")
def convert_group():
    """Convert between color representations."""
    pass


@convert_group.command(name="kelvin")
@click.argument("kelvin", type=int)
def convert_kelvin(kelvin: int):
    """Show the color of a KELVIN color temperature."""
    if not KELVIN_MIN <= kelvin <= KELVIN_MAX:
        click.echo(
            f"Note: {kelvin}K is outside the fitted range ({KELVIN_MIN}-{KELVIN_MAX}K)",
            err=True,
        )
    click.echo(f"{kelvin}K  {_describe(Color.from_kelvin(kelvin))}")


@convert_group.command(name="hex")
@click.argument("value")
@click.pass_context
def convert_hex(ctx, value: str):
    """Show the canonical form and channels of a hex VALUE."""
    try:
        color = Color.from_hex(value)
    except InvalidColorFormatError as e:
        report_error(ctx, e)
    click.echo(_describe(color))


@convert_group.command(name="rgb")
@click.argument("r", type=int)
@click.argument("g", type=int)
@click.argument("b", type=int)
def convert_rgb(r: int, g: int, b: int):
    """Show the hex form of R G B channels (clamped to 0-255)."""
    click.echo(_describe(Color.from_channels(r, g, b)))
