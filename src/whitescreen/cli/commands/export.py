"""Export command implementation."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from whitescreen.exceptions import WhitescreenError, collect_errors
from whitescreen.models import ColorState
from whitescreen.rendering import ImageExporter
from whitescreen.utils import format_bytes, parse_resolution

from .common import load_config, report_error

logger = logging.getLogger(__name__)


def _parse_sizes(ctx, param, values: tuple[str, ...]) -> list[tuple[int, int]]:
    """Click callback turning repeated ``--size WxH`` values into tuples."""
    sizes = []
    for value in values:
        try:
            sizes.append(parse_resolution(value))
        except ValueError as e:
            raise click.BadParameter(str(e), ctx=ctx, param=param) from e
    return sizes


@click.command(name="export")
@click.pass_context
@click.option('--color', '-c', type=str, default=None, help='Hex color, e.g. FF9944 or "#ff9944"')
@click.option('--kelvin', '-k', type=int, default=None, help='Color temperature in Kelvin')
@click.option('--rgb', type=(int, int, int), default=None, help='RGB channels (clamped to 0-255)')
@click.option('--swatch', '-s', type=str, default=None, help='Name of a configured swatch')
@click.option('--brightness', '-b', type=int, default=None, help='Brightness percent (clamped to 0-100)')
@click.option(
    '--size',
    'sizes',
    multiple=True,
    callback=_parse_sizes,
    help='Image size as WIDTHxHEIGHT (repeatable; default: configured resolution)'
)
@click.option(
    '--output', '-o',
    type=click.Path(path_type=Path),
    default=None,
    help='Output directory or .png file (default: configured export directory)'
)
def export(
    ctx,
    color: Optional[str],
    kelvin: Optional[int],
    rgb: Optional[tuple[int, int, int]],
    swatch: Optional[str],
    brightness: Optional[int],
    sizes: list[tuple[int, int]],
    output: Optional[Path],
):
    """Export the light surface as PNG.

    Choose at most one color source (--color, --kelvin, --rgb, --swatch);
    without one the configured default color is used.
    """
    sources = [name for name, value in
               (("--color", color), ("--kelvin", kelvin), ("--rgb", rgb), ("--swatch", swatch))
               if value is not None]
    if len(sources) > 1:
        raise click.UsageError(f"Choose one color source, got {' and '.join(sources)}")

    config = load_config(ctx)
    sizes = sizes or [config.export_resolution]
    output = output or config.export_dir

    to_file = output.suffix.lower() == ".png"
    if to_file and len(sizes) > 1:
        raise click.UsageError("--output must be a directory when exporting several sizes")
    if not to_file:
        try:
            output.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            report_error(ctx, e)

    state = ColorState.from_config(config)
    try:
        if color is not None:
            state.set_color(color)
        elif kelvin is not None:
            state.set_kelvin(kelvin)
        elif rgb is not None:
            state.set_from_rgb_channels(*rgb)
        elif swatch is not None:
            state.set_color(config.find_swatch(swatch).color)
        if brightness is not None:
            state.set_brightness(brightness)
    except WhitescreenError as e:
        report_error(ctx, e)

    exporter = ImageExporter(state.snapshot())
    collector = collect_errors("export images")

    for width, height in sizes:
        with collector.try_operation(f"{width}x{height}"):
            path = exporter.export_to_file(output, width, height)
            click.echo(f"{path}  ({format_bytes(path.stat().st_size)})")

    if collector.has_errors:
        click.echo(collector.get_summary(), err=True)
        sys.exit(1)

    logger.info(f"Exported {collector.success_count} image(s) of {state.hex} at {state.brightness}%")
