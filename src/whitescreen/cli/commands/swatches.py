"""Swatch listing command."""

import click

from .common import load_config


@click.command(name="swatches")
@click.pass_context
def swatches(ctx):
    """List the configured swatch palette."""
    config = load_config(ctx)

    width = max((len(s.name) for s in config.swatches), default=0)
    for swatch in config.swatches:
        r, g, b = swatch.to_color().to_rgb_tuple()
        click.echo(f"{swatch.name:<{width}}  {swatch.color}  rgb({r}, {g}, {b})")
