"""Configuration commands.

Commands:
    - config show                # Display configuration
    - config path                # Print the config file location
    - config init [--force]      # Write a default config file
    - config validate            # Validate the config file
"""

import click

from whitescreen.model_manager import PydanticPersistence
from whitescreen.models import AppConfig

from .common import load_config, report_error


@click.group(name="config")
def config():
    """Show and manage whitescreen settings."""
    pass


@config.command(name="show")
@click.pass_context
def show(ctx):
    """Display the effective configuration as JSON."""
    click.echo(load_config(ctx).model_dump_json(indent=2))


@config.command(name="path")
@click.pass_context
def path(ctx):
    """Print the configuration file location."""
    click.echo(str(ctx.obj["config_path"]))


@config.command(name="init")
@click.option("--force", is_flag=True, help="Overwrite an existing file (a .bak backup is kept)")
@click.pass_context
def init(ctx, force: bool):
    """Write a configuration file with default values."""
    config_path = ctx.obj["config_path"]
    if config_path.exists() and not force:
        click.echo(f"Config file already exists: {config_path}")
        click.echo("Use --force to overwrite it.")
        return

    try:
        AppConfig().save(config_path)
    except OSError as e:
        report_error(ctx, e)
    click.echo(f"Wrote default configuration to {config_path}")


@config.command(name="validate")
@click.pass_context
def validate(ctx):
    """Check that the configuration file is valid."""
    config_path = ctx.obj["config_path"]
    is_valid, message = PydanticPersistence.validate_json(config_path, AppConfig)
    if is_valid:
        click.echo(f"[OK] {config_path}")
        return

    click.echo(f"[FAIL] {message}", err=True)
    ctx.exit(1)
