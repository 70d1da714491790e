"""Helpers shared by CLI commands."""

import logging
import sys

import click

from whitescreen.exceptions import ConfigurationError, format_error_for_display
from whitescreen.models import AppConfig

logger = logging.getLogger(__name__)


def report_error(ctx: click.Context, error: Exception) -> None:
    """Show a clean error message (no traceback) and exit with status 1."""
    logger.error(f"Command '{ctx.info_name}' failed: {error}", exc_info=True)

    user_message, recovery_hint = format_error_for_display(error)

    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    log_path = (ctx.obj or {}).get("log_path")
    if log_path:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)
    sys.exit(1)


def load_config(ctx: click.Context) -> AppConfig:
    """Load the configuration chosen on the command line, or report why not."""
    path = (ctx.obj or {}).get("config_path")
    try:
        return AppConfig.load_or_default(path)
    except ConfigurationError as e:
        report_error(ctx, e)
