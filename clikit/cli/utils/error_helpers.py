"""Error reporting helpers for CLI commands."""

import logging

import click
from rich.console import Console

from .console import format_error

logger = logging.getLogger(__name__)


def fail(console: Console, message: str, exit_code: int = 1) -> "click.exceptions.Exit":
    """Print an error line and return the Exit to raise.

    Usage: ``raise fail(console, "Something broke")``
    """
    logger.debug("Command failed: %s", message)
    console.print(format_error(message))
    return click.exceptions.Exit(exit_code)
