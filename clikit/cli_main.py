"""Command-line entry point for clikit.

A scaffold for building CLI applications: argument parsing, a terminal
progress spinner and a sample command to copy from.
"""

from __future__ import annotations

import importlib.metadata as _metadata
import logging
import sys

import click
from dotenv import load_dotenv
from rich.panel import Panel

from clikit.cli.commands import args, test
from clikit.cli.message_templates import WELCOME_MESSAGE
from clikit.cli.utils import AliasedGroup, AppConsole
from clikit.config import get_settings

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

console = AppConsole()


def _get_version() -> str:
    """Return the installed version of clikit."""
    try:
        return _metadata.version("clikit")
    except _metadata.PackageNotFoundError:
        return "0.1.0-dev"


def setup_logging(log_level: str) -> None:
    """Configure the root logger; records go to stderr, away from the spinner line."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.group(
    cls=AliasedGroup,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "max_content_width": 120
    },
    invoke_without_command=True
)
@click.version_option(_get_version(), message="clikit v%(version)s")
@click.option(
    '--log-level', '-l',
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help='Logging level (default: CLIKIT_LOG_LEVEL or WARNING)'
)
@click.pass_context
def main(ctx: click.Context, log_level: str | None) -> None:
    """clikit: a CLI application scaffold.

    \b
    Commands:
      clikit test              # Sample command with prompts and a spinner
      clikit args --a=1 b      # Show how raw arguments are parsed

    \b
    Examples:
      clikit test --name Ada --age 36
      clikit run-test
      clikit -l DEBUG test
    """
    # Load environment variables from .env file, but don't override existing ones
    load_dotenv(override=False)
    get_settings.cache_clear()

    setup_logging(log_level or get_settings().log_level)

    if ctx.invoked_subcommand is None:
        # Show welcome message when no command is provided
        console.print()
        console.print(Panel.fit(WELCOME_MESSAGE, border_style="primary"))
        console.print()
        console.print("Run [info]clikit --help[/info] for available commands.")
        console.print()


# Register commands
main.add_command(test.test, aliases=test.ALIASES)
main.add_command(args.args)


if __name__ == "__main__":
    sys.exit(main())
