"""clikit test command - sample command exercising prompts and the spinner."""

import asyncio
import logging
from typing import List, Optional

import click
from pydantic import ValidationError

from clikit.cli.message_templates import COMMAND_MESSAGES, format_validation_errors
from clikit.cli.prompts import ask_for_age, ask_for_name
from clikit.cli.spinner import Spinner
from clikit.cli.utils import AppConsole, fail, format_info
from clikit.config import get_settings
from clikit.core.models import TestCommandInput

logger = logging.getLogger(__name__)

console = AppConsole()
messages = COMMAND_MESSAGES['test']

ALIASES = ['run-test', 'test-command']


@click.command(name='test', context_settings={"ignore_unknown_options": True})
@click.argument('args', nargs=-1)
@click.option('--name', '--your-name', 'name', default=None, help='Your name.')
@click.option('--age', '--your-age', 'age', type=int, default=None, help='Your age in years.')
def test(args: tuple, name: Optional[str], age: Optional[int]):
    """Run a command for testing.

    Asks for any missing option, shows a spinner while it "works", then
    greets you. You can pass any arguments to this command.

    \b
    Aliases: run-test, test-command

    Example:
        clikit test --name Ada --age 36
        clikit run-test --your-name Ada
    """
    try:
        asyncio.run(_run_test_async(list(args), name, age))
    except KeyboardInterrupt:
        raise click.exceptions.Exit(130)


async def _run_test_async(args: List[str], name: Optional[str], age: Optional[int]) -> None:
    """Prompt, validate, then simulate work behind a spinner."""
    name = name or ask_for_name(console)
    age = age if age is not None else ask_for_age(console)

    try:
        data = TestCommandInput(name=name, age=age, args=args)
    except ValidationError as e:
        raise fail(console, messages['invalid'].format(details=format_validation_errors(e.errors())))

    logger.debug("Running test command with %s", data.model_dump())

    loading = Spinner(messages['processing'], console=console)
    await loading.start()
    try:
        await asyncio.sleep(get_settings().test_delay_ms / 1000)
    except asyncio.CancelledError:
        loading.error(messages['cancelled'])
        raise
    loading.success(messages['done'])

    console.print(format_info(messages['greeting'].format(name=data.name, age=data.age)))
