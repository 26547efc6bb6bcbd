"""Interactive prompts for missing command options."""

from typing import Optional

from rich.console import Console
from rich.prompt import IntPrompt, Prompt

from clikit.cli.message_templates import PROMPT_MESSAGES


def ask_for_name(console: Optional[Console] = None) -> str:
    """Ask the user for their name until a non-empty answer is given."""
    while True:
        name = Prompt.ask(PROMPT_MESSAGES['name'], console=console).strip()
        if name:
            return name


def ask_for_age(console: Optional[Console] = None) -> int:
    """Ask the user for their age as a whole number."""
    return IntPrompt.ask(PROMPT_MESSAGES['age'], console=console)
