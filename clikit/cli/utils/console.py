"""clikit console utilities for styled output formatting."""

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from clikit.cli.design_standards import COLORS, LAYOUT, SYMBOLS

# Theme built from the design standards
CLIKIT_THEME = Theme(COLORS)


class AppConsole(Console):
    """Console pre-configured with the clikit theme."""

    def __init__(self, **kwargs):
        kwargs.setdefault("width", LAYOUT['terminal_width'])
        super().__init__(theme=CLIKIT_THEME, **kwargs)


def format_error(message: str) -> Text:
    """Format an error message with the failure symbol."""
    return Text(f"{SYMBOLS['fail']} {message}", style="error")


def format_success(message: str) -> Text:
    """Format a success message with the success symbol."""
    return Text(f"{SYMBOLS['pass']} {message}", style="success")


def format_info(message: str) -> Text:
    """Format an info message."""
    return Text(f"{SYMBOLS['info_text']} {message}", style="info")
