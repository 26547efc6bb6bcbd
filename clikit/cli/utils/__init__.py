"""CLI utilities and helpers."""

from .aliased_group import AliasedGroup
from .console import AppConsole, format_error, format_info, format_success
from .error_helpers import fail

__all__ = [
    "AliasedGroup",
    "AppConsole",
    "format_error",
    "format_info",
    "format_success",
    "fail",
]
