"""clikit CLI commands."""

from . import args, test

__all__ = ["args", "test"]
