"""Click group that resolves commands by alias."""

from typing import Dict, List, Optional

import click


class AliasedGroup(click.Group):
    """Group whose commands can be registered under extra names.

    Aliases are hidden from ``--help``; the command's help text lists them.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.aliases: Dict[str, str] = {}

    def add_command(self, cmd: click.Command, name: Optional[str] = None,
                    aliases: Optional[List[str]] = None) -> None:
        super().add_command(cmd, name)
        for alias in aliases or ():
            self.aliases[alias] = name or cmd.name

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        """Get command by name, falling back to the alias table."""
        cmd = super().get_command(ctx, cmd_name)
        if cmd is not None:
            return cmd

        target = self.aliases.get(cmd_name)
        if target is None:
            return None
        return super().get_command(ctx, target)

    def resolve_command(self, ctx: click.Context, args: List[str]):
        # Report the canonical name so ctx.invoked_subcommand is stable
        _, cmd, remaining = super().resolve_command(ctx, args)
        return (cmd.name if cmd else None), cmd, remaining
