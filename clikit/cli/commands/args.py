"""clikit args command - show how raw arguments are parsed."""

import json

import click

from clikit.cli.design_standards import LAYOUT
from clikit.core.args import parse_args


@click.command(name='args', context_settings={
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
})
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
def args(tokens: tuple):
    """Parse TOKENS with the scaffold's argument parser and print JSON.

    Flags like --name=John become keys, --full-name becomes fullName, and
    plain words are collected under "args".

    Example:
        clikit args --name=John --verbose --retries=3 input.txt
    """
    print(json.dumps(parse_args(list(tokens)), indent=LAYOUT['json_indent']))
