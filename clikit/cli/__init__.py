"""Terminal-facing parts of clikit: console, spinner and commands."""
