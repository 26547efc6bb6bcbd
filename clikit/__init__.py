"""clikit: a small CLI application scaffold with a terminal progress spinner."""
