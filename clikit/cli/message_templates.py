"""clikit CLI Message Templates.

User-facing strings for the commands, kept in one place so wording stays
consistent across the CLI.
"""

WELCOME_MESSAGE = (
    "[primary]clikit: CLI application scaffold[/primary]\n\n"
    "A starting point for commands with argument parsing and progress feedback.\n\n"
    "Get started: [info]clikit test --name Ada --age 36[/info]"
)

# Interactive prompts
PROMPT_MESSAGES = {
    'name': "Enter your name",
    'age': "Enter your age",
}

# Command-specific messaging templates
COMMAND_MESSAGES = {
    'test': {
        'processing': "Processing...",
        'done': "Processing done!",
        'greeting': "Hello {name}, you are {age} years old.",
        'cancelled': "Processing cancelled",
        'invalid': "Invalid input: {details}",
    },
}


def format_validation_errors(errors: list) -> str:
    """Flatten pydantic error dicts into a single readable line."""
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ())) or "input"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)
