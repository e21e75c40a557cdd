"""CLI entry point for ollacommit.

Combines the default generate-and-commit command with the config
subcommand group.
"""

import typer

from ollacommit.cli.config import config_app
from ollacommit.cli.main import main_command

# Main application
app = typer.Typer(
    name="ollacommit",
    help="ollacommit: commit messages from staged changes with a local Ollama model",
    add_completion=False,
)

app.add_typer(config_app, name="config")

# Set the main callback for default behavior
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
]
