"""CLI commands for global configuration management."""

from typing import Any

import typer

from ollacommit import config, global_config

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global ollacommit configuration in ~/.ollacommit/",
    add_completion=False,
)


def _set(key: str, value: Any) -> None:
    try:
        global_config.set_value(key, value)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(f"✓ {key} set to: {value}")


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration."""
    try:
        if not global_config.is_configured():
            typer.echo("No configuration found. Defaults are in use.")
            typer.echo(f"  Model: {config.DEFAULT_MODEL}")
            typer.echo(f"  URL: {config.DEFAULT_URL}")
            return

        values = global_config.load_global_config()

    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Current ollacommit configuration ({global_config.get_config_file_path()}):")
    typer.echo()
    typer.echo(f"  Model: {values.get('model', config.DEFAULT_MODEL)}")
    typer.echo(f"  Language: {values.get('language', config.DEFAULT_LANGUAGE)}")
    typer.echo(f"  Template: {values.get('template') or 'not set'}")
    typer.echo(f"  Emoji: {values.get('emoji', config.DEFAULT_EMOJI)}")
    typer.echo(f"  Max Tokens: {values.get('max_tokens', config.DEFAULT_MAX_TOKENS)}")
    typer.echo(f"  Top P: {values.get('top_p', config.DEFAULT_TOP_P)}")
    typer.echo(f"  Temperature: {values.get('temperature', config.DEFAULT_TEMPERATURE)}")
    typer.echo(
        f"  Repetition Penalty: {values.get('repetition_penalty', config.DEFAULT_REPETITION_PENALTY)}"
    )
    typer.echo(f"  URL: {values.get('url', config.DEFAULT_URL)}")
    typer.echo()


@config_app.command("set-model")
def config_set_model(
    model: str = typer.Argument(..., help="Ollama model name, e.g. llama3.2:3b"),
) -> None:
    """Set the default model."""
    _set("model", model)


@config_app.command("set-language")
def config_set_language(
    language: str = typer.Argument(..., help="Language for generated messages"),
) -> None:
    """Set the default message language."""
    _set("language", language)


@config_app.command("set-template")
def config_set_template(
    template: str = typer.Argument(
        ...,
        help="Template using {COMMIT_MESSAGE} and {GIT_BRANCH}; empty string clears it",
    ),
) -> None:
    """Set the default message template."""
    _set("template", template)


@config_app.command("set-url")
def config_set_url(
    url: str = typer.Argument(..., help="Generation endpoint URL"),
) -> None:
    """Set the inference endpoint URL."""
    _set("url", url)
