"""Main CLI command for generating and committing messages."""

from typing import Optional

import typer

from ollacommit import __version__, config
from ollacommit.flow import CommitAborted, run
from ollacommit.git import GitCommitter, GitError, StagedDiffSource, is_inside_work_tree
from ollacommit.global_config import GlobalConfigError
from ollacommit.llm import LLMError, get_provider
from ollacommit.options import resolve_options


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ollacommit {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    model: Optional[str] = typer.Option(
        None,
        "--model",
        help="The model to use for generating commit messages",
    ),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        help="The language to use for generating commit messages",
    ),
    template: Optional[str] = typer.Option(
        None,
        "--template",
        help="Template for the message, e.g. '{GIT_BRANCH}: {COMMIT_MESSAGE}'",
    ),
    emoji: Optional[bool] = typer.Option(
        None,
        "--emoji/--no-emoji",
        help="Add gitmoji to the commit message (on by default)",
        show_default=False,
    ),
    commit_type: Optional[str] = typer.Option(
        None,
        "--commit-type",
        help="The type of commit (e.g., feat, fix, docs)",
    ),
    list_mode: bool = typer.Option(
        False,
        "--list",
        help="Generate a list of commit message options",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Commit without prompting for confirmation",
    ),
    filter_fee: bool = typer.Option(
        False,
        "--filter-fee",
        help="Display the approximate fee and ask before generating",
    ),
    max_tokens: Optional[int] = typer.Option(
        None,
        "--max-tokens",
        help=f"The maximum number of tokens (default: {config.DEFAULT_MAX_TOKENS})",
    ),
    top_p: Optional[int] = typer.Option(
        None,
        "--top-p",
        help=f"The top-p sampling value (default: {config.DEFAULT_TOP_P})",
    ),
    temperature: Optional[int] = typer.Option(
        None,
        "--temperature",
        help=f"The temperature value for sampling (default: {config.DEFAULT_TEMPERATURE})",
    ),
    repetition_penalty: Optional[int] = typer.Option(
        None,
        "--repetition-penalty",
        help=f"The repetition penalty value (default: {config.DEFAULT_REPETITION_PENALTY})",
    ),
    filter_files: Optional[str] = typer.Option(
        None,
        "--filter-files",
        help="Limit the staged diff to files matching this glob pattern",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate a commit message for the staged changes with a local Ollama model."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    try:
        config.load_config()
    except GlobalConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)

    options = resolve_options(
        model=model,
        language=language,
        template=template,
        emoji=emoji,
        commit_type=commit_type,
        list_mode=list_mode,
        force=force,
        filter_fee=filter_fee,
        max_tokens=max_tokens,
        top_p=top_p,
        temperature=temperature,
        repetition_penalty=repetition_penalty,
        filter_files=filter_files,
    )

    typer.echo(f"AI provider: ollama, Model: {options.model}", err=True)

    if not is_inside_work_tree():
        typer.echo("This is not a git repository 🙅‍♂️", err=True)
        raise typer.Exit(1)

    try:
        diff = StagedDiffSource(options.filter_files).collect()
        if not diff:
            typer.echo("No changes to commit 🙅", err=True)
            typer.echo(
                "Maybe you forgot to add the files? Try git add . and then run this script again.",
                err=True,
            )
            raise typer.Exit(1)

        run(diff, options, get_provider(options), GitCommitter())

    except CommitAborted as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(f"LLM error: {e}", err=True)
        raise typer.Exit(1)
