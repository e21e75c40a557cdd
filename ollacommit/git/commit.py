"""Commit creation."""

import typer

from ollacommit.git.base import Committer
from ollacommit.git.runner import _run_git_command


class GitCommitter(Committer):
    """Committer that runs `git commit -m` in the current repository."""

    def commit(self, message: str) -> None:
        typer.echo("Committing Message... 🚀")
        _run_git_command(["commit", "-m", message])
        typer.echo("Commit Successful! 🎉")
