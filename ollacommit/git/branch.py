"""Current branch lookup."""

from ollacommit.git.runner import _run_git_command


def get_branch() -> str:
    """Get the current branch name.

    Returns:
        The branch name, or an empty string in detached HEAD state.

    Raises:
        GitError: If git cannot report the branch.
    """
    return _run_git_command(["branch", "--show-current"])
