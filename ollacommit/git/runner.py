"""Git command runner.

Contains:
- _run_git_command: Run a git command and return its output
- is_inside_work_tree: Check whether the cwd is inside a git working tree
"""

import subprocess

from ollacommit.git.exceptions import GitError


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command, stripped of surrounding whitespace.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr.strip()}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def is_inside_work_tree() -> bool:
    """Check whether the current directory is inside a git working tree.

    Any git failure is treated as "not a repository".
    """
    try:
        return _run_git_command(["rev-parse", "--is-inside-work-tree"]) == "true"
    except GitError:
        return False
