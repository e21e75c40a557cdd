"""Git-related exception classes."""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass
