"""Narrow interfaces over the repository used by the commit flow."""

from abc import ABC, abstractmethod


class DiffSource(ABC):
    """Something that yields the diff text to describe."""

    @abstractmethod
    def collect(self) -> str:
        """Return the filtered diff, or an empty string when nothing is staged."""
        pass


class Committer(ABC):
    """Something that records a commit with the chosen message."""

    @abstractmethod
    def commit(self, message: str) -> None:
        """Create a commit with the given message.

        Raises:
            GitError: If the commit cannot be created.
        """
        pass
