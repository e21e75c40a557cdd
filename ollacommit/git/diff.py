"""Staged diff collection.

Contains:
- get_staged_diff: Run git diff against the index
- strip_diff_noise: Reduce raw diff output to changed lines only
- StagedDiffSource: DiffSource backed by the two functions above
"""

import difflib
from typing import Optional

from ollacommit.git.base import DiffSource
from ollacommit.git.runner import _run_git_command


# Lines with these prefixes carry structure, not content
NOISE_PREFIXES = ("@@", "diff --git")


def get_staged_diff(filter_files: Optional[str] = None) -> str:
    """Get the raw staged diff without colors or a/ b/ path prefixes.

    Args:
        filter_files: Optional pathspec (glob) restricting the diff.

    Returns:
        The raw diff output.

    Raises:
        GitError: If git fails.
    """
    args = ["diff", "--staged", "--no-color", "--no-prefix"]
    if filter_files:
        args.append(filter_files)
    return _run_git_command(args)


def strip_diff_noise(raw_diff: str) -> str:
    """Keep only the lines of non-equal regions, minus hunk and file headers.

    The raw text is decomposed against an empty string, so every line falls
    into a delete region; equal regions are skipped regardless.

    Args:
        raw_diff: Output of get_staged_diff.

    Returns:
        The surviving lines joined with newlines.
    """
    lines = raw_diff.split("\n")
    matcher = difflib.SequenceMatcher(None, lines, [], autojunk=False)

    kept = []
    for tag, i1, i2, _j1, _j2 in matcher.get_opcodes():
        if tag == "equal":
            continue
        for line in lines[i1:i2]:
            if line.startswith(NOISE_PREFIXES):
                continue
            kept.append(line)

    return "\n".join(kept)


class StagedDiffSource(DiffSource):
    """DiffSource reading the index of the current repository."""

    def __init__(self, filter_files: Optional[str] = None):
        self.filter_files = filter_files

    def collect(self) -> str:
        return strip_diff_noise(get_staged_diff(self.filter_files))
