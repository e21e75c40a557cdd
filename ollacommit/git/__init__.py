"""Git access for ollacommit.

This package wraps the git executable:
- exceptions: GitError
- runner: _run_git_command, is_inside_work_tree
- branch: get_branch
- diff: get_staged_diff, strip_diff_noise, StagedDiffSource
- commit: GitCommitter
- base: DiffSource, Committer interfaces
"""

from ollacommit.git.exceptions import GitError

from ollacommit.git.runner import (
    _run_git_command,
    is_inside_work_tree,
)

from ollacommit.git.branch import get_branch

from ollacommit.git.base import (
    Committer,
    DiffSource,
)

from ollacommit.git.diff import (
    NOISE_PREFIXES,
    StagedDiffSource,
    get_staged_diff,
    strip_diff_noise,
)

from ollacommit.git.commit import GitCommitter


__all__ = [
    "GitError",
    "_run_git_command",
    "is_inside_work_tree",
    "get_branch",
    "Committer",
    "DiffSource",
    "NOISE_PREFIXES",
    "StagedDiffSource",
    "get_staged_diff",
    "strip_diff_noise",
    "GitCommitter",
]
