"""Git diff source for commitmuse.

This package reads (never writes) the working tree:
- exceptions: GitError
- runner: _run_git_command, get_repo_root
- status: get_status, get_staged_files
- branch: get_current_branch, ref_exists, resolve_trunk_branch, TRUNK_BRANCHES
- diff: get_staged_diff, get_branch_diff, truncate_diff
"""

# Exceptions
from commitmuse.git.exceptions import GitError

# Runner utilities
from commitmuse.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Status utilities
from commitmuse.git.status import (
    get_status,
    get_staged_files,
)

# Branch utilities
from commitmuse.git.branch import (
    TRUNK_BRANCHES,
    get_current_branch,
    is_trunk_branch,
    ref_exists,
    resolve_trunk_branch,
)

# Diff utilities
from commitmuse.git.diff import (
    TRUNCATION_MARKER,
    get_branch_diff,
    get_staged_diff,
    truncate_diff,
)


__all__ = [
    # Exceptions
    "GitError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Status
    "get_status",
    "get_staged_files",
    # Branch
    "TRUNK_BRANCHES",
    "get_current_branch",
    "is_trunk_branch",
    "ref_exists",
    "resolve_trunk_branch",
    # Diff
    "TRUNCATION_MARKER",
    "get_branch_diff",
    "get_staged_diff",
    "truncate_diff",
]
