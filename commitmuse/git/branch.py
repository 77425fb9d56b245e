"""Git branch utilities.

Contains:
- get_current_branch: Get the current branch name
- ref_exists: Check whether a ref resolves (git rev-parse --verify)
- resolve_trunk_branch: Pick the trunk branch a feature branch is compared to
"""

from typing import Optional

from commitmuse.git.exceptions import GitError
from commitmuse.git.runner import PathLike, _run_git_command

# Conventional trunk names, in order of preference
TRUNK_BRANCHES = ("main", "master")


def get_current_branch(repo_path: Optional[PathLike] = None) -> Optional[str]:
    """Get the current branch name.

    Returns:
        The branch name, or None in detached HEAD state.
    """
    branch = _run_git_command(["branch", "--show-current"], repo_path)
    return branch or None


def ref_exists(ref: str, repo_path: Optional[PathLike] = None) -> bool:
    """Check whether ``ref`` resolves in the repository."""
    try:
        _run_git_command(["rev-parse", "--verify", "--quiet", ref], repo_path)
    except GitError:
        return False
    return True


def is_trunk_branch(branch: Optional[str]) -> bool:
    return branch in TRUNK_BRANCHES


def resolve_trunk_branch(repo_path: Optional[PathLike] = None) -> str:
    """Resolve which trunk branch exists.

    Prefers the first conventional name and falls back to the second when
    the first cannot be resolved.

    Returns:
        The trunk branch name.
    """
    preferred, fallback = TRUNK_BRANCHES
    if ref_exists(preferred, repo_path):
        return preferred
    return fallback
