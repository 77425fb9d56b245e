"""Git diff acquisition.

Contains:
- get_staged_diff: Unified diff of the index, or None when nothing is staged
- get_branch_diff: Unified diff of the current branch against trunk, or None
- truncate_diff: Cap a diff at a character budget

Both operations are read-only: they never stage, reset or check out.
"""

from typing import Optional

from commitmuse.git.branch import get_current_branch, is_trunk_branch, resolve_trunk_branch
from commitmuse.git.runner import PathLike, _run_git_command
from commitmuse.git.status import get_staged_files

TRUNCATION_MARKER = "\n...[truncated]\n"


def truncate_diff(diff: str, max_chars: Optional[int]) -> str:
    """Truncate ``diff`` to ``max_chars`` characters, marking the cut."""
    if max_chars is None or max_chars <= 0 or len(diff) <= max_chars:
        return diff
    return diff[:max_chars] + TRUNCATION_MARKER


def get_staged_diff(repo_path: Optional[PathLike] = None, max_chars: Optional[int] = None) -> Optional[str]:
    """Get the diff of staged changes.

    Args:
        repo_path: Working tree to inspect.
        max_chars: Optional character budget for the returned diff.

    Returns:
        The staged diff, or None if nothing is staged or the diff is blank.

    Raises:
        GitError: If git fails.
    """
    if not get_staged_files(repo_path):
        return None

    diff = _run_git_command(["diff", "--cached"], repo_path, strip=False)
    if not diff.strip():
        return None
    return truncate_diff(diff, max_chars)


def get_branch_diff(repo_path: Optional[PathLike] = None, max_chars: Optional[int] = None) -> Optional[str]:
    """Get the diff of the current feature branch against its trunk.

    A trunk branch, or a detached HEAD, has no pull request to summarize.

    Args:
        repo_path: Working tree to inspect.
        max_chars: Optional character budget for the returned diff.

    Returns:
        The branch diff, or None when on trunk or when the diff is blank.

    Raises:
        GitError: If git fails.
    """
    branch = get_current_branch(repo_path)
    if branch is None or is_trunk_branch(branch):
        return None

    base = resolve_trunk_branch(repo_path)
    diff = _run_git_command(["diff", f"{base}...{branch}"], repo_path, strip=False)
    if not diff.strip():
        return None
    return truncate_diff(diff, max_chars)
