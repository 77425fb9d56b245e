"""Git status utilities.

Contains:
- get_status: Get git status output in porcelain format
- get_staged_files: Get the paths whose index column shows a staged change
"""

from typing import Optional

from commitmuse.git.runner import PathLike, _run_git_command


def get_status(repo_path: Optional[PathLike] = None) -> str:
    """Get git status output in porcelain format.

    Returns:
        The git status output.
    """
    return _run_git_command(["status", "--porcelain=v1"], repo_path, strip=False)


def get_staged_files(repo_path: Optional[PathLike] = None) -> list[str]:
    """Get list of staged file paths.

    The porcelain format uses two columns: the first is the index (staged)
    status, the second the worktree status. A file is staged when the first
    column is neither a space nor '?'.

    Returns:
        List of staged file paths. Renames report the new path.
    """
    staged = []
    for line in get_status(repo_path).splitlines():
        if len(line) < 4:
            continue
        index_col = line[0]
        if index_col in (" ", "?", "!"):
            continue
        path = line[3:]
        if " -> " in path:
            path = path.split(" -> ", 1)[1]
        staged.append(path.strip().strip('"'))
    return staged
