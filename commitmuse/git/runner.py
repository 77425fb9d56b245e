"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command inside a working tree and return its output
- get_repo_root: Get the root directory of the git repository
"""

import subprocess
from pathlib import Path
from typing import Optional, Union

from commitmuse.git.exceptions import GitError

PathLike = Union[str, Path]


def _run_git_command(args: list[str], repo_path: Optional[PathLike] = None, strip: bool = True) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        repo_path: Working tree to run in. Defaults to the current directory.
        strip: Strip surrounding whitespace from stdout.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails or git is not installed.
    """
    command = ["git"]
    if repo_path is not None:
        command += ["-C", str(repo_path)]
    command += args

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}".rstrip())
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")

    return result.stdout.strip() if strip else result.stdout


def get_repo_root(repo_path: Optional[PathLike] = None) -> Path:
    """Get the root directory of the git repository.

    Args:
        repo_path: Any directory inside the working tree.

    Returns:
        Path to the repository root.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"], repo_path)
    except GitError:
        raise GitError("Not in a git repository. Please run this command from within a git repo.")
    return Path(root)
