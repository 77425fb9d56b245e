"""Shared utility functions for CLI commands."""

import asyncio
import logging
import subprocess
from typing import Awaitable, Optional, TypeVar

import typer

from commitmuse.git.runner import PathLike

T = TypeVar("T")

RULE = "=" * 60


def configure_logging(verbose: bool) -> None:
    """Configure root logging for a CLI run.

    ``force=True`` re-applies handlers on repeated invocations (tests).
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        force=True,
    )


def run_async(awaitable: Awaitable[T]) -> T:
    """Run a pipeline coroutine to completion from synchronous CLI code."""
    return asyncio.run(awaitable)


def get_current_branch_safe(repo_path: Optional[PathLike] = None) -> str:
    """Safely get the current branch name without raising errors.

    Args:
        repo_path: Working tree to inspect. Defaults to the current directory.

    Returns:
        The branch name, or 'unknown' if it cannot be determined.
    """
    command = ["git"]
    if repo_path is not None:
        command += ["-C", str(repo_path)]
    command += ["branch", "--show-current"]

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode == 0 and result.stdout.strip():
            return result.stdout.strip()
        return "unknown"
    except OSError:
        return "unknown"


def echo_framed(text: str) -> None:
    """Print ``text`` between horizontal rules on stdout."""
    typer.echo("")
    typer.echo(RULE)
    typer.echo(text)
    typer.echo(RULE)
    typer.echo("")


def echo_nothing_staged(repo_path: Optional[PathLike] = None) -> None:
    """Display a git-style message for no staged changes."""
    typer.echo("On branch " + get_current_branch_safe(repo_path), err=True)
    typer.echo("", err=True)
    typer.echo("nothing to commit (no changes staged for commit)", err=True)
    typer.echo("", err=True)
    typer.echo("Stage your changes first with:", err=True)
    typer.echo("  git add <file>...", err=True)


def mask_key(api_key: str) -> str:
    return api_key[:8] + "..." + api_key[-4:] if len(api_key) > 12 else "***"
