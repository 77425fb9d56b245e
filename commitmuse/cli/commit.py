"""CLI command for committing with a generated message."""

import subprocess
from pathlib import Path
from typing import Optional

import typer

from commitmuse import global_config
from commitmuse.failures import CommitMuseError
from commitmuse.generator import generate_commit_message
from commitmuse.git import GitError, get_repo_root, get_staged_diff
from commitmuse.cli.utils import echo_framed, echo_nothing_staged, run_async


def commit_command(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Bypass confirmation prompt and commit immediately",
    ),
    message: Optional[str] = typer.Option(
        None,
        "--message",
        help="Use this message instead of generating one",
    ),
    style: Optional[str] = typer.Option(None, "--style", "-s", help="Commit style"),
    offline: bool = typer.Option(False, "--offline", help="Generate without any backend call"),
    repo: Optional[Path] = typer.Option(None, "--repo", help="Path inside the git working tree"),
) -> None:
    """Commit staged changes using a generated message."""
    try:
        repo_root = get_repo_root(repo)

        if not message:
            diff = get_staged_diff(repo_root, max_chars=global_config.get_max_diff_chars())
            if diff is None:
                echo_nothing_staged(repo_root)
                raise typer.Exit(1)

            provider_config = global_config.build_provider_config(offline=True if offline else None)
            message = run_async(generate_commit_message(
                diff,
                style or global_config.get_default_style(),
                provider_config,
                global_config.get_custom_instruction(),
            ))

        echo_framed(message)

        # Ask for confirmation unless --yes flag is used
        if not yes:
            confirm = typer.prompt(
                "Commit with this message? [Y/n]",
                default="y",
                show_default=False,
            )
            if confirm.lower() not in ("y", "yes", ""):
                typer.echo("Commit cancelled.", err=True)
                raise typer.Exit(0)

        typer.echo("Committing...", err=True)
        result = subprocess.run(
            ["git", "-C", str(repo_root), "commit", "-F", "-"],
            input=message,
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            typer.echo("Commit failed!", err=True)
            typer.echo(result.stderr, err=True)
            raise typer.Exit(1)

        typer.echo("Commit successful!", err=True)
        typer.echo(result.stdout)

    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except CommitMuseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)
