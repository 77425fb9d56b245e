"""Main CLI command for generating commit messages."""

from pathlib import Path
from typing import Optional

import typer

from commitmuse import global_config
from commitmuse.failures import CommitMuseError
from commitmuse.generator import generate_commit_message
from commitmuse.git import GitError, get_repo_root, get_staged_diff
from commitmuse.cli.utils import configure_logging, echo_framed, echo_nothing_staged, run_async


def main_command(
    ctx: typer.Context,
    style: Optional[str] = typer.Option(
        None,
        "--style",
        "-s",
        help="Commit style (conventional, emoji, corporate, casual, genz, tldr, custom)",
    ),
    custom: Optional[str] = typer.Option(
        None,
        "--custom",
        help="Instruction for the 'custom' style (overrides config)",
    ),
    provider: Optional[str] = typer.Option(
        None,
        "--provider",
        "-p",
        help="Override the provider (openai, anthropic, mistral)",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Override the model for the provider",
    ),
    offline: bool = typer.Option(
        False,
        "--offline",
        help="Generate locally from diff statistics, without any backend call",
    ),
    repo: Optional[Path] = typer.Option(
        None,
        "--repo",
        help="Path inside the git working tree (defaults to the current directory)",
    ),
    max_diff_chars: Optional[int] = typer.Option(
        None,
        "--max-diff-chars",
        help="Maximum characters of diff sent to the backend",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Generate an AI commit message from staged changes."""
    configure_logging(verbose)

    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    try:
        repo_root = get_repo_root(repo)

        typer.echo("Collecting staged changes...", err=True)
        diff = get_staged_diff(repo_root, max_chars=max_diff_chars or global_config.get_max_diff_chars())
        if diff is None:
            echo_nothing_staged(repo_root)
            raise typer.Exit(1)

        provider_config = global_config.build_provider_config(
            provider=provider,
            model=model,
            offline=True if offline else None,
        )
        style_id = style or global_config.get_default_style()
        custom_instruction = custom or global_config.get_custom_instruction()

        typer.echo(f"Generating {style_id} commit message...", err=True)
        message = run_async(
            generate_commit_message(diff, style_id, provider_config, custom_instruction)
        )

        echo_framed(message)
        typer.echo("Run 'commitmuse commit' to commit with a generated message.", err=True)

    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except CommitMuseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)
