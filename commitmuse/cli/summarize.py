"""CLI command for pull-request summaries."""

from pathlib import Path
from typing import Optional

import typer

from commitmuse import global_config
from commitmuse.failures import CommitMuseError
from commitmuse.generator import summarize_changes
from commitmuse.git import GitError, get_branch_diff, get_repo_root
from commitmuse.cli.utils import echo_framed, run_async


def summarize_command(
    provider: Optional[str] = typer.Option(
        None,
        "--provider",
        "-p",
        help="Override the provider (openai, anthropic, mistral)",
    ),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Override the model"),
    offline: bool = typer.Option(
        False,
        "--offline",
        help="Summarize from diff statistics, without any backend call",
    ),
    repo: Optional[Path] = typer.Option(None, "--repo", help="Path inside the git working tree"),
) -> None:
    """Summarize the current branch against main/master for reviewers."""
    try:
        repo_root = get_repo_root(repo)
        diff = get_branch_diff(repo_root, max_chars=global_config.get_max_diff_chars())
        if diff is None:
            typer.echo("Nothing to summarize: on a trunk branch or no changes against trunk.", err=True)
            raise typer.Exit(1)

        provider_config = global_config.build_provider_config(
            provider=provider,
            model=model,
            offline=True if offline else None,
        )
        typer.echo("Summarizing branch changes...", err=True)
        summary = run_async(summarize_changes(diff, provider_config))
        echo_framed(summary)

    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except CommitMuseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)
