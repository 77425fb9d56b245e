"""CLI entry point for commitmuse.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from commitmuse.cli.commit import commit_command
from commitmuse.cli.config import config_app
from commitmuse.cli.main import main_command
from commitmuse.cli.style import style_app
from commitmuse.cli.summarize import summarize_command

# Main application
app = typer.Typer(
    name="commitmuse",
    help="commitmuse: AI commit messages and PR summaries from your git diff",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")
app.add_typer(style_app, name="style")

# Add individual commands
app.command("summarize")(summarize_command)
app.command("commit")(commit_command)

# Set the main callback for default behavior
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "style_app",
    "commit_command",
    "main_command",
    "summarize_command",
]
