"""CLI commands for commit style management."""

import typer

from commitmuse import global_config
from commitmuse.styles import CUSTOM_STYLE_ID, STYLE_CATALOG

# Subcommand group for style management
style_app = typer.Typer(
    name="style",
    help="List and inspect commit message styles",
    add_completion=False,
)


@style_app.command("list")
def style_list() -> None:
    """List available styles and show the configured default."""
    try:
        current = global_config.get_default_style()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("Available styles:")
    typer.echo()
    for style in STYLE_CATALOG.list_styles():
        marker = "*" if style.id == current else " "
        typer.echo(f" {marker} {style.id:<14} {style.display_name}")
        typer.echo(f"   {'':<14} e.g. {style.example}")

    marker = "*" if current == CUSTOM_STYLE_ID else " "
    typer.echo(f" {marker} {CUSTOM_STYLE_ID:<14} Custom (instruction from config)")
    typer.echo()
    typer.echo("Set the default with: commitmuse config set-style <style>")


@style_app.command("show")
def style_show(
    style_id: str = typer.Argument(..., help="Style identifier"),
) -> None:
    """Show the instruction and example for a style."""
    if style_id == CUSTOM_STYLE_ID:
        instruction = global_config.get_custom_instruction()
        typer.echo("Style: custom")
        typer.echo(f"Instruction: {instruction or '(not set, falls back to conventional)'}")
        return

    style = STYLE_CATALOG.get(style_id)
    if style is None:
        typer.echo(f"Unknown style: {style_id}", err=True)
        typer.echo(f"Valid styles: {', '.join(STYLE_CATALOG.ids() + [CUSTOM_STYLE_ID])}")
        raise typer.Exit(1)

    typer.echo(f"Style: {style.id} ({style.display_name})")
    typer.echo(f"Instruction: {style.instruction}")
    typer.echo(f"Example: {style.example}")
