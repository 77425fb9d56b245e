"""CLI commands for global configuration management."""

from typing import Optional

import typer

from commitmuse import global_config
from commitmuse.cli.utils import mask_key
from commitmuse.config import API_KEY_ENV_VARS, AVAILABLE_MODELS, LLMProvider
from commitmuse.llm import validate_api_key_shape
from commitmuse.styles import CUSTOM_STYLE_ID, STYLE_CATALOG

VALID_PROVIDERS = ", ".join(p.value for p in LLMProvider)
NOT_CONFIGURED_MESSAGE = "No configuration found. Run 'commitmuse config set-provider <provider>' to set up."

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global commitmuse configuration in ~/.commitmuse/",
    add_completion=False,
)


def _parse_provider(provider: str) -> LLMProvider:
    try:
        return LLMProvider(provider.lower())
    except ValueError:
        typer.echo(f"Invalid provider: {provider}", err=True)
        typer.echo(f"Valid providers: {VALID_PROVIDERS}")
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration."""
    if not global_config.is_configured():
        typer.echo(NOT_CONFIGURED_MESSAGE)
        return

    try:
        config = global_config.load_global_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    if not config:
        typer.echo(NOT_CONFIGURED_MESSAGE)
        return

    typer.echo("Current commitmuse configuration (~/.commitmuse/config.yaml):")
    typer.echo()
    typer.echo(f"  Provider: {config.get('provider', 'not set')}")
    typer.echo(f"  Model: {config.get('model', 'not set')}")
    typer.echo(f"  Style: {config.get('style', 'not set')}")
    if config.get("custom_instruction"):
        typer.echo(f"  Custom instruction: {config['custom_instruction']}")
    typer.echo(f"  Offline: {bool(config.get('offline', False))}")
    typer.echo()

    for provider in LLMProvider:
        env_var = API_KEY_ENV_VARS[provider]
        api_key = global_config.get_api_key(provider)
        typer.echo(f"  API Key ({env_var}): {mask_key(api_key) if api_key else 'not set'}")


@config_app.command("set-key")
def config_set_key(
    provider: str = typer.Argument(..., help=f"Provider name ({VALID_PROVIDERS})"),
) -> None:
    """Set or update an API key for a provider."""
    llm_provider = _parse_provider(provider)
    env_var = API_KEY_ENV_VARS[llm_provider]

    api_key = typer.prompt(f"Enter your {llm_provider.value} API key", hide_input=True)
    if not validate_api_key_shape(llm_provider, api_key):
        typer.echo(f"Warning: this does not look like a {llm_provider.value} key. Saving anyway.", err=True)

    try:
        global_config.save_credential(env_var, api_key)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ API key saved for {llm_provider.value}")


@config_app.command("set-provider")
def config_set_provider(
    provider: str = typer.Argument(..., help=f"Provider name ({VALID_PROVIDERS})"),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name (defaults to the provider's default model)",
    ),
) -> None:
    """Set the active provider and model."""
    llm_provider = _parse_provider(provider)

    if model and model not in AVAILABLE_MODELS[llm_provider]:
        typer.echo(f"Warning: {model} is not in the list of known models for {llm_provider.value}")

    try:
        global_config.set_provider_and_model(llm_provider, model)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Provider set to: {llm_provider.value}")
    typer.echo(f"✓ Model set to: {global_config.get_active_model()}")


@config_app.command("set-style")
def config_set_style(
    style_id: str = typer.Argument(..., help="Style identifier"),
    instruction: Optional[str] = typer.Option(
        None,
        "--instruction",
        help="Instruction for the 'custom' style",
    ),
) -> None:
    """Set the default commit style."""
    if style_id != CUSTOM_STYLE_ID and style_id not in STYLE_CATALOG:
        typer.echo(f"Invalid style: {style_id}", err=True)
        typer.echo(f"Valid styles: {', '.join(STYLE_CATALOG.ids() + [CUSTOM_STYLE_ID])}")
        raise typer.Exit(1)

    try:
        global_config.set_default_style(style_id)
        if instruction:
            global_config.set_custom_instruction(instruction)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Default style set to: {style_id}")
    if style_id == CUSTOM_STYLE_ID and not (instruction or global_config.get_custom_instruction()):
        typer.echo("Note: no custom instruction set; conventional will be used.", err=True)


@config_app.command("list-providers")
def config_list_providers() -> None:
    """List all available providers and their models."""
    for llm_provider in LLMProvider:
        typer.echo(f"{llm_provider.value}:")
        for model in AVAILABLE_MODELS[llm_provider]:
            typer.echo(f"  • {model}")
        typer.echo()
