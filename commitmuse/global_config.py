"""Global configuration management for commitmuse.

Handles user-level configuration stored in ~/.commitmuse/:
- config.yaml: Provider, model, style and generation settings
- credentials: API keys for the backends

API keys are resolved from the environment first (a repo-level .env is
loaded with python-dotenv), then from the credentials file.
"""

import os
import stat
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from commitmuse.config import (
    API_KEY_ENV_VARS,
    DEFAULT_MAX_DIFF_CHARS,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODELS,
    DEFAULT_PROVIDER,
    DEFAULT_STYLE,
    DEFAULT_TEMPERATURE,
    FALLBACK_ELIGIBLE_PROVIDERS,
    FALLBACK_PROVIDER,
    REQUEST_TIMEOUT,
    LLMProvider,
)
from commitmuse.llm.base import ProviderConfig


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".commitmuse"


def get_global_config_dir() -> Path:
    """Get the global commitmuse configuration directory.

    Returns:
        Path to ~/.commitmuse/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.commitmuse/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    return get_global_config_dir() / "config.yaml"


def get_credentials_file_path() -> Path:
    return get_global_config_dir() / "credentials"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.commitmuse/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file exists but cannot be read or parsed.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.commitmuse/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def _parse_credentials(text: str) -> Dict[str, str]:
    credentials = {}
    for line in text.splitlines():
        line = line.strip()
        # Skip empty lines and comments
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        credentials[key.strip()] = value.strip()
    return credentials


def load_credentials() -> Dict[str, str]:
    """Load API keys from ~/.commitmuse/credentials.

    Returns:
        Dictionary mapping environment variable names to API keys.
    """
    credentials_file = get_credentials_file_path()

    if not credentials_file.exists():
        return {}

    try:
        return _parse_credentials(credentials_file.read_text())
    except OSError as e:
        raise GlobalConfigError(f"Failed to load credentials from {credentials_file}: {e}")


def save_credential(provider_key: str, api_key: str) -> None:
    """Save or update an API key in the credentials file.

    Args:
        provider_key: Environment variable name (e.g., "OPENAI_API_KEY")
        api_key: The API key value.
    """
    ensure_global_config_dir()
    credentials_file = get_credentials_file_path()

    existing_creds = load_credentials()
    existing_creds[provider_key] = api_key

    try:
        with open(credentials_file, "w") as f:
            f.write("# commitmuse API credentials\n")
            f.write("# Format: PROVIDER_API_KEY=your_key_here\n\n")
            for key, value in existing_creds.items():
                f.write(f"{key}={value}\n")

        # Owner read/write only
        os.chmod(credentials_file, stat.S_IRUSR | stat.S_IWUSR)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save credential: {e}")


def get_credential(provider_key: str) -> Optional[str]:
    """Get an API key from the credentials file."""
    return load_credentials().get(provider_key)


def get_api_key(provider: LLMProvider) -> Optional[str]:
    """Resolve the API key for ``provider``.

    Checks in order:
    1. Environment variable (including a loaded .env file)
    2. ~/.commitmuse/credentials

    Returns:
        The key, or None if not configured anywhere.
    """
    env_var = API_KEY_ENV_VARS[provider]
    api_key = os.getenv(env_var)
    if api_key:
        return api_key
    return get_credential(env_var)


def get_active_provider() -> Optional[LLMProvider]:
    """Get the active provider from global config.

    Returns:
        LLMProvider enum value, or None if not configured or not recognized.
    """
    provider_str = load_global_config().get("provider")
    if not provider_str:
        return None
    try:
        return LLMProvider(provider_str)
    except ValueError:
        return None


def get_active_model() -> Optional[str]:
    return load_global_config().get("model")


def set_provider_and_model(provider: LLMProvider, model: Optional[str] = None) -> None:
    """Set the active provider and model in global config.

    Args:
        provider: The provider to use.
        model: The model name. Defaults to the provider's default model.
    """
    config = load_global_config()
    config["provider"] = provider.value
    config["model"] = model or DEFAULT_MODELS[provider]
    save_global_config(config)


def get_default_style() -> str:
    return load_global_config().get("style") or DEFAULT_STYLE


def set_default_style(style_id: str) -> None:
    config = load_global_config()
    config["style"] = style_id
    save_global_config(config)


def get_custom_instruction() -> Optional[str]:
    return load_global_config().get("custom_instruction")


def set_custom_instruction(instruction: str) -> None:
    config = load_global_config()
    config["custom_instruction"] = instruction
    save_global_config(config)


def get_max_diff_chars() -> int:
    return int(load_global_config().get("max_diff_chars", DEFAULT_MAX_DIFF_CHARS))


def is_configured() -> bool:
    return get_config_file_path().exists()


def build_provider_config(
    provider: Optional[str] = None,
    model: Optional[str] = None,
    offline: Optional[bool] = None,
) -> ProviderConfig:
    """Assemble the ProviderConfig for one invocation.

    Command-line overrides win over config.yaml, which wins over the
    built-in defaults. The fallback key is only looked up when the active
    provider is eligible for the fallback hop.

    Args:
        provider: Provider id override.
        model: Model override.
        offline: Offline mode override.

    Returns:
        The ProviderConfig. An unrecognized provider id is passed through
        unchanged so that dispatch reports it as unsupported.
    """
    load_dotenv()
    config = load_global_config()

    provider_id = provider or config.get("provider") or DEFAULT_PROVIDER.value
    try:
        llm_provider = LLMProvider(provider_id)
    except ValueError:
        llm_provider = None

    api_key = get_api_key(llm_provider) if llm_provider else None
    fallback_api_key = None
    if llm_provider in FALLBACK_ELIGIBLE_PROVIDERS:
        fallback_api_key = get_api_key(FALLBACK_PROVIDER)

    # A configured model only applies to the provider it was chosen for
    configured_model = config.get("model") if config.get("provider") == provider_id else None

    return ProviderConfig(
        provider=provider_id,
        api_key=api_key or "",
        fallback_api_key=fallback_api_key,
        model=model or configured_model,
        max_tokens=int(config.get("max_tokens", DEFAULT_MAX_TOKENS)),
        temperature=float(config.get("temperature", DEFAULT_TEMPERATURE)),
        timeout=float(config.get("timeout", REQUEST_TIMEOUT)),
        offline=bool(config.get("offline", False)) if offline is None else offline,
        heuristic_on_failure=bool(config.get("heuristic_on_failure", False)),
    )
