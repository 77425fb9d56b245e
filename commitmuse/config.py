"""Configuration constants for commitmuse LLM providers.

User settings are loaded from ~/.commitmuse/config.yaml by
commitmuse.global_config; the values here are the built-in defaults.
"""

from enum import Enum


class LLMProvider(Enum):
    """Supported text-generation backends."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    MISTRAL = "mistral"


# ============================================================
# DEFAULT VALUES
# ============================================================

DEFAULT_PROVIDER = LLMProvider.OPENAI
DEFAULT_STYLE = "conventional"
DEFAULT_MAX_TOKENS = 100
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_DIFF_CHARS = 50000

# Seconds before a backend call is abandoned
REQUEST_TIMEOUT = 30.0

ANTHROPIC_VERSION = "2023-06-01"
MISTRAL_BASE_URL = "https://api.mistral.ai/v1"

# Backend retried once when the primary provider fails
FALLBACK_PROVIDER = LLMProvider.OPENAI

# Primary providers allowed to hop to FALLBACK_PROVIDER. Mistral keys carry
# no standard prefix, so a misconfigured key is the common failure there.
FALLBACK_ELIGIBLE_PROVIDERS = (LLMProvider.MISTRAL,)


# ============================================================
# MODELS PER PROVIDER
# ============================================================

DEFAULT_MODELS = {
    LLMProvider.OPENAI: "gpt-4o-mini",
    LLMProvider.ANTHROPIC: "claude-3-5-haiku-latest",
    LLMProvider.MISTRAL: "mistral-small-latest",
}

AVAILABLE_MODELS = {
    LLMProvider.OPENAI: [
        "gpt-4o-mini",
        "gpt-4o",
        "gpt-4.1-mini",
        "gpt-4.1",
        "gpt-3.5-turbo",
    ],
    LLMProvider.ANTHROPIC: [
        "claude-3-5-haiku-latest",
        "claude-3-5-sonnet-latest",
        "claude-sonnet-4-20250514",
        "claude-3-haiku-20240307",
    ],
    LLMProvider.MISTRAL: [
        "mistral-small-latest",
        "mistral-medium-latest",
        "mistral-large-latest",
        "codestral-latest",
    ],
}


# ============================================================
# API KEYS
# ============================================================

API_KEY_ENV_VARS = {
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
    LLMProvider.MISTRAL: "MISTRAL_API_KEY",
}

# Conventional key prefixes. Advisory only: vendors change them.
API_KEY_PREFIXES = {
    LLMProvider.OPENAI: "sk-",
    LLMProvider.ANTHROPIC: "sk-ant-",
}

MIN_API_KEY_LENGTHS = {
    LLMProvider.OPENAI: 21,
    LLMProvider.ANTHROPIC: 21,
    LLMProvider.MISTRAL: 11,
}


