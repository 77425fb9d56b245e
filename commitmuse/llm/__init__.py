"""LLM provider module for commitmuse.

This module provides a unified interface to the supported backends:
- openai: OpenAI chat completions
- anthropic: Anthropic messages API
- mistral: Mistral (OpenAI-compatible chat completions)
"""

from commitmuse.llm.base import (
    BaseLLMProvider,
    ProviderConfig,
    classify_status,
    extract_error_message,
    validate_api_key_shape,
)
from commitmuse.llm.exceptions import (
    LLMError,
    MissingAPIKeyError,
    UnsupportedProviderError,
)
from commitmuse.llm.gateway import (
    dispatch,
    dispatch_with_fallback,
    get_provider,
    resolve_provider_id,
)
from commitmuse.llm.prompts import (
    SYSTEM_PROMPT,
    GenerationRequest,
    build_request,
    build_summary_request,
)


# Export commonly used items
__all__ = [
    "BaseLLMProvider",
    "ProviderConfig",
    "LLMError",
    "MissingAPIKeyError",
    "UnsupportedProviderError",
    "GenerationRequest",
    "SYSTEM_PROMPT",
    "build_request",
    "build_summary_request",
    "classify_status",
    "extract_error_message",
    "validate_api_key_shape",
    "dispatch",
    "dispatch_with_fallback",
    "get_provider",
    "resolve_provider_id",
]
