"""Mistral provider implementation.

Mistral exposes an OpenAI-compatible chat completions API, so this reuses
the OpenAI SDK pointed at Mistral's base URL.
"""

from commitmuse.config import MISTRAL_BASE_URL, LLMProvider
from commitmuse.llm.openai_provider import OpenAIProvider


class MistralProvider(OpenAIProvider):
    """Mistral LLM provider (OpenAI-compatible wire format)."""

    provider = LLMProvider.MISTRAL
    base_url = MISTRAL_BASE_URL
