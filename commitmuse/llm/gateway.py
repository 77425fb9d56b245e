"""Provider selection and dispatch, including the single fallback hop."""

import logging
from typing import Union

from commitmuse.config import FALLBACK_ELIGIBLE_PROVIDERS, FALLBACK_PROVIDER, LLMProvider
from commitmuse.llm.anthropic_provider import AnthropicProvider
from commitmuse.llm.base import BaseLLMProvider, ProviderConfig
from commitmuse.llm.exceptions import LLMError, UnsupportedProviderError
from commitmuse.llm.mistral_provider import MistralProvider
from commitmuse.llm.openai_provider import OpenAIProvider
from commitmuse.llm.prompts import GenerationRequest

logger = logging.getLogger(__name__)

PROVIDER_CLASSES = {
    LLMProvider.OPENAI: OpenAIProvider,
    LLMProvider.ANTHROPIC: AnthropicProvider,
    LLMProvider.MISTRAL: MistralProvider,
}


def resolve_provider_id(provider: Union[LLMProvider, str, None]) -> LLMProvider:
    """Map a provider id to LLMProvider.

    Raises:
        UnsupportedProviderError: If the id names no known backend.
    """
    if isinstance(provider, LLMProvider):
        return provider
    try:
        return LLMProvider(str(provider).strip().lower())
    except ValueError:
        raise UnsupportedProviderError(None if provider is None else str(provider))


def get_provider(
    provider: Union[LLMProvider, str],
    api_key: str,
    config: ProviderConfig = ProviderConfig(),
    use_model_override: bool = True,
) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        provider: The provider to use.
        api_key: API key for that provider.
        config: Shared settings (model, token budget, temperature, timeout).
        use_model_override: Apply ``config.model``. Off for the fallback
            backend, whose model names differ from the primary's.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        UnsupportedProviderError: If the provider is not supported.
    """
    provider_id = resolve_provider_id(provider)
    provider_class = PROVIDER_CLASSES[provider_id]
    return provider_class(
        api_key=api_key,
        model=config.model if use_model_override else None,
        max_tokens=config.max_tokens,
        temperature=config.temperature,
        timeout=config.timeout,
    )


async def dispatch(
    provider: Union[LLMProvider, str],
    api_key: str,
    request: GenerationRequest,
    config: ProviderConfig = ProviderConfig(),
) -> str:
    """Send ``request`` to one backend.

    Returns:
        The trimmed generated text.

    Raises:
        LLMError: Classified failure. Nothing else escapes.
    """
    return await get_provider(provider, api_key, config).send(request)


def _can_fall_back(provider_id: LLMProvider, config: ProviderConfig) -> bool:
    return provider_id in FALLBACK_ELIGIBLE_PROVIDERS and bool(config.fallback_api_key)


async def dispatch_with_fallback(config: ProviderConfig, request: GenerationRequest) -> str:
    """Send ``request`` to the configured backend, hopping once on failure.

    When the primary backend is eligible (Mistral) and a fallback key is
    configured, a failed primary call is retried once, sequentially, against
    the fallback backend. The hop is never chained. If the fallback also
    fails, the original failure is logged and the fallback failure raised.

    Args:
        config: Provider settings for this call.
        request: The generation request.

    Returns:
        The trimmed generated text.

    Raises:
        LLMError: The primary failure, or the fallback failure after a hop.
    """
    provider_id = resolve_provider_id(config.provider)

    try:
        return await dispatch(provider_id, config.api_key, request, config)
    except LLMError as primary_error:
        if not _can_fall_back(provider_id, config):
            raise

        logger.warning(
            "Primary provider %s failed (%s), trying %s",
            provider_id.value, primary_error.kind.value, FALLBACK_PROVIDER.value,
        )
        fallback = get_provider(
            FALLBACK_PROVIDER, config.fallback_api_key, config, use_model_override=False
        )
        try:
            return await fallback.send(request)
        except LLMError:
            logger.error(
                "Fallback provider %s also failed; original %s failure: %s",
                FALLBACK_PROVIDER.value, provider_id.value, primary_error.failure.user_message(),
            )
            raise
