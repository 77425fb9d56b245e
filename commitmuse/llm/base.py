"""Base classes and shared utilities for LLM providers."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from commitmuse.config import (
    API_KEY_PREFIXES,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODELS,
    DEFAULT_PROVIDER,
    DEFAULT_TEMPERATURE,
    MIN_API_KEY_LENGTHS,
    REQUEST_TIMEOUT,
    LLMProvider,
)
from commitmuse.failures import FailureKind
from commitmuse.llm.exceptions import LLMError, MissingAPIKeyError
from commitmuse.llm.prompts import SYSTEM_PROMPT, GenerationRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderConfig:
    """Per-invocation backend settings.

    Built by the caller for each call. The core never caches or persists
    the keys held here.

    Attributes:
        provider: Provider id (openai, anthropic, mistral).
        api_key: Key for ``provider``.
        fallback_api_key: Key for the fallback backend, if configured.
        model: Model override for ``provider``.
        max_tokens: Response token budget.
        temperature: Sampling temperature (ignored by backends without it).
        timeout: Request timeout in seconds.
        offline: Skip the network and use the heuristic generator.
        heuristic_on_failure: Answer with the heuristic generator when every
            backend failed, instead of raising.
    """

    provider: str = DEFAULT_PROVIDER.value
    api_key: str = ""
    fallback_api_key: Optional[str] = None
    model: Optional[str] = None
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    timeout: float = REQUEST_TIMEOUT
    offline: bool = False
    heuristic_on_failure: bool = False

    def __repr__(self) -> str:
        # Keys stay out of logs and tracebacks
        return (
            f"ProviderConfig(provider={self.provider!r}, model={self.model!r}, "
            f"fallback={'set' if self.fallback_api_key else 'unset'}, offline={self.offline})"
        )


def classify_status(status_code: int) -> FailureKind:
    """Classify a non-2xx HTTP status the same way for every backend."""
    if status_code == 401:
        return FailureKind.INVALID_CREDENTIALS
    if status_code == 429:
        return FailureKind.RATE_LIMITED
    if status_code == 403:
        return FailureKind.ACCESS_FORBIDDEN
    if status_code == 404:
        return FailureKind.ENDPOINT_NOT_FOUND
    return FailureKind.BACKEND_ERROR


def extract_error_message(body: Any) -> Optional[str]:
    """Pull the backend's own error text out of an error body.

    Handles ``{"error": {"message": ...}}`` (OpenAI, Anthropic),
    ``{"message": ...}`` (Mistral) and ``{"error": "..."}``.

    Args:
        body: Decoded error body (dict, str or None).

    Returns:
        The message, or None if the body carries none.
    """
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if body.get("message"):
            return str(body["message"])
        if isinstance(error, str) and error:
            return error
        return None
    if isinstance(body, str) and body.strip():
        return body.strip()
    return None


def validate_api_key_shape(provider: LLMProvider, api_key: str) -> bool:
    """Advisory check that a key looks like ``provider``'s keys.

    Prefixes are conventions, not guarantees, so callers must only warn on
    a False result.
    """
    if not api_key:
        return False
    prefix = API_KEY_PREFIXES.get(provider)
    if prefix and not api_key.startswith(prefix):
        return False
    return len(api_key) >= MIN_API_KEY_LENGTHS.get(provider, 1)


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers.

    Subclasses implement ``_complete`` and translate their SDK's exceptions
    into LLMError; ``send`` adds the shared credential and empty-response
    checks.
    """

    provider: LLMProvider

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        timeout: float = REQUEST_TIMEOUT,
    ):
        """Initialize the provider.

        Args:
            api_key: The backend API key.
            model: The model to use. Defaults to the provider's default model.
            max_tokens: Response token budget.
            temperature: Sampling temperature.
            timeout: Request timeout in seconds.
        """
        self.api_key = api_key
        self.model = model or DEFAULT_MODELS[self.provider]
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout

    @property
    def provider_id(self) -> str:
        return self.provider.value

    @property
    def system_prompt(self) -> str:
        return SYSTEM_PROMPT

    @abstractmethod
    async def _complete(self, request: GenerationRequest) -> Optional[str]:
        """Call the backend and return the raw generated text.

        Raises:
            LLMError: For any backend or transport failure.
        """

    async def send(self, request: GenerationRequest) -> str:
        """Send a request and return the trimmed message.

        Args:
            request: The generation request.

        Returns:
            The generated text, trimmed and non-empty.

        Raises:
            MissingAPIKeyError: If no API key is set.
            LLMError: For other backend failures.
        """
        if not self.api_key or not self.api_key.strip():
            raise MissingAPIKeyError(self.provider_id)

        if not validate_api_key_shape(self.provider, self.api_key):
            logger.warning(
                "%s API key does not look like a %s key; sending anyway",
                self.provider_id, self.provider_id,
            )

        logger.debug("Sending %d-char prompt to %s (%s)", len(request.to_prompt()), self.provider_id, self.model)
        text = await self._complete(request)

        text = (text or "").strip()
        if not text:
            raise LLMError.of(FailureKind.EMPTY_RESPONSE, self.provider_id)
        return text

    def _error(self, kind: FailureKind, http_status: Optional[int] = None, detail: str = "") -> LLMError:
        return LLMError.of(kind, self.provider_id, http_status, detail)

    def _status_error(self, status_code: int, body: Any, fallback_message: str = "") -> LLMError:
        """Build the LLMError for a non-2xx response."""
        detail = extract_error_message(body) or fallback_message or "Unknown error"
        return self._error(classify_status(status_code), status_code, detail)
