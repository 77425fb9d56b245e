"""LLM-related exception classes.

Contains all exception classes for backend operations:
- LLMError: Base exception for backend failures, carries a GenerationFailure
- MissingAPIKeyError: Raised when no API key is configured
- UnsupportedProviderError: Raised when the provider id is not recognized
"""

from typing import Optional

from commitmuse.failures import CommitMuseError, FailureKind, GenerationFailure


class LLMError(CommitMuseError):
    """Base exception for LLM-related errors."""

    @classmethod
    def of(
        cls,
        kind: FailureKind,
        provider_id: Optional[str] = None,
        http_status: Optional[int] = None,
        detail: str = "",
    ) -> "LLMError":
        return cls(GenerationFailure(
            kind=kind,
            provider_id=provider_id,
            http_status=http_status,
            detail=detail,
        ))


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    def __init__(self, provider_id: Optional[str]):
        super().__init__(GenerationFailure(kind=FailureKind.MISSING_CREDENTIAL, provider_id=provider_id))


class UnsupportedProviderError(LLMError):
    """Raised when a provider id names no known backend."""

    def __init__(self, provider_id: Optional[str]):
        super().__init__(GenerationFailure(kind=FailureKind.UNSUPPORTED_PROVIDER, provider_id=provider_id))
