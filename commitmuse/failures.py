"""Typed failure values shared by every commitmuse component.

Contains:
- FailureKind: Classification of a failed generation attempt
- GenerationFailure: The failure value handed back to callers
- CommitMuseError: Base exception carrying a GenerationFailure
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class FailureKind(str, Enum):
    """Why a generation attempt produced no message."""

    NO_STAGED_CHANGES = "NoStagedChanges"
    NO_BRANCH_CHANGES = "NoBranchChanges"
    MISSING_CREDENTIAL = "MissingCredential"
    UNSUPPORTED_PROVIDER = "UnsupportedProvider"
    INVALID_CREDENTIALS = "InvalidCredentials"
    RATE_LIMITED = "RateLimited"
    ACCESS_FORBIDDEN = "AccessForbidden"
    ENDPOINT_NOT_FOUND = "EndpointNotFound"
    BACKEND_ERROR = "BackendError"
    CONNECTIVITY_ERROR = "ConnectivityError"
    NETWORK_TIMEOUT = "NetworkTimeout"
    VCS_UNAVAILABLE = "VcsUnavailable"
    EMPTY_RESPONSE = "EmptyResponse"


# Kinds that describe "nothing to do" rather than a broken call
PRECONDITION_KINDS = frozenset({
    FailureKind.NO_STAGED_CHANGES,
    FailureKind.NO_BRANCH_CHANGES,
})

PROVIDER_DISPLAY_NAMES = {
    "openai": "OpenAI",
    "anthropic": "Claude",
    "mistral": "Mistral",
}


class GenerationFailure(BaseModel):
    """A classified failure of one generation attempt.

    Attributes:
        kind: The failure classification.
        provider_id: Backend that produced the failure, if any.
        http_status: HTTP status returned by the backend, if any.
        detail: Backend or tool message text, shown to the user verbatim.
    """

    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    provider_id: Optional[str] = None
    http_status: Optional[int] = None
    detail: str = ""

    @property
    def is_precondition(self) -> bool:
        return self.kind in PRECONDITION_KINDS

    def user_message(self) -> str:
        """Render the failure as a line suitable for display.

        Returns:
            Human-readable description including the backend's own text.
        """
        name = PROVIDER_DISPLAY_NAMES.get(self.provider_id or "", self.provider_id or "AI")
        kind = self.kind

        if kind == FailureKind.NO_STAGED_CHANGES:
            text = "No staged changes found. Stage your changes first with: git add <files>"
        elif kind == FailureKind.NO_BRANCH_CHANGES:
            text = "No branch changes to summarize. Switch to a feature branch first."
        elif kind == FailureKind.MISSING_CREDENTIAL:
            text = f"{name} API key not configured. Run: commitmuse config set-key <provider>"
        elif kind == FailureKind.UNSUPPORTED_PROVIDER:
            text = f"Unsupported AI provider: {self.provider_id}"
        elif kind == FailureKind.INVALID_CREDENTIALS:
            text = f"Invalid {name} API key. Please check your API key."
        elif kind == FailureKind.RATE_LIMITED:
            text = f"{name} API rate limit exceeded. Please try again later."
        elif kind == FailureKind.ACCESS_FORBIDDEN:
            text = f"{name} API access forbidden. Check your subscription."
        elif kind == FailureKind.ENDPOINT_NOT_FOUND:
            text = f"{name} API endpoint not found. Please check the model name."
        elif kind == FailureKind.BACKEND_ERROR:
            text = f"{name} API error ({self.http_status}): {self.detail or 'Unknown error'}"
        elif kind == FailureKind.CONNECTIVITY_ERROR:
            text = f"Failed to connect to {name} API. Please check your internet connection."
        elif kind == FailureKind.NETWORK_TIMEOUT:
            text = f"{name} API request timed out."
        elif kind == FailureKind.VCS_UNAVAILABLE:
            text = "Git is unavailable for this working tree."
        else:  # EMPTY_RESPONSE
            text = f"{name} API returned no message text."

        if self.detail and kind != FailureKind.BACKEND_ERROR:
            text = f"{text}\n{self.detail}"
        return text


class CommitMuseError(Exception):
    """Base exception for all commitmuse failures.

    Every error raised out of the pipeline is a CommitMuseError whose
    ``failure`` attribute classifies it.
    """

    def __init__(self, failure: GenerationFailure):
        self.failure = failure
        super().__init__(failure.user_message())

    @property
    def kind(self) -> FailureKind:
        return self.failure.kind
