"""Commit message and pull-request summary generation pipeline.

This is the entry point for callers: hand in a diff, a style id and a
ProviderConfig; get back a message string or a CommitMuseError.
"""

import logging
from typing import Optional

from commitmuse.failures import FailureKind, GenerationFailure
from commitmuse.llm import (
    LLMError,
    MissingAPIKeyError,
    ProviderConfig,
    build_request,
    build_summary_request,
    dispatch_with_fallback,
    resolve_provider_id,
)
from commitmuse.llm.prompts import GenerationRequest
from commitmuse.styles import heuristic_message, heuristic_summary, resolve_style
from commitmuse.styles.models import Style

logger = logging.getLogger(__name__)

# Failures a local heuristic answer cannot paper over
_NOT_RECOVERABLE = frozenset({FailureKind.UNSUPPORTED_PROVIDER})


def _require_diff(diff: Optional[str], kind: FailureKind) -> str:
    if diff is None or not diff.strip():
        raise LLMError(GenerationFailure(kind=kind))
    return diff


async def _run(
    request: GenerationRequest,
    provider_config: ProviderConfig,
    offline_answer,
) -> str:
    """Dispatch ``request`` or answer locally.

    ``offline_answer`` is a zero-argument callable returning the heuristic
    text; it is only evaluated when the network path is skipped or failed.
    """
    if provider_config.offline:
        logger.debug("Offline mode: using heuristic generator")
        return offline_answer()

    provider_id = resolve_provider_id(provider_config.provider)
    if not provider_config.api_key or not provider_config.api_key.strip():
        raise MissingAPIKeyError(provider_id.value)

    try:
        return await dispatch_with_fallback(provider_config, request)
    except LLMError as e:
        if not provider_config.heuristic_on_failure or e.kind in _NOT_RECOVERABLE:
            raise
        logger.warning("Generation failed (%s); using heuristic generator", e.kind.value)
        return offline_answer()


async def generate_commit_message(
    diff: Optional[str],
    style_id: str,
    provider_config: ProviderConfig,
    custom_instruction: Optional[str] = None,
) -> str:
    """Generate a commit message for a staged diff.

    Args:
        diff: Unified diff of the staged changes.
        style_id: Style identifier; unknown ids fall back to conventional.
        provider_config: Backend settings for this call.
        custom_instruction: Instruction for the ``custom`` style.

    Returns:
        The trimmed, non-empty commit message.

    Raises:
        CommitMuseError: Typed failure. An empty diff raises
            ``NoStagedChanges`` before any network call.
    """
    diff = _require_diff(diff, FailureKind.NO_STAGED_CHANGES)
    style: Style = resolve_style(style_id, custom_instruction)
    request = build_request(style, diff)

    return await _run(request, provider_config, lambda: heuristic_message(diff, style))


async def summarize_changes(diff: Optional[str], provider_config: ProviderConfig) -> str:
    """Summarize a branch diff for pull-request reviewers.

    Args:
        diff: Unified diff of the branch against trunk.
        provider_config: Backend settings for this call.

    Returns:
        A 2-3 sentence summary.

    Raises:
        CommitMuseError: Typed failure. An empty diff raises
            ``NoBranchChanges`` before any network call.
    """
    diff = _require_diff(diff, FailureKind.NO_BRANCH_CHANGES)
    request = build_summary_request(diff)

    return await _run(request, provider_config, lambda: heuristic_summary(diff))
