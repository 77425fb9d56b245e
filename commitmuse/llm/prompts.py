"""Prompt construction for commit messages and pull-request summaries.

A request is the style instruction, a restatement that only the message
may be returned, and the diff verbatim. The PR summary swaps the style
instruction for a fixed summarization instruction and otherwise uses the
same request shape, so providers never special-case it.
"""

from pydantic import BaseModel, ConfigDict

from commitmuse.styles.models import Style

# System prompt shared by every provider
SYSTEM_PROMPT = (
    "You are a helpful assistant that generates git commit messages. "
    "Always respond with just the commit message, no explanations."
)

OUTPUT_ONLY_INSTRUCTION = "Generate only the commit message, no explanations or additional text."

PR_SUMMARY_INSTRUCTION = (
    "Summarize this pull request in 2-3 sentences. Explain what the changes do "
    "and their impact. Be clear and concise. Provide a summary that would be "
    "useful for code reviewers."
)

PR_SUMMARY_OUTPUT_ONLY = "Generate only the summary, no explanations or additional text."

DIFF_HEADER = "Here's the git diff:"


class GenerationRequest(BaseModel):
    """A single generation request.

    Attributes:
        instruction: Everything the backend is told before the diff.
        diff: The diff text, carried verbatim. May be empty.
    """

    model_config = ConfigDict(frozen=True)

    instruction: str
    diff: str = ""

    def to_prompt(self) -> str:
        """Render the user prompt.

        The diff section is omitted entirely when the diff is blank.
        """
        if not self.diff.strip():
            return self.instruction
        return f"{self.instruction}\n\n{DIFF_HEADER}\n{self.diff}"


def build_request(style: Style, diff: str) -> GenerationRequest:
    """Build the commit message request for a resolved style.

    Args:
        style: The resolved style.
        diff: Unified diff text.

    Returns:
        The GenerationRequest.
    """
    return GenerationRequest(
        instruction=f"{style.instruction}\n\n{OUTPUT_ONLY_INSTRUCTION}",
        diff=diff,
    )


def build_summary_request(diff: str) -> GenerationRequest:
    """Build the pull-request summary request."""
    return GenerationRequest(
        instruction=f"{PR_SUMMARY_INSTRUCTION}\n\n{PR_SUMMARY_OUTPUT_ONLY}",
        diff=diff,
    )
