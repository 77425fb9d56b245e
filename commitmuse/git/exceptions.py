"""Git-related exception classes.

Contains:
- GitError: Raised when the git executable fails or is missing
"""

from commitmuse.failures import CommitMuseError, FailureKind, GenerationFailure


class GitError(CommitMuseError):
    """Custom exception for git-related errors.

    Always classified as ``VcsUnavailable`` so callers never see a raw
    subprocess error.
    """

    def __init__(self, detail: str):
        super().__init__(GenerationFailure(kind=FailureKind.VCS_UNAVAILABLE, detail=detail))
        self.detail = detail
