"""Merge decision results."""

from dataclasses import dataclass
from enum import Enum

NOT_OPEN_MESSAGE = "Pull request is not open."
FETCH_ERROR_MESSAGE = "Error fetching pull request details. Try again."
NOT_MERGEABLE_MESSAGE = (
    "Pull Request is not mergeable. Make sure there is approval and status checks have passed."
)
AUTHOR_MISMATCH_MESSAGE = "Merge request comment must be made by the pull request author."
MERGE_RESPONSE_ERROR_MESSAGE = "Error fetching merge request response details."
MERGE_FAILED_MESSAGE = "Pull request could not be merged."


class OutcomeKind(str, Enum):
    """How a decision run ended."""

    MERGED = "merged"
    NOT_OPEN = "not_open"
    FETCH_ERROR = "fetch_error"
    NOT_MERGEABLE = "not_mergeable"
    AUTHOR_MISMATCH = "author_mismatch"
    MERGE_RESPONSE_ERROR = "merge_response_error"
    MERGE_REJECTED = "merge_rejected"  # 405 / 409
    MERGE_UNEXPECTED = "merge_unexpected"


@dataclass(frozen=True)
class MergeOutcome:
    """
    Terminal state of a decision run.

    ``message`` is only meaningful for outcomes that echo the remote
    system's own text (MERGE_REJECTED, MERGE_UNEXPECTED).
    Those outcomes fall back to a generic comment when the remote sent
    no message.
    """

    kind: OutcomeKind
    message: str = ""

    @property
    def merged(self) -> bool:
        return self.kind is OutcomeKind.MERGED

    @property
    def comment(self) -> str:
        """The comment to post back; empty only for a merged pull request."""
        return _FIXED_COMMENTS.get(self.kind, self.message or MERGE_FAILED_MESSAGE)

    @classmethod
    def success(cls) -> "MergeOutcome":
        return cls(OutcomeKind.MERGED)


_FIXED_COMMENTS = {
    OutcomeKind.MERGED: "",
    OutcomeKind.NOT_OPEN: NOT_OPEN_MESSAGE,
    OutcomeKind.FETCH_ERROR: FETCH_ERROR_MESSAGE,
    OutcomeKind.NOT_MERGEABLE: NOT_MERGEABLE_MESSAGE,
    OutcomeKind.AUTHOR_MISMATCH: AUTHOR_MISMATCH_MESSAGE,
    OutcomeKind.MERGE_RESPONSE_ERROR: MERGE_RESPONSE_ERROR_MESSAGE,
}
