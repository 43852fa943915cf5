"""automerge type definitions.

This module exports all data model types used by the package.
"""

from automerge.types.events import MergeCommentEvent
from automerge.types.outcome import MergeOutcome, OutcomeKind
from automerge.types.pulls import MergeRequest, MergeResponse, PullRequestView
from automerge.types.remote import RemoteCall, RemoteResponse

__all__ = [
    # Remote calls
    "RemoteResponse",
    "RemoteCall",
    # Pull requests
    "PullRequestView",
    "MergeRequest",
    "MergeResponse",
    # Webhook events
    "MergeCommentEvent",
    # Decision results
    "MergeOutcome",
    "OutcomeKind",
]
