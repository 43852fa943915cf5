"""
Issue comment webhook handler.

Filters inbound ``issue_comment`` payloads down to merge requests on pull
requests, runs the decision engine and posts its comment back.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from automerge.config import EngineSettings
from automerge.engine import evaluate
from automerge.logging import get_logger, preview_body
from automerge.types.events import MergeCommentEvent
from automerge.types.outcome import MergeOutcome
from automerge.types.remote import RemoteCall

logger = get_logger("handler")

MERGE_COMMENT = "please merge"


class HandlerAction(str, Enum):
    IGNORED = "ignored"
    MERGED = "merged"
    COMMENTED = "commented"
    COMMENT_FAILED = "comment_failed"


@dataclass(frozen=True)
class HandlerResult:
    """What the handler did with one webhook delivery."""

    action: HandlerAction
    event: MergeCommentEvent | None = None
    outcome: MergeOutcome | None = None
    reason: str = ""

    @property
    def comment(self) -> str:
        return self.outcome.comment if self.outcome else ""


def is_merge_comment(body: str) -> bool:
    return body.strip().lower() == MERGE_COMMENT


def comment_url(settings: EngineSettings, event: MergeCommentEvent) -> str:
    return (
        f"{settings.api_base_url}/repos/{event.repository_full_name}"
        f"/issues/{event.issue_number}/comments"
    )


def post_comment(
    event: MergeCommentEvent,
    comment: str,
    remote_call: RemoteCall,
    settings: EngineSettings,
) -> bool:
    """
    Post ``comment`` on the event's issue.

    Returns:
        True if the comment was created. Failures are logged, not raised.
    """
    logger.info(
        "Commenting on PR #%d in: %s with comment: %s, url: %s",
        event.issue_number,
        event.repository_full_name,
        comment,
        event.issue_html_url,
    )
    response = remote_call(
        comment_url(settings, event), "POST", json.dumps({"body": comment})
    )
    if not response.ok:
        logger.error(
            "Failed to comment on the pull request: %s with failure reason: %s %s",
            event.issue_html_url,
            response.error,
            preview_body(response.body),
        )
        return False
    return True


def handle_event(
    event: MergeCommentEvent,
    remote_call: RemoteCall,
    settings: EngineSettings | None = None,
) -> HandlerResult:
    """Handle an already decoded issue comment event."""
    if settings is None:
        settings = EngineSettings()

    if not is_merge_comment(event.comment_body):
        logger.info("Comment was not '%s', url: %s.", MERGE_COMMENT, event.comment_html_url)
        return HandlerResult(HandlerAction.IGNORED, event, reason="not a merge comment")

    if not event.is_pull_request:
        logger.info(
            "Event triggered on issue and not pull request, url: %s.",
            event.comment_html_url,
        )
        return HandlerResult(HandlerAction.IGNORED, event, reason="not a pull request")

    outcome = evaluate(event, remote_call, settings)
    if outcome.merged:
        return HandlerResult(HandlerAction.MERGED, event, outcome)

    if post_comment(event, outcome.comment, remote_call, settings):
        return HandlerResult(HandlerAction.COMMENTED, event, outcome)
    return HandlerResult(HandlerAction.COMMENT_FAILED, event, outcome)


def handle_issue_comment(
    payload: Mapping[str, Any] | bytes | str,
    remote_call: RemoteCall,
    settings: EngineSettings | None = None,
) -> HandlerResult:
    """
    Handle an ``issue_comment`` webhook delivery.

    Args:
        payload: Raw webhook body or decoded JSON mapping
        remote_call: Callable ``(url, method, payload) -> RemoteResponse``
        settings: Engine settings (default: EngineSettings())

    Raises:
        PayloadError: If the payload cannot be decoded
    """
    event = MergeCommentEvent.from_payload(payload)
    return handle_event(event, remote_call, settings)
