"""
Merge decision engine.

Decides whether the pull request referenced by a merge comment should be
merged, attempts the merge, and reports the result as the comment to post
back (empty when there is nothing to say).
"""

from automerge.config import EngineSettings
from automerge.logging import get_logger, preview_body
from automerge.types.events import MergeCommentEvent
from automerge.types.outcome import MergeOutcome, OutcomeKind
from automerge.types.pulls import MergeRequest, MergeResponse, PullRequestView
from automerge.types.remote import RemoteCall

logger = get_logger("engine")

_REJECTED_STATUSES = frozenset({405, 409})


def pull_request_url(settings: EngineSettings, event: MergeCommentEvent) -> str:
    return (
        f"{settings.api_base_url}/repos/{event.repository_full_name}"
        f"/pulls/{event.issue_number}"
    )


def merge_url(settings: EngineSettings, event: MergeCommentEvent) -> str:
    return f"{pull_request_url(settings, event)}/merge"


def fetch_pull_request(
    event: MergeCommentEvent,
    remote_call: RemoteCall,
    settings: EngineSettings,
) -> PullRequestView | None:
    """
    Fetch and parse the pull request the event refers to.

    Returns:
        The parsed pull request, or None when the call failed or the body
        could not be decoded (both are logged)
    """
    response = remote_call(pull_request_url(settings, event), "GET", "")
    if response.error is not None:
        logger.error("Failed to get the pull request details: %s", response.error)
        return None

    try:
        return PullRequestView.from_json(response.body)
    except ValueError as e:
        logger.error("Failed to decode the pull request details: %s", e)
        return None


def interpret_merge_response(
    status_code: int, body: bytes, pull_request: PullRequestView
) -> MergeOutcome:
    """Translate the merge endpoint's response into an outcome."""
    try:
        merge_response = MergeResponse.from_json(body)
    except ValueError as e:
        logger.error("Failed to decode the merge response: %s", e)
        return MergeOutcome(OutcomeKind.MERGE_RESPONSE_ERROR)

    message = merge_response.sanitized_message

    if status_code == 200:
        logger.info("Merged pull request: %s", pull_request.url)
        return MergeOutcome.success()

    if status_code in _REJECTED_STATUSES:
        return MergeOutcome(OutcomeKind.MERGE_REJECTED, message)

    logger.warning(
        "Unexpected response from pull request merge api, %d %s",
        status_code,
        preview_body(body),
    )
    return MergeOutcome(OutcomeKind.MERGE_UNEXPECTED, message)


def evaluate(
    event: MergeCommentEvent,
    remote_call: RemoteCall,
    settings: EngineSettings | None = None,
) -> MergeOutcome:
    """
    Run one merge decision for ``event``.

    Args:
        event: The merge comment event
        remote_call: Callable ``(url, method, payload) -> RemoteResponse``
        settings: Engine settings (default: EngineSettings())

    Returns:
        MergeOutcome describing how the run ended
    """
    if settings is None:
        settings = EngineSettings()

    if event.issue_state != "open":
        return MergeOutcome(OutcomeKind.NOT_OPEN)

    pull_request = fetch_pull_request(event, remote_call, settings)
    if pull_request is None:
        return MergeOutcome(OutcomeKind.FETCH_ERROR)

    if not pull_request.mergeable:
        return MergeOutcome(OutcomeKind.NOT_MERGEABLE)

    if (
        settings.restrict_merge_to_author
        and pull_request.author_login != event.comment_author_login
    ):
        return MergeOutcome(OutcomeKind.AUTHOR_MISMATCH)

    merge_request = MergeRequest(
        commit_title=pull_request.title,
        commit_message=settings.commit_message,
        sha=pull_request.head_sha,
        merge_method=settings.merge_method,
    )
    response = remote_call(merge_url(settings, event), "PUT", merge_request.to_json())

    logger.info("Response: %d %s", response.status_code, preview_body(response.body))

    return interpret_merge_response(response.status_code, response.body, pull_request)


def decide(
    event: MergeCommentEvent,
    remote_call: RemoteCall,
    settings: EngineSettings | None = None,
) -> str:
    """
    Run one merge decision and return the comment to post back.

    An empty string means the pull request was merged and no comment is needed.
    """
    return evaluate(event, remote_call, settings).comment
