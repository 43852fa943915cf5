"""
Pytest fixtures for automerge testing.

Provides builders and fixtures for events, API bodies and the mock
remote-call capability.
"""

import json
from collections.abc import Generator
from typing import Any

import pytest

from automerge.config import EngineSettings
from automerge.exceptions import ClientError, ServerError, TransportError
from automerge.testing.mock import MockRemoteCall
from automerge.types.events import MergeCommentEvent
from automerge.types.remote import RemoteResponse


# ============================================================================
# Helper Functions
# ============================================================================


def create_pull_request_body(
    mergeable: bool = True,
    author_login: str = "JimmyD",
    title: str = "Add feature",
    head_sha: str = "1234",
    url: str = "https://api.github.com/repos/octo/repo/pulls/7",
) -> bytes:
    """Build a pull request API body."""
    return json.dumps(
        {
            "url": url,
            "head": {"sha": head_sha},
            "mergeable": mergeable,
            "title": title,
            "user": {"login": author_login},
        }
    ).encode()


def create_remote_response(
    status_code: int = 200,
    body: bytes | dict[str, Any] = b"",
    error: Exception | None = None,
) -> RemoteResponse:
    """
    Build a RemoteResponse as the transport would return it.

    When ``error`` is omitted it is derived from ``status_code``.
    """
    if isinstance(body, dict):
        body = json.dumps(body).encode()
    if error is None:
        if status_code == -1:
            error = TransportError("connection refused")
        elif status_code >= 500:
            error = ServerError(status_code)
        elif status_code >= 400:
            error = ClientError(status_code)
    return RemoteResponse(body=body, status_code=status_code, error=error)


def create_event(
    issue_state: str = "open",
    issue_number: int = 7,
    repository_full_name: str = "octo/repo",
    pull_request_url: str = "https://api.github.com/repos/octo/repo/pulls/7",
    comment_author_login: str = "JimmyD",
    comment_body: str = "please merge",
) -> MergeCommentEvent:
    """Build a MergeCommentEvent with sensible defaults."""
    return MergeCommentEvent(
        issue_state=issue_state,
        issue_number=issue_number,
        repository_full_name=repository_full_name,
        pull_request_url=pull_request_url,
        comment_author_login=comment_author_login,
        comment_body=comment_body,
        comment_html_url=f"https://github.com/{repository_full_name}/pull/{issue_number}#issuecomment-1",
        issue_html_url=f"https://github.com/{repository_full_name}/pull/{issue_number}",
    )


def create_webhook_payload(
    comment_body: str = "please merge",
    issue_state: str = "open",
    issue_number: int = 7,
    repository_full_name: str = "octo/repo",
    pull_request_url: str = "https://api.github.com/repos/octo/repo/pulls/7",
    comment_author_login: str = "JimmyD",
) -> dict[str, Any]:
    """Build an ``issue_comment`` webhook payload."""
    issue: dict[str, Any] = {
        "number": issue_number,
        "state": issue_state,
        "html_url": f"https://github.com/{repository_full_name}/pull/{issue_number}",
    }
    if pull_request_url:
        issue["pull_request"] = {"url": pull_request_url}
    return {
        "action": "created",
        "issue": issue,
        "repository": {"full_name": repository_full_name},
        "comment": {
            "body": comment_body,
            "html_url": f"https://github.com/{repository_full_name}/pull/{issue_number}#issuecomment-1",
            "user": {"login": comment_author_login},
        },
    }


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_remote_call() -> Generator[MockRemoteCall, None, None]:
    """
    Provide a MockRemoteCall for testing.

    Example:
        ```python
        def test_my_feature(mock_remote_call, sample_event):
            mock_remote_call.configure("GET", create_remote_response(200, create_pull_request_body()))
            decide(sample_event, mock_remote_call)
            assert mock_remote_call.was_called("PUT")
        ```
    """
    remote = MockRemoteCall()
    yield remote
    remote.reset()


@pytest.fixture
def sample_event() -> MergeCommentEvent:
    """Provide an open merge comment event made by the PR author."""
    return create_event()


@pytest.fixture
def engine_settings() -> EngineSettings:
    """Provide default engine settings (author restriction on)."""
    return EngineSettings()


@pytest.fixture
def unrestricted_settings() -> EngineSettings:
    """Provide engine settings with author restriction off."""
    return EngineSettings(restrict_merge_to_author=False)


@pytest.fixture
def mergeable_pull_request() -> RemoteResponse:
    """Provide a 200 response for a mergeable pull request."""
    return create_remote_response(200, create_pull_request_body())
