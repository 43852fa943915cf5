"""automerge testing utilities.

Provides a mock remote-call capability and builders for testing code that
uses automerge.
"""

from automerge.testing.fixtures import (
    create_event,
    create_pull_request_body,
    create_remote_response,
    create_webhook_payload,
)
from automerge.testing.mock import MockCall, MockRemoteCall, MockResponse

__all__ = [
    # Mock remote call
    "MockRemoteCall",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_event",
    "create_pull_request_body",
    "create_remote_response",
    "create_webhook_payload",
]
