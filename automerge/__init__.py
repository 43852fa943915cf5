"""automerge - merge pull requests from "please merge" comments."""

from automerge.client import AutoMergeClient
from automerge.config import EngineSettings, Settings, parse_bool
from automerge.engine import decide, evaluate
from automerge.exceptions import (
    AutoMergeError,
    ClassifiedError,
    ClientError,
    ConfigurationError,
    PayloadError,
    RemoteCallError,
    ServerError,
    TransportError,
    fatal,
    retryable,
)
from automerge.handler import (
    MERGE_COMMENT,
    HandlerAction,
    HandlerResult,
    handle_event,
    handle_issue_comment,
)
from automerge.logging import configure_logging, get_logger
from automerge.retry import RetryConfig, execute
from automerge.transport import HTTPTransport, classify_status
from automerge.types import (
    MergeCommentEvent,
    MergeOutcome,
    OutcomeKind,
    PullRequestView,
    RemoteCall,
    RemoteResponse,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main client
    "AutoMergeClient",
    # Decision engine
    "decide",
    "evaluate",
    # Webhook handler
    "MERGE_COMMENT",
    "HandlerAction",
    "HandlerResult",
    "handle_event",
    "handle_issue_comment",
    # Configuration
    "Settings",
    "EngineSettings",
    "parse_bool",
    # Exceptions
    "AutoMergeError",
    "ConfigurationError",
    "PayloadError",
    "RemoteCallError",
    "TransportError",
    "ServerError",
    "ClientError",
    "ClassifiedError",
    "retryable",
    "fatal",
    # Retry
    "RetryConfig",
    "execute",
    # Transport
    "HTTPTransport",
    "RemoteCall",
    "classify_status",
    # Types
    "RemoteResponse",
    "PullRequestView",
    "MergeCommentEvent",
    "MergeOutcome",
    "OutcomeKind",
    # Logging
    "configure_logging",
    "get_logger",
]
