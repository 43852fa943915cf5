"""
automerge main client.

Wires settings, the HTTP transport and the webhook handler together.
"""

from collections.abc import Mapping
from typing import Any

from automerge.config import EngineSettings, Settings
from automerge.engine import evaluate
from automerge.handler import HandlerResult, handle_issue_comment
from automerge.retry import RetryConfig
from automerge.transport import HTTPTransport
from automerge.types.events import MergeCommentEvent
from automerge.types.outcome import MergeOutcome


class AutoMergeClient:
    """
    Entry point for serving merge comments.

    Example:
        ```python
        from automerge import AutoMergeClient

        with AutoMergeClient.from_env() as client:
            result = client.handle(request_body)
        ```
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        settings: Settings,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
        verify: bool = True,
        transport: HTTPTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Credentials and merge policy
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)
            verify: Verify TLS certificates (default: True)
            transport: Pre-built transport, overriding the other options
        """
        self.settings = settings
        self.engine_settings: EngineSettings = settings.engine_settings()

        self._transport = transport or HTTPTransport(
            username=settings.github_username,
            token=settings.github_token,
            timeout=timeout,
            retry_config=retry_config,
            verify=verify,
        )

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> "AutoMergeClient":
        """
        Create a client from environment variables.

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        return cls(Settings.from_env(), timeout=timeout, retry_config=retry_config)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport."""
        return self._transport

    def evaluate(self, event: MergeCommentEvent) -> MergeOutcome:
        return evaluate(event, self._transport.call, self.engine_settings)

    def decide(self, event: MergeCommentEvent) -> str:
        return self.evaluate(event).comment

    def handle(self, payload: Mapping[str, Any] | bytes | str) -> HandlerResult:
        """Handle one issue comment webhook body."""
        return handle_issue_comment(payload, self._transport.call, self.engine_settings)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "AutoMergeClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
