"""
HTTP Transport for automerge.

Implements the remote-call capability on top of httpx: authentication
headers, status classification and automatic retry.
"""

import base64
import time
from collections.abc import Callable
from typing import Any

import httpx

from automerge.exceptions import (
    ClassifiedError,
    ClientError,
    ServerError,
    TransportError,
    fatal,
    retryable,
)
from automerge.logging import log_http_request, log_http_response
from automerge.retry import RetryConfig, execute_with_config
from automerge.types.remote import RemoteResponse


def classify_status(status_code: int) -> ClassifiedError | None:
    """
    Classify an HTTP status code for retry purposes.

    Returns:
        None for success (< 400), a stop-classified ClientError for 4xx,
        and a retryable ServerError for 5xx
    """
    if status_code >= 500:
        return retryable(ServerError(status_code))
    if status_code >= 400:
        return fatal(ClientError(status_code))
    return None


def basic_auth_header(username: str, token: str) -> str:
    """Build the value of a basic-auth Authorization header."""
    credentials = base64.b64encode(f"{username}:{token}".encode()).decode("ascii")
    return f"Basic {credentials}"


class HTTPTransport:
    """
    HTTP transport layer with authentication and retry logic.

    Handles:
    - Basic-auth header on every request
    - Exponential backoff for network failures and 5xx responses
    - Immediate return, without retry, on 4xx responses

    The instance is callable, so it can be passed wherever a remote-call
    capability is expected.
    """

    def __init__(
        self,
        username: str,
        token: str,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
        verify: bool = True,
        http_transport: httpx.BaseTransport | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            username: User name for basic auth
            token: Token for basic auth
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
            verify: Verify TLS certificates
            http_transport: Custom httpx transport (e.g. httpx.MockTransport in tests)
            sleep: Sleep function used between retries
        """
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()
        self._sleep = sleep

        self._client = httpx.Client(
            timeout=timeout,
            verify=verify,
            transport=http_transport,
            headers={
                "Authorization": basic_auth_header(username, token),
                "Content-Type": "application/json",
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __call__(self, url: str, method: str, payload: str) -> RemoteResponse:
        return self.call(url, method, payload)

    def call(self, url: str, method: str, payload: str = "") -> RemoteResponse:
        """
        Make a request with automatic retry.

        Args:
            url: Absolute request URL
            method: HTTP method (GET, PUT, POST)
            payload: Request body, already JSON encoded ("" for none)

        Returns:
            RemoteResponse; ``error`` is set when the call ultimately failed
        """

        def attempt() -> RemoteResponse:
            return self._send(url, method, payload)

        return execute_with_config(self.retry_config, attempt, sleep=self._sleep)

    def _send(self, url: str, method: str, payload: str) -> RemoteResponse:
        """Perform a single request attempt and classify the result."""
        log_http_request(method, url, dict(self._client.headers), payload)
        started = time.monotonic()

        try:
            response = self._client.request(method, url, content=payload or None)
            body = response.read()
        except httpx.RequestError as e:
            # Network errors are retryable
            return RemoteResponse(
                body=b"", status_code=-1, error=retryable(TransportError(str(e)))
            )

        elapsed_ms = (time.monotonic() - started) * 1000
        log_http_response(response.status_code, url, body, elapsed_ms)

        return RemoteResponse(
            body=body,
            status_code=response.status_code,
            error=classify_status(response.status_code),
        )
