"""Remote call data models."""

from collections.abc import Callable
from dataclasses import dataclass


@dataclass
class RemoteResponse:
    """
    Outcome of one remote call attempt.

    ``status_code`` is -1 when no HTTP response was received.
    ``error`` is None on success.
    """

    body: bytes
    status_code: int
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


# (url, method, payload) -> RemoteResponse
RemoteCall = Callable[[str, str, str], RemoteResponse]
