"""
Retrying call executor.

Runs a remote operation, retrying transient failures with exponential
backoff and giving up at once on failures classified as ``stop``.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, replace

from automerge.exceptions import ClassifiedError
from automerge.logging import get_logger
from automerge.types.remote import RemoteResponse

logger = get_logger("retry")


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for automatic retry behavior."""

    max_attempts: int = 3
    initial_delay: float = 1.0  # seconds
    backoff_factor: float = 2.0

    def __post_init__(self) -> None:
        _validate(self.max_attempts, self.initial_delay)


def _validate(max_attempts: int, initial_delay: float) -> None:
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
    if initial_delay < 0:
        raise ValueError(f"initial_delay must not be negative, got {initial_delay}")


def _unwrap(response: RemoteResponse) -> RemoteResponse:
    if isinstance(response.error, ClassifiedError):
        return replace(response, error=response.error.cause)
    return response


def execute(
    max_attempts: int,
    initial_delay: float,
    operation: Callable[[], RemoteResponse],
    sleep: Callable[[float], None] = time.sleep,
    backoff_factor: float = 2.0,
) -> RemoteResponse:
    """
    Execute ``operation`` with retry.

    Args:
        max_attempts: Total number of calls allowed (1 means no retry)
        initial_delay: Seconds to wait before the first retry
        operation: Zero-argument callable performing one remote call attempt
        sleep: Sleep function (replaceable in tests)
        backoff_factor: Delay multiplier between retries

    Returns:
        The first successful response, the first stop-classified response,
        or the last response once the attempt budget is spent. Classified
        errors are unwrapped to their cause.
    """
    _validate(max_attempts, initial_delay)

    delay = initial_delay
    attempt = 1
    while True:
        response = operation()
        error = response.error

        if error is None:
            return response

        if isinstance(error, ClassifiedError) and error.stop:
            return _unwrap(response)

        if attempt >= max_attempts:
            return _unwrap(response)

        logger.warning(
            "Attempt %d of %d failed (%s); retrying in %.2fs",
            attempt,
            max_attempts,
            error,
            delay,
        )
        sleep(delay)
        delay *= backoff_factor
        attempt += 1


def execute_with_config(
    config: RetryConfig,
    operation: Callable[[], RemoteResponse],
    sleep: Callable[[float], None] = time.sleep,
) -> RemoteResponse:
    """Execute ``operation`` under the policy in ``config``."""
    return execute(
        config.max_attempts,
        config.initial_delay,
        operation,
        sleep=sleep,
        backoff_factor=config.backoff_factor,
    )
