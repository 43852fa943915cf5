"""automerge exception classes."""


class AutoMergeError(Exception):
    """Base exception for all automerge errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(AutoMergeError):
    """Raised when settings are invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class PayloadError(AutoMergeError):
    """Raised when an inbound webhook payload cannot be decoded."""

    def __init__(self, message: str) -> None:
        super().__init__("PAYLOAD_ERROR", message)


class RemoteCallError(AutoMergeError):
    """Raised (or carried on a RemoteResponse) when a remote call fails."""

    def __init__(self, code: str, message: str, status_code: int = -1) -> None:
        super().__init__(code, message)
        self.status_code = status_code


class TransportError(RemoteCallError):
    """Network failure before any HTTP response was received."""

    def __init__(self, message: str) -> None:
        super().__init__("TRANSPORT_ERROR", message, -1)


class ServerError(RemoteCallError):
    """Remote server error (5xx)."""

    def __init__(self, status_code: int) -> None:
        super().__init__("SERVER_ERROR", f"server error: {status_code}", status_code)


class ClientError(RemoteCallError):
    """Remote client error (4xx)."""

    def __init__(self, status_code: int) -> None:
        super().__init__("CLIENT_ERROR", f"client error: {status_code}", status_code)


class ClassifiedError(Exception):
    """
    Retry classification for a remote call failure.

    ``stop=True`` tells the executor not to retry, whatever budget remains.
    The executor unwraps ``cause`` before handing the response back.
    """

    def __init__(self, cause: Exception, stop: bool = False) -> None:
        self.cause = cause
        self.stop = stop
        super().__init__(str(cause))


def retryable(cause: Exception) -> ClassifiedError:
    """Mark ``cause`` as a transient failure."""
    return ClassifiedError(cause=cause, stop=False)


def fatal(cause: Exception) -> ClassifiedError:
    """Mark ``cause`` as a failure that must not be retried."""
    return ClassifiedError(cause=cause, stop=True)
