"""Pull request-related data models."""

import json
from dataclasses import dataclass
from typing import Any


def decode_object(body: bytes | str) -> dict[str, Any]:
    """
    Decode a JSON object from a response body.

    A JSON ``null`` decodes to an empty object.

    Raises:
        ValueError: If the body is empty, not JSON, or not a JSON object
    """
    data = json.loads(body)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _typed(data: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    """Read an optional field, rejecting values of the wrong JSON type."""
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f"field {key!r} should be {kind.__name__}, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class PullRequestView:
    """The pull request fields a merge decision needs."""

    url: str
    head_sha: str
    mergeable: bool
    title: str
    author_login: str

    @classmethod
    def from_json(cls, body: bytes | str) -> "PullRequestView":
        """
        Parse a pull request from an API response body.

        Missing fields fall back to empty values; a missing ``mergeable``
        reads as not mergeable.

        Raises:
            ValueError: If the body cannot be decoded
        """
        data = decode_object(body)
        head = _typed(data, "head", dict, {})
        user = _typed(data, "user", dict, {})
        return cls(
            url=_typed(data, "url", str, ""),
            head_sha=_typed(head, "sha", str, ""),
            mergeable=_typed(data, "mergeable", bool, False),
            title=_typed(data, "title", str, ""),
            author_login=_typed(user, "login", str, ""),
        )


@dataclass(frozen=True)
class MergeRequest:
    """Payload for the merge endpoint."""

    commit_title: str
    commit_message: str
    sha: str
    merge_method: str = "squash"

    def to_json(self) -> str:
        return json.dumps(
            {
                "commit_title": self.commit_title,
                "commit_message": self.commit_message,
                "sha": self.sha,
                "merge_method": self.merge_method,
            }
        )


@dataclass(frozen=True)
class MergeResponse:
    """Body of a merge endpoint response."""

    message: str

    @classmethod
    def from_json(cls, body: bytes | str) -> "MergeResponse":
        """
        Raises:
            ValueError: If the body cannot be decoded
        """
        data = decode_object(body)
        return cls(message=_typed(data, "message", str, ""))

    @property
    def sanitized_message(self) -> str:
        """The message with double quotes swapped for single quotes."""
        return self.message.replace('"', "'")
