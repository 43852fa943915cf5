"""Webhook event data models."""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from automerge.exceptions import PayloadError


def _section(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = payload.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise PayloadError(f"'{key}' should be an object")
    return value


def _text(section: Mapping[str, Any], key: str) -> str:
    value = section.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise PayloadError(f"'{key}' should be a string")
    return value


@dataclass(frozen=True)
class MergeCommentEvent:
    """An issue comment event that may ask for a pull request merge."""

    issue_state: str
    issue_number: int
    repository_full_name: str
    pull_request_url: str  # empty when the comment is on a plain issue
    comment_author_login: str
    comment_body: str = ""
    comment_html_url: str = ""
    issue_html_url: str = ""

    @property
    def is_pull_request(self) -> bool:
        return self.pull_request_url != ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | bytes | str) -> "MergeCommentEvent":
        """
        Build an event from an ``issue_comment`` webhook payload.

        Args:
            payload: Raw JSON body or an already decoded mapping

        Raises:
            PayloadError: If the payload is not a JSON object of the expected shape
        """
        if isinstance(payload, (bytes, str)):
            try:
                payload = json.loads(payload)
            except ValueError as e:
                raise PayloadError(f"Could not decode webhook body: {e}") from e

        if not isinstance(payload, Mapping):
            raise PayloadError("Webhook body should be a JSON object")

        issue = _section(payload, "issue")
        comment = _section(payload, "comment")
        repository = _section(payload, "repository")

        number = issue.get("number")
        if number is None:
            number = 0
        elif not isinstance(number, int) or isinstance(number, bool):
            raise PayloadError("'number' should be an integer")

        return cls(
            issue_state=_text(issue, "state"),
            issue_number=number,
            repository_full_name=_text(repository, "full_name"),
            pull_request_url=_text(_section(issue, "pull_request"), "url"),
            comment_author_login=_text(_section(comment, "user"), "login"),
            comment_body=_text(comment, "body"),
            comment_html_url=_text(comment, "html_url"),
            issue_html_url=_text(issue, "html_url"),
        )
