"""
automerge configuration.

Settings are read once (usually from the environment) and passed into each
decision run; nothing here is mutated after construction.
"""

import os
from dataclasses import dataclass

from automerge.exceptions import ConfigurationError

DEFAULT_API_BASE_URL = "https://api.github.com"
DEFAULT_COMMIT_MESSAGE = "PR automatically merged"
DEFAULT_MERGE_METHOD = "squash"

_TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_STRINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_bool(value: str | None, default: bool = True) -> bool:
    """
    Parse a boolean-like configuration string.

    Args:
        value: Raw value; None or "" selects ``default``
        default: Result for an unset value

    Raises:
        ConfigurationError: If the value is set but not a recognised boolean
    """
    if value is None or value == "":
        return default
    if value in _TRUE_STRINGS:
        return True
    if value in _FALSE_STRINGS:
        return False
    raise ConfigurationError(f"Invalid boolean value: {value!r}")


@dataclass(frozen=True)
class EngineSettings:
    """Read-only settings consumed by the merge decision engine."""

    restrict_merge_to_author: bool = True
    api_base_url: str = DEFAULT_API_BASE_URL
    commit_message: str = DEFAULT_COMMIT_MESSAGE
    merge_method: str = DEFAULT_MERGE_METHOD


@dataclass(frozen=True)
class Settings:
    """Service settings: API credentials plus engine policy."""

    github_username: str
    github_token: str
    restrict_merge_requester: str = ""
    api_base_url: str = DEFAULT_API_BASE_URL

    def __post_init__(self) -> None:
        if not self.github_username or not self.github_token:
            raise ConfigurationError(
                "GitHub username or token not set, cannot start application."
            )
        # Fail at load time rather than on the first merge request
        parse_bool(self.restrict_merge_requester)

    def __repr__(self) -> str:
        return (
            f"Settings(github_username={self.github_username!r}, github_token='[REDACTED]', "
            f"restrict_merge_requester={self.restrict_merge_requester!r}, "
            f"api_base_url={self.api_base_url!r})"
        )

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Create settings from environment variables.

        Environment variables:
            GITHUB_USERNAME: User name for basic auth (required)
            GITHUB_TOKEN: Token for basic auth (required)
            RESTRICT_MERGE_REQUESTER: Only honour merge comments from the PR author
                (optional, default: true)
            GITHUB_API_URL: API base URL (optional, default: https://api.github.com)

        Raises:
            ConfigurationError: If required variables are missing or invalid
        """
        return cls(
            github_username=os.environ.get("GITHUB_USERNAME", ""),
            github_token=os.environ.get("GITHUB_TOKEN", ""),
            restrict_merge_requester=os.environ.get("RESTRICT_MERGE_REQUESTER", ""),
            api_base_url=os.environ.get("GITHUB_API_URL") or DEFAULT_API_BASE_URL,
        )

    @property
    def restrict_merge_to_author(self) -> bool:
        return parse_bool(self.restrict_merge_requester, default=True)

    def engine_settings(self) -> EngineSettings:
        return EngineSettings(
            restrict_merge_to_author=self.restrict_merge_to_author,
            api_base_url=self.api_base_url.rstrip("/"),
        )
