"""Shared fixtures for the automerge test suite."""

from automerge.testing.fixtures import (  # noqa: F401
    engine_settings,
    mergeable_pull_request,
    mock_remote_call,
    sample_event,
    unrestricted_settings,
)
