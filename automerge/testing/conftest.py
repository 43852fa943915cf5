"""
Pytest plugin for automerge testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
discovered by pytest. To use them, add this to your conftest.py:

    pytest_plugins = ["automerge.testing.conftest"]
"""

from automerge.testing.fixtures import (
    engine_settings,
    mergeable_pull_request,
    mock_remote_call,
    sample_event,
    unrestricted_settings,
)

__all__ = [
    "mock_remote_call",
    "sample_event",
    "engine_settings",
    "unrestricted_settings",
    "mergeable_pull_request",
]
