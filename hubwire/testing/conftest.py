"""
Pytest plugin for hubwire testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
discovered by pytest. To use them, add this to your conftest.py:

    pytest_plugins = ["hubwire.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from hubwire.testing.fixtures import (
    compact_context,
    decode_context,
    sample_deployment_payload,
    sample_deployment_status_payload,
    sample_gist_payload,
    sample_issue_payload,
    sample_pull_payload,
    sample_release_payload,
    sample_status_payload,
    sample_user_payload,
)

__all__ = [
    "decode_context",
    "compact_context",
    "sample_user_payload",
    "sample_deployment_payload",
    "sample_deployment_status_payload",
    "sample_status_payload",
    "sample_pull_payload",
    "sample_issue_payload",
    "sample_release_payload",
    "sample_gist_payload",
]
