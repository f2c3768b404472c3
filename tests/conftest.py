"""Shared fixtures for the hubwire test suite."""

from hubwire.testing.conftest import (  # noqa: F401
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
