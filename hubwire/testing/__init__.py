"""hubwire testing utilities.

Provides payload factories for testing code that decodes GitHub responses.
"""

from hubwire.testing.fixtures import (
    create_asset_payload,
    create_deployment_payload,
    create_deployment_status_payload,
    create_gist_payload,
    create_issue_payload,
    create_pull_payload,
    create_release_payload,
    create_status_payload,
    create_user_payload,
)

__all__ = [
    "create_user_payload",
    "create_deployment_payload",
    "create_deployment_status_payload",
    "create_status_payload",
    "create_pull_payload",
    "create_issue_payload",
    "create_asset_payload",
    "create_release_payload",
    "create_gist_payload",
]
