"""hubwire type definitions.

This module exports the response records and request records for each
GitHub resource.
"""

from hubwire.types.deployments import (
    Deployment,
    DeploymentRequest,
    DeploymentRequestBuilder,
    DeploymentStatus,
    DeploymentStatusRequest,
    DeploymentStatusRequestBuilder,
)
from hubwire.types.errors import ClientError, FieldError
from hubwire.types.gists import (
    Gist,
    GistContent,
    GistFile,
    GistRequest,
    GistRequestBuilder,
)
from hubwire.types.issues import Issue, IssueRequest, Label, LabelRequest
from hubwire.types.keys import Key, KeyRequest
from hubwire.types.pulls import Pull, PullEdit, PullEditBuilder, PullRequestRequest
from hubwire.types.releases import Asset, Release, ReleaseBuilder, ReleaseRequest
from hubwire.types.statuses import State, Status, StatusBuilder, StatusRequest
from hubwire.types.users import User

__all__ = [
    # Users
    "User",
    # Deployments
    "Deployment",
    "DeploymentStatus",
    "DeploymentRequest",
    "DeploymentRequestBuilder",
    "DeploymentStatusRequest",
    "DeploymentStatusRequestBuilder",
    # Statuses
    "State",
    "Status",
    "StatusRequest",
    "StatusBuilder",
    # Pull requests
    "Pull",
    "PullEdit",
    "PullEditBuilder",
    "PullRequestRequest",
    # Issues
    "Issue",
    "Label",
    "IssueRequest",
    "LabelRequest",
    # Releases
    "Asset",
    "Release",
    "ReleaseRequest",
    "ReleaseBuilder",
    # Gists
    "Gist",
    "GistFile",
    "GistContent",
    "GistRequest",
    "GistRequestBuilder",
    # Keys
    "Key",
    "KeyRequest",
    # Errors
    "FieldError",
    "ClientError",
]
