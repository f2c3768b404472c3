"""
Payload factories and pytest fixtures for hubwire.

Factories return plain dicts shaped like GitHub API responses; keyword
arguments override individual keys.
"""

from typing import Any

import pytest

from hubwire.config import DecodeContext

API_URL = "https://api.github.com"
SAMPLE_CREATED_AT = "2015-01-01T00:00:00Z"
SAMPLE_UPDATED_AT = "2015-01-02T03:04:05Z"


# ============================================================================
# Payload factories
# ============================================================================


def create_user_payload(login: str = "octocat", **overrides: Any) -> dict[str, Any]:
    payload = {
        "login": login,
        "id": 1,
        "avatar_url": f"https://avatars.githubusercontent.com/u/1?v=4&login={login}",
        "gravatar_id": "",
        "url": f"{API_URL}/users/{login}",
        "html_url": f"https://github.com/{login}",
        "type": "User",
        "site_admin": False,
    }
    payload.update(overrides)
    return payload


def create_deployment_payload(**overrides: Any) -> dict[str, Any]:
    repo_url = f"{API_URL}/repos/octocat/hello-world"
    payload = {
        "url": f"{repo_url}/deployments/1",
        "id": 1,
        "sha": "a84d88e7554fc1fa21bcbc4efae3c782a70d2b9d",
        "ref": "topic-branch",
        "task": "deploy",
        "payload": {},
        "environment": "production",
        "description": "Deploy request from hubot",
        "creator": create_user_payload(),
        "created_at": SAMPLE_CREATED_AT,
        "updated_at": SAMPLE_UPDATED_AT,
        "statuses_url": f"{repo_url}/deployments/1/statuses",
        "repository_url": repo_url,
    }
    payload.update(overrides)
    return payload


def create_deployment_status_payload(**overrides: Any) -> dict[str, Any]:
    repo_url = f"{API_URL}/repos/octocat/hello-world"
    payload = {
        "url": f"{repo_url}/deployments/1/statuses/1",
        "id": 1,
        "state": "success",
        "creator": create_user_payload(),
        "description": "Deployment finished successfully.",
        "target_url": "https://example.com/deployment/42/output",
        "created_at": SAMPLE_CREATED_AT,
        "updated_at": SAMPLE_UPDATED_AT,
        "deployment_url": f"{repo_url}/deployments/1",
        "repository_url": repo_url,
    }
    payload.update(overrides)
    return payload


def create_status_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "url": f"{API_URL}/repos/octocat/hello-world/statuses/6dcb09b",
        "id": 1,
        "state": "success",
        "description": "Build has completed successfully",
        "target_url": "https://ci.example.com/1000/output",
        "context": "continuous-integration/jenkins",
        "creator": create_user_payload(),
        "created_at": SAMPLE_CREATED_AT,
        "updated_at": SAMPLE_UPDATED_AT,
    }
    payload.update(overrides)
    return payload


def create_pull_payload(number: int = 1347, **overrides: Any) -> dict[str, Any]:
    html_url = f"https://github.com/octocat/hello-world/pull/{number}"
    payload = {
        "id": 1,
        "number": number,
        "url": f"{API_URL}/repos/octocat/hello-world/pulls/{number}",
        "html_url": html_url,
        "diff_url": f"{html_url}.diff",
        "patch_url": f"{html_url}.patch",
        "state": "open",
        "title": "new-feature",
        "body": "Please pull these awesome changes",
        "user": create_user_payload(),
        "created_at": SAMPLE_CREATED_AT,
        "updated_at": SAMPLE_UPDATED_AT,
        "closed_at": None,
        "merged_at": None,
        "merge_commit_sha": None,
    }
    payload.update(overrides)
    return payload


def create_issue_payload(number: int = 1347, **overrides: Any) -> dict[str, Any]:
    url = f"{API_URL}/repos/octocat/hello-world/issues/{number}"
    payload = {
        "id": 1,
        "number": number,
        "url": url,
        "html_url": f"https://github.com/octocat/hello-world/issues/{number}",
        "state": "open",
        "title": "Found a bug",
        "body": "I'm having a problem with this.",
        "user": create_user_payload(),
        "labels": [
            {"url": f"{API_URL}/repos/octocat/hello-world/labels/bug", "name": "bug", "color": "f29513"}
        ],
        "assignee": None,
        "locked": False,
        "comments": 0,
        "closed_at": None,
        "created_at": SAMPLE_CREATED_AT,
        "updated_at": SAMPLE_UPDATED_AT,
    }
    payload.update(overrides)
    return payload


def create_asset_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "url": f"{API_URL}/repos/octocat/hello-world/releases/assets/1",
        "browser_download_url": "https://github.com/octocat/hello-world/releases/download/v1.0.0/example.zip",
        "id": 1,
        "name": "example.zip",
        "label": "short description",
        "state": "uploaded",
        "content_type": "application/zip",
        "size": 1024,
        "download_count": 42,
        "created_at": SAMPLE_CREATED_AT,
        "updated_at": SAMPLE_UPDATED_AT,
        "uploader": create_user_payload(),
    }
    payload.update(overrides)
    return payload


def create_release_payload(tag_name: str = "v1.0.0", **overrides: Any) -> dict[str, Any]:
    url = f"{API_URL}/repos/octocat/hello-world/releases/1"
    payload = {
        "url": url,
        "html_url": f"https://github.com/octocat/hello-world/releases/{tag_name}",
        "assets_url": f"{url}/assets",
        "upload_url": "https://uploads.github.com/repos/octocat/hello-world/releases/1/assets{?name,label}",
        "tarball_url": f"{API_URL}/repos/octocat/hello-world/tarball/{tag_name}",
        "zipball_url": f"{API_URL}/repos/octocat/hello-world/zipball/{tag_name}",
        "id": 1,
        "tag_name": tag_name,
        "target_commitish": "master",
        "name": tag_name,
        "body": "Description of the release",
        "draft": False,
        "prerelease": False,
        "created_at": SAMPLE_CREATED_AT,
        "published_at": SAMPLE_UPDATED_AT,
        "author": create_user_payload(),
        "assets": [create_asset_payload()],
    }
    payload.update(overrides)
    return payload


def create_gist_payload(gist_id: str = "aa5a315d61ae9438b18d", **overrides: Any) -> dict[str, Any]:
    url = f"{API_URL}/gists/{gist_id}"
    payload = {
        "url": url,
        "forks_url": f"{url}/forks",
        "commits_url": f"{url}/commits",
        "id": gist_id,
        "description": "Hello World Examples",
        "public": True,
        "owner": create_user_payload(),
        "files": {
            "hello_world.rb": {
                "filename": "hello_world.rb",
                "type": "application/x-ruby",
                "language": "Ruby",
                "raw_url": f"https://gist.githubusercontent.com/octocat/{gist_id}/raw/hello_world.rb",
                "size": 167,
            }
        },
        "comments": 0,
        "comments_url": f"{url}/comments/",
        "html_url": f"https://gist.github.com/{gist_id}",
        "git_pull_url": f"https://gist.github.com/{gist_id}.git",
        "git_push_url": f"https://gist.github.com/{gist_id}.git",
        "created_at": SAMPLE_CREATED_AT,
        "updated_at": SAMPLE_UPDATED_AT,
    }
    payload.update(overrides)
    return payload


# ============================================================================
# Pytest fixtures
# ============================================================================


@pytest.fixture
def decode_context() -> DecodeContext:
    """Provide the default (human-readable) decode context."""
    return DecodeContext()


@pytest.fixture
def compact_context() -> DecodeContext:
    """Provide a decode context for compact payloads."""
    return DecodeContext.compact()


@pytest.fixture
def sample_user_payload() -> dict[str, Any]:
    return create_user_payload()


@pytest.fixture
def sample_deployment_payload() -> dict[str, Any]:
    return create_deployment_payload()


@pytest.fixture
def sample_deployment_status_payload() -> dict[str, Any]:
    return create_deployment_status_payload()


@pytest.fixture
def sample_status_payload() -> dict[str, Any]:
    return create_status_payload()


@pytest.fixture
def sample_pull_payload() -> dict[str, Any]:
    return create_pull_payload()


@pytest.fixture
def sample_issue_payload() -> dict[str, Any]:
    return create_issue_payload()


@pytest.fixture
def sample_release_payload() -> dict[str, Any]:
    return create_release_payload()


@pytest.fixture
def sample_gist_payload() -> dict[str, Any]:
    return create_gist_payload()
