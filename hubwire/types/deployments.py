"""Deployment and deployment status data models."""

from dataclasses import dataclass
from typing import Any

from hubwire.config import DecodeContext
from hubwire.decoding import (
    expect_object,
    integer,
    nested,
    optional,
    raw,
    required,
    string,
    timestamp,
)
from hubwire.sparse import SparseBuilder, SparseRecord, slot
from hubwire.timestamp import FlexibleTimestamp
from hubwire.types.statuses import State
from hubwire.types.users import User


@dataclass
class Deployment:
    """A deployment of a commit reference to an environment."""

    id: int
    url: str
    sha: str
    commit_ref: str
    task: str
    payload: Any
    environment: str
    description: str | None
    creator: User
    created_at: FlexibleTimestamp
    updated_at: FlexibleTimestamp
    statuses_url: str
    repository_url: str

    @classmethod
    def from_dict(cls, data: Any, context: DecodeContext | None = None) -> "Deployment":
        data = expect_object(data)
        return cls(
            id=required(data, "id", integer),
            url=required(data, "url", string),
            sha=required(data, "sha", string),
            commit_ref=required(data, "ref", string),
            task=required(data, "task", string),
            payload=optional(data, "payload", raw),
            environment=required(data, "environment", string),
            description=optional(data, "description", string),
            creator=nested(data, "creator", User, context),
            created_at=timestamp(data, "created_at", context),
            updated_at=timestamp(data, "updated_at", context),
            statuses_url=required(data, "statuses_url", string),
            repository_url=required(data, "repository_url", string),
        )


@dataclass
class DeploymentStatus:
    """A status reported against a deployment."""

    id: int
    url: str
    state: State
    target_url: str | None
    description: str | None
    creator: User
    created_at: FlexibleTimestamp
    updated_at: FlexibleTimestamp
    deployment_url: str
    repository_url: str

    @classmethod
    def from_dict(
        cls, data: Any, context: DecodeContext | None = None
    ) -> "DeploymentStatus":
        data = expect_object(data)
        return cls(
            id=required(data, "id", integer),
            url=required(data, "url", string),
            state=required(data, "state", State.decode),
            target_url=optional(data, "target_url", string),
            description=optional(data, "description", string),
            creator=nested(data, "creator", User, context),
            created_at=timestamp(data, "created_at", context),
            updated_at=timestamp(data, "updated_at", context),
            deployment_url=required(data, "deployment_url", string),
            repository_url=required(data, "repository_url", string),
        )


@dataclass(frozen=True, kw_only=True)
class DeploymentRequest(SparseRecord):
    """
    Body for creating a deployment.

    ``payload`` is emitted exactly as given, as a nested JSON value rather
    than a JSON-encoded string; GitHub accepts either form. Callers are
    responsible for it holding valid JSON data.
    """

    commit_ref: str = slot("ref", required=True)
    task: str = slot()
    auto_merge: bool = slot()
    required_contexts: tuple[str, ...] = slot()
    payload: Any = slot()
    environment: str = slot()
    description: str = slot()

    @staticmethod
    def builder(commit_ref: Any) -> "DeploymentRequestBuilder":
        return DeploymentRequestBuilder(commit_ref)


class DeploymentRequestBuilder(SparseBuilder[DeploymentRequest]):
    record_type = DeploymentRequest

    def __init__(self, commit_ref: Any) -> None:
        super().__init__(commit_ref=str(commit_ref))

    def task(self, task: Any) -> "DeploymentRequestBuilder":
        return self._set("task", str(task))

    def auto_merge(self, auto_merge: bool) -> "DeploymentRequestBuilder":
        return self._set("auto_merge", bool(auto_merge))

    def required_contexts(self, contexts: Any) -> "DeploymentRequestBuilder":
        """Status contexts that must pass; an empty list skips all checks."""
        return self._set("required_contexts", [str(context) for context in contexts])

    def payload(self, payload: Any) -> "DeploymentRequestBuilder":
        return self._set("payload", payload)

    def environment(self, environment: Any) -> "DeploymentRequestBuilder":
        return self._set("environment", str(environment))

    def description(self, description: Any) -> "DeploymentRequestBuilder":
        return self._set("description", str(description))


@dataclass(frozen=True, kw_only=True)
class DeploymentStatusRequest(SparseRecord):
    """Body for reporting a deployment status."""

    state: State = slot(required=True)
    target_url: str = slot()
    description: str = slot()

    @staticmethod
    def builder(state: State) -> "DeploymentStatusRequestBuilder":
        return DeploymentStatusRequestBuilder(state)


class DeploymentStatusRequestBuilder(SparseBuilder[DeploymentStatusRequest]):
    record_type = DeploymentStatusRequest

    def __init__(self, state: State) -> None:
        super().__init__(state=state)

    def target_url(self, url: Any) -> "DeploymentStatusRequestBuilder":
        return self._set("target_url", str(url))

    def description(self, description: Any) -> "DeploymentStatusRequestBuilder":
        return self._set("description", str(description))
