"""Pull request data models."""

from dataclasses import dataclass
from typing import Any

from hubwire.config import DecodeContext
from hubwire.decoding import (
    boolean,
    expect_object,
    integer,
    nested,
    optional,
    optional_nested,
    optional_timestamp,
    required,
    string,
    timestamp,
)
from hubwire.sparse import SparseBuilder, SparseRecord, slot, text_or_unset
from hubwire.timestamp import FlexibleTimestamp
from hubwire.types.users import User


@dataclass
class Pull:
    """Pull request information."""

    id: int
    number: int
    url: str
    html_url: str
    diff_url: str
    patch_url: str
    state: str  # "open" or "closed"
    title: str
    body: str | None
    user: User
    created_at: FlexibleTimestamp
    updated_at: FlexibleTimestamp
    closed_at: FlexibleTimestamp | None
    merged_at: FlexibleTimestamp | None
    merge_commit_sha: str | None
    mergeable: bool | None
    merged_by: User | None
    # only present on single pull request responses
    comments: int | None
    commits: int | None
    additions: int | None
    deletions: int | None
    changed_files: int | None

    @classmethod
    def from_dict(cls, data: Any, context: DecodeContext | None = None) -> "Pull":
        data = expect_object(data)
        return cls(
            id=required(data, "id", integer),
            number=required(data, "number", integer),
            url=required(data, "url", string),
            html_url=required(data, "html_url", string),
            diff_url=required(data, "diff_url", string),
            patch_url=required(data, "patch_url", string),
            state=required(data, "state", string),
            title=required(data, "title", string),
            body=optional(data, "body", string),
            user=nested(data, "user", User, context),
            created_at=timestamp(data, "created_at", context),
            updated_at=timestamp(data, "updated_at", context),
            closed_at=optional_timestamp(data, "closed_at", context),
            merged_at=optional_timestamp(data, "merged_at", context),
            merge_commit_sha=optional(data, "merge_commit_sha", string),
            mergeable=optional(data, "mergeable", boolean),
            merged_by=optional_nested(data, "merged_by", User, context),
            comments=optional(data, "comments", integer),
            commits=optional(data, "commits", integer),
            additions=optional(data, "additions", integer),
            deletions=optional(data, "deletions", integer),
            changed_files=optional(data, "changed_files", integer),
        )


@dataclass(frozen=True, kw_only=True)
class PullRequestRequest(SparseRecord):
    """Body for opening a pull request."""

    title: str = slot(required=True)
    head: str = slot(required=True)
    base: str = slot(required=True)
    body: str = slot()

    @classmethod
    def new(
        cls, title: Any, head: Any, base: Any, body: Any | None = None
    ) -> "PullRequestRequest":
        return cls(
            title=str(title),
            head=str(head),
            base=str(base),
            body=text_or_unset(body),
        )


@dataclass(frozen=True, kw_only=True)
class PullEdit(SparseRecord):
    """Body for editing a pull request. Every field is optional."""

    title: str = slot()
    body: str = slot()
    state: str = slot()  # "open" or "closed"

    @classmethod
    def new(
        cls, title: Any | None = None, body: Any | None = None, state: Any | None = None
    ) -> "PullEdit":
        """Build an edit from optional values; None leaves a field out."""
        return cls(
            title=text_or_unset(title),
            body=text_or_unset(body),
            state=text_or_unset(state),
        )

    @staticmethod
    def builder() -> "PullEditBuilder":
        return PullEditBuilder()


class PullEditBuilder(SparseBuilder[PullEdit]):
    record_type = PullEdit

    def title(self, title: Any) -> "PullEditBuilder":
        return self._set("title", str(title))

    def body(self, body: Any) -> "PullEditBuilder":
        return self._set("body", str(body))

    def state(self, state: Any) -> "PullEditBuilder":
        return self._set("state", str(state))
