"""Issue and label data models."""

from dataclasses import dataclass
from typing import Any

from hubwire.config import DecodeContext
from hubwire.decoding import (
    boolean,
    expect_object,
    integer,
    nested,
    nested_list,
    optional,
    optional_nested,
    optional_timestamp,
    required,
    string,
    timestamp,
)
from hubwire.sparse import UNSET, SparseRecord, slot, text_or_unset, unset_if_none
from hubwire.timestamp import FlexibleTimestamp
from hubwire.types.users import User


@dataclass
class Label:
    """An issue label."""

    url: str
    name: str
    color: str

    @classmethod
    def from_dict(cls, data: Any, context: DecodeContext | None = None) -> "Label":
        data = expect_object(data)
        return cls(
            url=required(data, "url", string),
            name=required(data, "name", string),
            color=required(data, "color", string),
        )


@dataclass
class Issue:
    """Issue information."""

    id: int
    number: int
    url: str
    html_url: str
    state: str  # "open" or "closed"
    title: str
    body: str | None
    user: User
    labels: list[Label]
    assignee: User | None
    locked: bool
    comments: int
    closed_at: FlexibleTimestamp | None
    created_at: FlexibleTimestamp
    updated_at: FlexibleTimestamp

    @classmethod
    def from_dict(cls, data: Any, context: DecodeContext | None = None) -> "Issue":
        data = expect_object(data)
        return cls(
            id=required(data, "id", integer),
            number=required(data, "number", integer),
            url=required(data, "url", string),
            html_url=required(data, "html_url", string),
            state=required(data, "state", string),
            title=required(data, "title", string),
            body=optional(data, "body", string),
            user=nested(data, "user", User, context),
            labels=nested_list(data, "labels", Label, context),
            assignee=optional_nested(data, "assignee", User, context),
            locked=optional(data, "locked", boolean) or False,
            comments=required(data, "comments", integer),
            closed_at=optional_timestamp(data, "closed_at", context),
            created_at=timestamp(data, "created_at", context),
            updated_at=timestamp(data, "updated_at", context),
        )


@dataclass(frozen=True, kw_only=True)
class IssueRequest(SparseRecord):
    """Body for opening an issue."""

    title: str = slot(required=True)
    body: str = slot()
    assignee: str = slot()
    milestone: int = slot()
    labels: tuple[str, ...] = slot()

    @classmethod
    def new(
        cls,
        title: Any,
        body: Any | None = None,
        assignee: Any | None = None,
        milestone: int | None = None,
        labels: list[Any] | None = None,
    ) -> "IssueRequest":
        return cls(
            title=str(title),
            body=text_or_unset(body),
            assignee=text_or_unset(assignee),
            milestone=unset_if_none(milestone),
            labels=UNSET if labels is None else tuple(str(label) for label in labels),
        )


@dataclass(frozen=True, kw_only=True)
class LabelRequest(SparseRecord):
    """Body for creating a label."""

    name: str = slot(required=True)
    color: str = slot(required=True)
