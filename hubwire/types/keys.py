"""Deploy and user key data models."""

from dataclasses import dataclass
from typing import Any

from hubwire.config import DecodeContext
from hubwire.decoding import (
    boolean,
    expect_object,
    integer,
    optional,
    optional_timestamp,
    required,
    string,
)
from hubwire.sparse import SparseRecord, slot, unset_if_none
from hubwire.timestamp import FlexibleTimestamp


@dataclass
class Key:
    """A public SSH key."""

    id: int
    key: str
    title: str | None
    verified: bool | None
    read_only: bool | None
    created_at: FlexibleTimestamp | None

    @classmethod
    def from_dict(cls, data: Any, context: DecodeContext | None = None) -> "Key":
        data = expect_object(data)
        return cls(
            id=required(data, "id", integer),
            key=required(data, "key", string),
            title=optional(data, "title", string),
            verified=optional(data, "verified", boolean),
            read_only=optional(data, "read_only", boolean),
            created_at=optional_timestamp(data, "created_at", context),
        )


@dataclass(frozen=True, kw_only=True)
class KeyRequest(SparseRecord):
    """Body for adding a deploy key."""

    title: str = slot(required=True)
    key: str = slot(required=True)
    read_only: bool = slot()

    @classmethod
    def new(cls, title: Any, key: Any, read_only: bool | None = None) -> "KeyRequest":
        return cls(title=str(title), key=str(key), read_only=unset_if_none(read_only))
