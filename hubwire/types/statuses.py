"""Commit status data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from hubwire.config import DecodeContext
from hubwire.decoding import (
    expect_object,
    integer,
    nested,
    optional,
    required,
    string,
    timestamp,
)
from hubwire.exceptions import DecodeError
from hubwire.sparse import SparseBuilder, SparseRecord, slot
from hubwire.timestamp import FlexibleTimestamp
from hubwire.types.users import User


class State(str, Enum):
    """State of a commit status or deployment status."""

    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"
    FAILURE = "failure"

    @classmethod
    def decode(cls, value: Any) -> "State":
        value = string(value)
        try:
            return cls(value)
        except ValueError:
            expected = ", ".join(state.value for state in cls)
            raise DecodeError(
                "UNKNOWN_VARIANT", f"unknown state, expected one of {expected}", value
            ) from None

    def to_wire(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass
class Status:
    """A commit status."""

    id: int
    url: str
    state: State
    target_url: str | None
    description: str | None
    context: str
    creator: User
    created_at: FlexibleTimestamp
    updated_at: FlexibleTimestamp

    @classmethod
    def from_dict(cls, data: Any, context: DecodeContext | None = None) -> "Status":
        data = expect_object(data)
        return cls(
            id=required(data, "id", integer),
            url=required(data, "url", string),
            state=required(data, "state", State.decode),
            target_url=optional(data, "target_url", string),
            description=optional(data, "description", string),
            context=required(data, "context", string),
            creator=nested(data, "creator", User, context),
            created_at=timestamp(data, "created_at", context),
            updated_at=timestamp(data, "updated_at", context),
        )


@dataclass(frozen=True, kw_only=True)
class StatusRequest(SparseRecord):
    """Body for creating a commit status."""

    state: State = slot(required=True)
    target_url: str = slot()
    description: str = slot()
    context: str = slot()

    @staticmethod
    def builder(state: State) -> "StatusBuilder":
        return StatusBuilder(state)


class StatusBuilder(SparseBuilder[StatusRequest]):
    record_type = StatusRequest

    def __init__(self, state: State) -> None:
        super().__init__(state=state)

    def target_url(self, url: Any) -> "StatusBuilder":
        return self._set("target_url", str(url))

    def description(self, description: Any) -> "StatusBuilder":
        return self._set("description", str(description))

    def context(self, context: Any) -> "StatusBuilder":
        return self._set("context", str(context))
