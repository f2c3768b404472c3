"""Error bodies returned by the API for rejected requests."""

from dataclasses import dataclass
from typing import Any

from hubwire.config import DecodeContext
from hubwire.decoding import expect_object, nested_list, optional, required, string


@dataclass
class FieldError:
    """One validation failure inside a 422 response."""

    resource: str | None
    field: str | None
    code: str

    @classmethod
    def from_dict(cls, data: Any, context: DecodeContext | None = None) -> "FieldError":
        data = expect_object(data)
        return cls(
            resource=optional(data, "resource", string),
            field=optional(data, "field", string),
            code=required(data, "code", string),
        )


@dataclass
class ClientError:
    """A 4xx error body."""

    message: str
    errors: list[FieldError] | None
    documentation_url: str | None

    @classmethod
    def from_dict(cls, data: Any, context: DecodeContext | None = None) -> "ClientError":
        data = expect_object(data)
        errors = None
        if data.get("errors") is not None:
            errors = nested_list(data, "errors", FieldError, context)
        return cls(
            message=required(data, "message", string),
            errors=errors,
            documentation_url=optional(data, "documentation_url", string),
        )
