"""User data models."""

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
from hubwire.timestamp import FlexibleTimestamp


@dataclass
class User:
    """A GitHub user or organization, as embedded in other resources."""

    login: str
    id: int
    avatar_url: str
    gravatar_id: str | None
    url: str
    html_url: str
    site_admin: bool
    user_type: str | None  # "User", "Organization", "Bot"
    created_at: FlexibleTimestamp | None

    @classmethod
    def from_dict(cls, data: Any, context: DecodeContext | None = None) -> "User":
        data = expect_object(data)
        return cls(
            login=required(data, "login", string),
            id=required(data, "id", integer),
            avatar_url=required(data, "avatar_url", string),
            gravatar_id=optional(data, "gravatar_id", string),
            url=required(data, "url", string),
            html_url=required(data, "html_url", string),
            site_admin=optional(data, "site_admin", boolean) or False,
            user_type=optional(data, "type", string),
            # only present on full user resources
            created_at=optional_timestamp(data, "created_at", context),
        )
