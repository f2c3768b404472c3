"""Release and release asset data models."""

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
    optional_timestamp,
    required,
    string,
    timestamp,
)
from hubwire.sparse import SparseBuilder, SparseRecord, slot
from hubwire.timestamp import FlexibleTimestamp
from hubwire.types.users import User


@dataclass
class Asset:
    """A file attached to a release."""

    id: int
    url: str
    browser_download_url: str
    name: str
    label: str | None
    state: str  # "uploaded" or "open"
    content_type: str
    size: int
    download_count: int
    created_at: FlexibleTimestamp
    updated_at: FlexibleTimestamp
    uploader: User

    @classmethod
    def from_dict(cls, data: Any, context: DecodeContext | None = None) -> "Asset":
        data = expect_object(data)
        return cls(
            id=required(data, "id", integer),
            url=required(data, "url", string),
            browser_download_url=required(data, "browser_download_url", string),
            name=required(data, "name", string),
            label=optional(data, "label", string),
            state=required(data, "state", string),
            content_type=required(data, "content_type", string),
            size=required(data, "size", integer),
            download_count=required(data, "download_count", integer),
            created_at=timestamp(data, "created_at", context),
            updated_at=timestamp(data, "updated_at", context),
            uploader=nested(data, "uploader", User, context),
        )


@dataclass
class Release:
    """Release information."""

    id: int
    url: str
    html_url: str
    assets_url: str
    upload_url: str
    tarball_url: str | None
    zipball_url: str | None
    tag_name: str
    target_commitish: str
    name: str | None
    body: str | None
    draft: bool
    prerelease: bool
    created_at: FlexibleTimestamp
    published_at: FlexibleTimestamp | None  # None for drafts
    author: User
    assets: list[Asset]

    @classmethod
    def from_dict(cls, data: Any, context: DecodeContext | None = None) -> "Release":
        data = expect_object(data)
        return cls(
            id=required(data, "id", integer),
            url=required(data, "url", string),
            html_url=required(data, "html_url", string),
            assets_url=required(data, "assets_url", string),
            upload_url=required(data, "upload_url", string),
            tarball_url=optional(data, "tarball_url", string),
            zipball_url=optional(data, "zipball_url", string),
            tag_name=required(data, "tag_name", string),
            target_commitish=required(data, "target_commitish", string),
            name=optional(data, "name", string),
            body=optional(data, "body", string),
            draft=required(data, "draft", boolean),
            prerelease=required(data, "prerelease", boolean),
            created_at=timestamp(data, "created_at", context),
            published_at=optional_timestamp(data, "published_at", context),
            author=nested(data, "author", User, context),
            assets=nested_list(data, "assets", Asset, context),
        )


@dataclass(frozen=True, kw_only=True)
class ReleaseRequest(SparseRecord):
    """Body for creating or editing a release."""

    tag_name: str = slot(required=True)
    target_commitish: str = slot()
    name: str = slot()
    body: str = slot()
    draft: bool = slot()
    prerelease: bool = slot()

    @staticmethod
    def builder(tag_name: Any) -> "ReleaseBuilder":
        return ReleaseBuilder(tag_name)


class ReleaseBuilder(SparseBuilder[ReleaseRequest]):
    record_type = ReleaseRequest

    def __init__(self, tag_name: Any) -> None:
        super().__init__(tag_name=str(tag_name))

    def commitish(self, commitish: Any) -> "ReleaseBuilder":
        """Branch or commit SHA the tag is created from, if it does not exist."""
        return self._set("target_commitish", str(commitish))

    def name(self, name: Any) -> "ReleaseBuilder":
        return self._set("name", str(name))

    def body(self, body: Any) -> "ReleaseBuilder":
        return self._set("body", str(body))

    def draft(self, draft: bool) -> "ReleaseBuilder":
        return self._set("draft", bool(draft))

    def prerelease(self, prerelease: bool) -> "ReleaseBuilder":
        return self._set("prerelease", bool(prerelease))
