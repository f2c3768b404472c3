"""Gist data models."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from hubwire.config import DecodeContext
from hubwire.decoding import (
    boolean,
    expect_object,
    integer,
    nested_map,
    optional,
    optional_nested,
    required,
    string,
    timestamp,
)
from hubwire.sparse import SparseBuilder, SparseRecord, slot, text_or_unset
from hubwire.timestamp import FlexibleTimestamp
from hubwire.types.users import User


@dataclass
class GistFile:
    """A file listed in a gist response."""

    filename: str | None
    size: int
    raw_url: str
    language: str | None

    @classmethod
    def from_dict(cls, data: Any, context: DecodeContext | None = None) -> "GistFile":
        data = expect_object(data)
        return cls(
            filename=optional(data, "filename", string),
            size=required(data, "size", integer),
            raw_url=required(data, "raw_url", string),
            language=optional(data, "language", string),
        )


@dataclass
class Gist:
    """Gist information."""

    id: str
    url: str
    forks_url: str
    commits_url: str
    description: str | None
    public: bool
    owner: User | None  # None for anonymous gists
    files: dict[str, GistFile]
    comments: int
    comments_url: str
    html_url: str
    git_pull_url: str
    git_push_url: str
    created_at: FlexibleTimestamp
    updated_at: FlexibleTimestamp

    @classmethod
    def from_dict(cls, data: Any, context: DecodeContext | None = None) -> "Gist":
        data = expect_object(data)
        return cls(
            id=required(data, "id", string),
            url=required(data, "url", string),
            forks_url=required(data, "forks_url", string),
            commits_url=required(data, "commits_url", string),
            description=optional(data, "description", string),
            public=required(data, "public", boolean),
            owner=optional_nested(data, "owner", User, context),
            files=nested_map(data, "files", GistFile, context),
            comments=required(data, "comments", integer),
            comments_url=required(data, "comments_url", string),
            html_url=required(data, "html_url", string),
            git_pull_url=required(data, "git_pull_url", string),
            git_push_url=required(data, "git_push_url", string),
            created_at=timestamp(data, "created_at", context),
            updated_at=timestamp(data, "updated_at", context),
        )


@dataclass(frozen=True, kw_only=True)
class GistContent(SparseRecord):
    """Content of one file in a gist request; ``filename`` renames it."""

    filename: str = slot()
    content: str = slot(required=True)

    @classmethod
    def new(cls, content: Any, filename: Any | None = None) -> "GistContent":
        return cls(filename=text_or_unset(filename), content=str(content))


def _gist_files(files: Mapping[Any, Any]) -> dict[str, GistContent]:
    return {
        str(name): content if isinstance(content, GistContent) else GistContent.new(content)
        for name, content in files.items()
    }


@dataclass(frozen=True, kw_only=True)
class GistRequest(SparseRecord):
    """Body for creating a gist."""

    description: str = slot()
    public: bool = slot()
    files: dict[str, GistContent] = slot(required=True)

    @classmethod
    def new(
        cls,
        files: Mapping[Any, Any],
        description: Any | None = None,
        public: bool = True,
    ) -> "GistRequest":
        """
        Build a gist request from file names mapped to their text content.

        Values may also be GistContent instances.
        """
        return cls(
            description=text_or_unset(description),
            public=bool(public),
            files=_gist_files(files),
        )

    @staticmethod
    def builder(files: Mapping[Any, Any]) -> "GistRequestBuilder":
        return GistRequestBuilder(files)


class GistRequestBuilder(SparseBuilder[GistRequest]):
    record_type = GistRequest

    def __init__(self, files: Mapping[Any, Any]) -> None:
        super().__init__(files=_gist_files(files))

    def description(self, description: Any) -> "GistRequestBuilder":
        return self._set("description", str(description))

    def public(self, public: bool) -> "GistRequestBuilder":
        return self._set("public", bool(public))
