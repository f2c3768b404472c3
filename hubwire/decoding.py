"""
Helpers for decoding response records from parsed JSON.

Every helper reads one key, converts it, and rewrites any DecodeError with
the key's name so that a failure deep inside a payload reports a path like
``assets[0].uploader.created_at``.
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

from hubwire.config import DecodeContext, resolve_context
from hubwire.exceptions import DecodeError, MissingFieldError
from hubwire.logging import log_decode_failure
from hubwire.timestamp import FlexibleTimestamp, describe_value

T = TypeVar("T")


class Decodable(Protocol):
    @classmethod
    def from_dict(cls, data: Any, context: DecodeContext | None = None) -> Any: ...


D = TypeVar("D", bound=Decodable)


def _mismatch(value: Any, expected: str) -> DecodeError:
    message = f"invalid type: {describe_value(value)}, expected {expected}"
    log_decode_failure("FORMAT_MISMATCH", message, value)
    return DecodeError("FORMAT_MISMATCH", message, value)


def expect_object(data: Any) -> dict[str, Any]:
    """Ensure a payload node is a JSON object."""
    if not isinstance(data, dict):
        raise _mismatch(data, "JSON object")
    return data


def string(value: Any) -> str:
    if not isinstance(value, str):
        raise _mismatch(value, "a string")
    return value


def integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _mismatch(value, "an integer")
    return value


def number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _mismatch(value, "a number")
    return float(value)


def boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise _mismatch(value, "a boolean")
    return value


def raw(value: Any) -> Any:
    """Pass a JSON value through unchanged."""
    return value


def _convert(key: str, value: Any, convert: Callable[[Any], T]) -> T:
    try:
        return convert(value)
    except DecodeError as err:
        raise err.in_field(key)


def required(data: dict[str, Any], key: str, convert: Callable[[Any], T]) -> T:
    """
    Read a key that must be present.

    An explicit null is handed to ``convert``, which reports it as a type
    mismatch carrying the raw value.
    """
    if key not in data:
        log_decode_failure("MISSING_FIELD", f"missing field {key}", None)
        raise MissingFieldError(key)
    return _convert(key, data[key], convert)


def optional(
    data: dict[str, Any], key: str, convert: Callable[[Any], T]
) -> T | None:
    """Read a key that may be absent or null."""
    value = data.get(key)
    if value is None:
        return None
    return _convert(key, value, convert)


def _timestamp_converter(context: DecodeContext | None) -> Callable[[Any], FlexibleTimestamp]:
    human_readable = resolve_context(context).human_readable
    return lambda value: FlexibleTimestamp.decode(value, human_readable)


def timestamp(
    data: dict[str, Any], key: str, context: DecodeContext | None = None
) -> FlexibleTimestamp:
    """Read a required date/time field."""
    return required(data, key, _timestamp_converter(context))


def optional_timestamp(
    data: dict[str, Any], key: str, context: DecodeContext | None = None
) -> FlexibleTimestamp | None:
    """Read a date/time field that may be absent or null."""
    return optional(data, key, _timestamp_converter(context))


def nested(
    data: dict[str, Any], key: str, record: type[D], context: DecodeContext | None = None
) -> D:
    """Read a required nested record."""
    return required(data, key, lambda value: record.from_dict(value, context))


def optional_nested(
    data: dict[str, Any], key: str, record: type[D], context: DecodeContext | None = None
) -> D | None:
    """Read a nested record that may be absent or null."""
    return optional(data, key, lambda value: record.from_dict(value, context))


def nested_list(
    data: dict[str, Any], key: str, record: type[D], context: DecodeContext | None = None
) -> list[D]:
    """Read a required list of nested records."""
    items = required(data, key, raw)
    if not isinstance(items, list):
        raise _mismatch(items, "a sequence").in_field(key)
    return [
        _convert(f"{key}[{index}]", item, lambda value: record.from_dict(value, context))
        for index, item in enumerate(items)
    ]


def nested_map(
    data: dict[str, Any], key: str, record: type[D], context: DecodeContext | None = None
) -> dict[str, D]:
    """Read a required JSON object whose values are nested records."""
    members = required(data, key, raw)
    if not isinstance(members, dict):
        raise _mismatch(members, "a map").in_field(key)
    return {
        name: _convert(f"{key}.{name}", member, lambda value: record.from_dict(value, context))
        for name, member in members.items()
    }

