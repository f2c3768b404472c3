"""
Flexible UTC timestamps.

GitHub is inconsistent in how it sends dates and times. Most resources use
RFC 3339 strings ("2015-01-01T00:00:00Z"), but some (repository push events,
rate limit resets) send integer seconds since the Unix epoch. FlexibleTimestamp
accepts either and normalizes both into one UTC instant.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from hubwire.exceptions import (
    AmbiguousInstantError,
    FormatMismatchError,
    IllegalInstantError,
    ParseFailureError,
    RangeFailureError,
    TimestampDecodeError,
)
from hubwire.logging import log_decode_failure

EXPECTING = "date time string or seconds since unix epoch"
EXPECTING_COMPACT = "seconds since unix epoch"

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# RFC 3339 date-time; the offset group is optional only so a missing offset
# gets its own error message.
_RFC3339_PATTERN = re.compile(
    r"(?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2})"
    r"[Tt ]"
    r"(?P<time>[0-9]{2}:[0-9]{2}:[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
    r"(?P<offset>[Zz]|[+-][0-9]{2}:[0-9]{2})?"
)


def describe_value(value: Any) -> str:
    """Name the JSON kind of a value for type mismatch messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return f"boolean `{str(value).lower()}`"
    if isinstance(value, int):
        return f"integer `{value}`"
    if isinstance(value, float):
        return f"floating point `{value}`"
    if isinstance(value, str):
        return f"string {value!r}"
    if isinstance(value, (list, tuple)):
        return "sequence"
    if isinstance(value, dict):
        return "map"
    return type(value).__name__


def _candidates(seconds: int) -> list[datetime]:
    """Every UTC instant the given epoch offset can name."""
    try:
        return [_EPOCH + timedelta(seconds=seconds)]
    except OverflowError:
        return []


@dataclass(frozen=True, order=True)
class FlexibleTimestamp:
    """
    A UTC instant that can be decoded from either a string or epoch seconds.

    Equality, ordering and hashing are defined by the instant alone, so a
    value decoded from "2015-01-01T01:00:00+01:00" equals one decoded from
    1420070400.
    """

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None or self.value.utcoffset() is None:
            raise ValueError("FlexibleTimestamp requires a timezone-aware datetime")
        object.__setattr__(self, "value", self.value.astimezone(timezone.utc))

    @classmethod
    def decode(cls, node: Any, human_readable: bool = True) -> "FlexibleTimestamp":
        """
        Decode a JSON value into a timestamp.

        Args:
            node: Value taken from a parsed payload
            human_readable: True for self-describing text formats, where both
                strings and integers are accepted. False for compact formats,
                where only epoch seconds are accepted.

        Returns:
            The decoded instant

        Raises:
            FormatMismatchError: If the value is neither a string nor an integer
            ParseFailureError: If a string is not an RFC 3339 date time
            RangeFailureError: If an integer does not fit in a signed 64-bit value
            IllegalInstantError: If an integer names no representable instant
            AmbiguousInstantError: If an integer names more than one instant
        """
        try:
            if human_readable:
                return cls._visit_any(node)
            return cls._visit_integer(node)
        except TimestampDecodeError as err:
            log_decode_failure(err.code, err.message, node)
            raise

    @classmethod
    def now(cls) -> "FlexibleTimestamp":
        """The current instant, truncated to whole seconds."""
        return cls(datetime.now(timezone.utc).replace(microsecond=0))

    @classmethod
    def from_datetime(cls, value: datetime) -> "FlexibleTimestamp":
        """Wrap a timezone-aware datetime."""
        return cls(value)

    @classmethod
    def from_epoch(cls, seconds: int) -> "FlexibleTimestamp":
        """Build a timestamp from seconds since the Unix epoch."""
        if isinstance(seconds, bool) or not isinstance(seconds, int):
            raise FormatMismatchError(seconds, describe_value(seconds), EXPECTING_COMPACT)
        if not _I64_MIN <= seconds <= _I64_MAX:
            raise RangeFailureError(seconds)

        candidates = _candidates(seconds)
        if not candidates:
            raise IllegalInstantError(seconds)
        if len(candidates) > 1:
            raise AmbiguousInstantError(seconds, min(candidates), max(candidates))
        return cls(candidates[0])

    @classmethod
    def parse(cls, text: str) -> "FlexibleTimestamp":
        """
        Parse an RFC 3339 date time string.

        The date and time are separated by "T", "t" or a space, and a "Z"
        offset is read as UTC. Fractions are kept to microsecond precision.
        Strings without an offset are rejected rather than assumed to be UTC.
        """
        match = _RFC3339_PATTERN.fullmatch(text)
        if match is None:
            raise ParseFailureError(text, "not an RFC 3339 date time")

        offset = match.group("offset")
        if offset is None:
            raise ParseFailureError(text, "date time string has no UTC offset")
        if offset in ("Z", "z"):
            offset = "+00:00"
        fraction = (match.group("fraction") or "")[:6].ljust(6, "0")

        try:
            parsed = datetime.fromisoformat(
                f"{match.group('date')}T{match.group('time')}.{fraction}{offset}"
            )
        except ValueError as e:
            raise ParseFailureError(text, str(e)) from e

        try:
            return cls(parsed)
        except OverflowError as e:
            raise ParseFailureError(text, "date time out of range in UTC") from e

    @classmethod
    def _visit_any(cls, node: Any) -> "FlexibleTimestamp":
        if isinstance(node, str):
            return cls.parse(node)
        if isinstance(node, int) and not isinstance(node, bool):
            return cls.from_epoch(node)
        raise FormatMismatchError(node, describe_value(node), EXPECTING)

    @classmethod
    def _visit_integer(cls, node: Any) -> "FlexibleTimestamp":
        if isinstance(node, int) and not isinstance(node, bool):
            return cls.from_epoch(node)
        raise FormatMismatchError(node, describe_value(node), EXPECTING_COMPACT)

    def into_inner(self) -> datetime:
        """Return the underlying timezone-aware datetime (UTC)."""
        return self.value

    def timestamp(self) -> int:
        """Whole seconds since the Unix epoch."""
        delta = self.value - _EPOCH
        return delta.days * 86400 + delta.seconds

    def isoformat(self) -> str:
        """Format as RFC 3339 with a Z suffix, e.g. "2015-01-01T00:00:00Z"."""
        return self.value.isoformat().replace("+00:00", "Z")

    def to_wire(self) -> str:
        return self.isoformat()

    def __str__(self) -> str:
        return self.value.isoformat(sep=" ").replace("+00:00", " UTC")
