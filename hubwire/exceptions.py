"""hubwire exception classes."""

from datetime import datetime
from typing import Any

_NO_VALUE: Any = object()


class HubwireError(Exception):
    """Base exception for all hubwire errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(HubwireError):
    """Raised when SDK configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class DecodeError(HubwireError):
    """
    Raised when an inbound payload cannot be decoded into a record.

    Carries the offending raw value and the dotted path of the field it was
    read from, so callers can tell exactly which part of a payload was bad.
    """

    def __init__(
        self,
        code: str,
        message: str,
        value: Any = _NO_VALUE,
        field: str | None = None,
    ) -> None:
        super().__init__(code, message)
        self.value = value
        self.field = field

    @property
    def has_value(self) -> bool:
        return self.value is not _NO_VALUE

    def in_field(self, name: str) -> "DecodeError":
        """
        Prefix the field path with an enclosing field name.

        Returns the same error so it can be re-raised directly:
        ``raise err.in_field("created_at")``.
        """
        self.field = name if self.field is None else f"{name}.{self.field}"
        return self

    def __str__(self) -> str:
        location = f"{self.field}: " if self.field else ""
        text = f"[{self.code}] {location}{self.message}"
        if self.has_value:
            text += f" (got {self.value!r})"
        return text


class MissingFieldError(DecodeError):
    """Raised when a required key is absent from a record payload."""

    def __init__(self, field: str) -> None:
        super().__init__("MISSING_FIELD", "missing field", field=field)


class TimestampDecodeError(DecodeError):
    """Base class for date/time decode failures."""

    pass


class FormatMismatchError(TimestampDecodeError):
    """Raised when the value is neither a string nor an integer."""

    def __init__(self, value: Any, found: str, expected: str) -> None:
        super().__init__(
            "FORMAT_MISMATCH", f"invalid type: {found}, expected {expected}", value
        )
        self.found = found
        self.expected = expected


class ParseFailureError(TimestampDecodeError):
    """Raised when a date/time string does not follow RFC 3339."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__("PARSE_FAILURE", reason, value)
        self.reason = reason


class RangeFailureError(TimestampDecodeError):
    """Raised when epoch seconds do not fit a signed 64-bit integer."""

    def __init__(self, value: int) -> None:
        super().__init__(
            "RANGE_FAILURE",
            f"value out of range for seconds since unix epoch: {value}",
            value,
        )


class IllegalInstantError(TimestampDecodeError):
    """Raised when epoch seconds do not name any representable instant."""

    def __init__(self, value: int) -> None:
        super().__init__(
            "ILLEGAL_INSTANT", f"value is not a legal timestamp: {value}", value
        )


class AmbiguousInstantError(TimestampDecodeError):
    """Raised when epoch seconds could name more than one instant."""

    def __init__(self, value: int, earliest: datetime, latest: datetime) -> None:
        super().__init__(
            "AMBIGUOUS_INSTANT",
            f"value is an ambiguous timestamp: {value}, "
            f"could be either of {earliest}, {latest}",
            value,
        )
        self.candidates = (earliest, latest)
