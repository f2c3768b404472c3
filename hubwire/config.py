"""
Decoding configuration for hubwire.

The human-readable flag tells timestamp decoding which wire forms to accept:
JSON payloads carry both RFC 3339 strings and epoch integers, compact binary
encodings carry epoch integers only.
"""

import os
from dataclasses import dataclass

from hubwire.exceptions import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class DecodeContext:
    """Settings supplied by the caller's deserialization layer."""

    human_readable: bool = True

    @classmethod
    def compact(cls) -> "DecodeContext":
        """Context for compact/binary payloads (epoch integers only)."""
        return cls(human_readable=False)

    @classmethod
    def from_env(cls) -> "DecodeContext":
        """
        Create a context from environment variables.

        Environment variables:
            HUBWIRE_HUMAN_READABLE: "true"/"false" (optional, default: true)

        Returns:
            Configured DecodeContext

        Raises:
            ConfigurationError: If a variable holds an unrecognised value
        """
        raw = os.environ.get("HUBWIRE_HUMAN_READABLE")
        if raw is None or not raw.strip():
            return cls()

        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return cls(human_readable=True)
        if value in _FALSE_VALUES:
            return cls(human_readable=False)

        raise ConfigurationError(
            f"Invalid HUBWIRE_HUMAN_READABLE: {raw}. Must be a boolean such as 'true' or 'false'"
        )


def resolve_context(context: DecodeContext | None) -> DecodeContext:
    return context if context is not None else DecodeContext()
