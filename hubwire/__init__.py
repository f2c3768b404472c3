"""hubwire - typed GitHub API payloads with flexible timestamps and sparse request encoding."""

from hubwire.config import DecodeContext
from hubwire.exceptions import (
    AmbiguousInstantError,
    ConfigurationError,
    DecodeError,
    FormatMismatchError,
    HubwireError,
    IllegalInstantError,
    MissingFieldError,
    ParseFailureError,
    RangeFailureError,
    TimestampDecodeError,
)
from hubwire.logging import configure_logging, get_logger
from hubwire.serialize import JSONSerializer, serialize
from hubwire.sparse import UNSET, SparseBuilder, SparseRecord
from hubwire.timestamp import FlexibleTimestamp

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Timestamps
    "FlexibleTimestamp",
    # Sparse requests
    "SparseRecord",
    "SparseBuilder",
    "UNSET",
    # Configuration
    "DecodeContext",
    # Exceptions
    "HubwireError",
    "ConfigurationError",
    "DecodeError",
    "MissingFieldError",
    "TimestampDecodeError",
    "FormatMismatchError",
    "ParseFailureError",
    "RangeFailureError",
    "IllegalInstantError",
    "AmbiguousInstantError",
    # Serialization
    "JSONSerializer",
    "serialize",
    # Logging
    "configure_logging",
    "get_logger",
]
