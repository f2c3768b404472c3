"""
hubwire logging utilities.

Provides configurable logging for payload decoding and request encoding.
Ensures no credentials (tokens, passwords, private key material) are logged.
"""

import logging
import re
from typing import Any

# Package loggers
_sdk_logger = logging.getLogger("hubwire")
_decode_logger = logging.getLogger("hubwire.decode")
_encode_logger = logging.getLogger("hubwire.encode")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Private key patterns (PEM format)
    (re.compile(r"-----BEGIN[^-]*PRIVATE KEY-----.*?-----END[^-]*PRIVATE KEY-----", re.DOTALL), "[PRIVATE_KEY_REDACTED]"),
    # GitHub tokens (classic and fine-grained)
    (re.compile(r"\b(gh[pousr]_[A-Za-z0-9]{20,}|github_pat_[A-Za-z0-9_]{20,})\b"), "[TOKEN_REDACTED]"),
    # Authorization header values
    (re.compile(r"(authorization['\"]?\s*[:=]\s*['\"]?)(token|bearer|basic)\s+[^\s'\"]+", re.IGNORECASE), r"\1\2 [REDACTED]"),
    # Secret/token patterns
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

# Maximum length of a raw value shown in decode logs
_VALUE_PREVIEW_LENGTH = 64


def configure_logging(
    level: int = logging.INFO,
    decode_level: int | None = None,
    encode_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure hubwire logging.

    Args:
        level: Default log level for all SDK loggers (default: INFO)
        decode_level: Log level for payload decoding (default: same as level)
        encode_level: Log level for request encoding (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from hubwire.logging import configure_logging

        # See every rejected timestamp
        configure_logging(level=logging.INFO, decode_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _sdk_logger.setLevel(level)
    _sdk_logger.addHandler(handler)

    _decode_logger.setLevel(decode_level if decode_level is not None else level)
    _encode_logger.setLevel(encode_level if encode_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a hubwire logger.

    Args:
        name: Logger name suffix (e.g., "decode", "encode"). If None, returns main SDK logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _sdk_logger
    return logging.getLogger(f"hubwire.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Replaces private keys, API tokens, and other credential patterns
    with redacted placeholders.
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def truncate_value(value: Any) -> str:
    """
    Render a raw payload value for logging.

    Long values keep only their head and tail, e.g. "'2015-01...:00Z'".
    """
    text = mask_sensitive_data(repr(value))
    if len(text) <= _VALUE_PREVIEW_LENGTH:
        return text
    half = _VALUE_PREVIEW_LENGTH // 2
    return f"{text[:half]}...{text[-half:]}"


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Set of key fragments to mask (default: token, secret, password, api_key, private_key)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = {"token", "secret", "password", "api_key", "private_key"}

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = str(key).lower()
        if any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_decode_failure(code: str, message: str, value: Any) -> None:
    """
    Log a rejected payload value at DEBUG level.

    Args:
        code: Error code of the decode failure
        message: Human readable reason
        value: The raw value that was rejected
    """
    if not _decode_logger.isEnabledFor(logging.DEBUG):
        return

    _decode_logger.debug(f"{code}: {mask_sensitive_data(message)} | value={truncate_value(value)}")


def log_encode(record: str, body: dict[str, Any]) -> None:
    """
    Log an encoded request body at DEBUG level with sensitive data masked.

    Args:
        record: Request record type name
        body: Sparse wire body produced for the record
    """
    if not _encode_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{record}: keys={list(body)}"]
    if body:
        log_parts.append(f"body={safe_log_dict(body)}")

    _encode_logger.debug(" | ".join(log_parts))


# Export public API
__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "truncate_value",
    "safe_log_dict",
    "log_decode_failure",
    "log_encode",
]
