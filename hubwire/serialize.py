"""
Order-preserving compact JSON serialization for request bodies.

Request records depend on key order, so unlike ``json.dumps(sort_keys=True)``
this serializer writes object members exactly in insertion order.
"""

import math
from typing import Any

# Characters RFC 8259 requires to be escaped: quote, backslash and C0 controls.
_ESCAPES = {code: f"\\u{code:04x}" for code in range(0x20)}
_ESCAPES.update({
    ord('"'): '\\"',
    ord("\\"): "\\\\",
    ord("\b"): "\\b",
    ord("\t"): "\\t",
    ord("\n"): "\\n",
    ord("\f"): "\\f",
    ord("\r"): "\\r",
})


class JSONSerializer:
    """Compact JSON serializer that keeps object members in insertion order."""

    def serialize(self, value: Any) -> str:
        """
        Serialize a Python value to a compact JSON string.

        Args:
            value: Any JSON-serializable Python value, or an object with a
                ``to_wire()`` or ``to_dict()`` method

        Returns:
            Compact JSON string

        Raises:
            ValueError: For NaN or infinite floats
            TypeError: For values with no JSON representation
        """
        return self._serialize_value(value)

    def _serialize_value(self, value: Any) -> str:
        if value is None:
            return "null"
        elif isinstance(value, bool):
            return "true" if value else "false"
        elif isinstance(value, str):
            return self._serialize_string(value)
        elif isinstance(value, int):
            return str(value)
        elif isinstance(value, float):
            return self._serialize_float(value)
        elif isinstance(value, dict):
            return self._serialize_object(value)
        elif isinstance(value, (list, tuple)):
            return "[" + ",".join(self._serialize_value(item) for item in value) + "]"
        elif hasattr(value, "to_wire"):
            return self._serialize_value(value.to_wire())
        elif hasattr(value, "to_dict"):
            return self._serialize_value(value.to_dict())
        else:
            raise TypeError(f"Cannot serialize type: {type(value).__name__}")

    def _serialize_object(self, obj: dict[Any, Any]) -> str:
        pairs = []
        for key, member in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be strings, got {type(key).__name__}")
            pairs.append(f"{self._serialize_string(key)}:{self._serialize_value(member)}")

        return "{" + ",".join(pairs) + "}"

    def _serialize_string(self, s: str) -> str:
        # Non-ASCII text is written as-is.
        return '"' + s.translate(_ESCAPES) + '"'

    def _serialize_float(self, n: float) -> str:
        if not math.isfinite(n):
            raise ValueError(f"Cannot serialize {n}: not valid JSON")
        # Integral floats print without a fraction; -0.0 prints as 0.
        if n.is_integer() and abs(n) < 1e16:
            return str(int(n))
        return repr(n)


_serializer = JSONSerializer()


def serialize(value: Any) -> str:
    """
    Serialize a Python value to a compact, order-preserving JSON string.

    This is a convenience function that uses a module-level JSONSerializer.
    """
    return _serializer.serialize(value)
