"""
Sparse encoding for request records.

A request record is a frozen dataclass whose fields are declared in wire
order. Optional fields default to ``UNSET``; ``to_dict()`` emits only the
fields that were actually set, so an API call never receives ``null`` for a
value the caller did not mention. ``""``, ``False`` and ``[]`` are real values
and are emitted.

Records are produced by builders that accumulate optional values:

    ```python
    body = (
        DeploymentRequest.builder("main")
        .task("deploy")
        .environment("staging")
        .build()
        .to_dict()
    )
    # {"ref": "main", "task": "deploy", "environment": "staging"}
    ```
"""

import copy
from dataclasses import field, fields
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from hubwire.logging import log_encode
from hubwire.serialize import serialize


class _Unset:
    """Marker for an optional field that was never set."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Unset":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_Unset":
        return self


UNSET: Any = _Unset()


def unset_if_none(value: Any) -> Any:
    """Map None to UNSET for constructors that take optional arguments."""
    return UNSET if value is None else value


def text_or_unset(value: Any) -> Any:
    """Render an optional text argument, mapping None to UNSET."""
    return UNSET if value is None else str(value)


def slot(wire: str | None = None, *, required: bool = False) -> Any:
    """
    Declare a request field.

    Args:
        wire: Key used on the wire when it differs from the attribute name
        required: Whether the field must be given at construction
    """
    metadata = {"wire": wire} if wire else {}
    if required:
        return field(metadata=metadata)
    return field(default=UNSET, metadata=metadata)


def to_wire(value: Any) -> Any:
    """Convert a field value to plain JSON data."""
    if isinstance(value, SparseRecord):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "to_wire"):
        return value.to_wire()
    if isinstance(value, dict):
        return {key: to_wire(member) for key, member in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    return value


def snapshot(value: Any) -> Any:
    """Copy a builder value so the built record shares no mutable state."""
    if isinstance(value, list):
        return tuple(copy.deepcopy(item) for item in value)
    return copy.deepcopy(value)


class SparseRecord:
    """
    Mixin for request dataclasses with sparse, ordered encoding.

    Subclasses must be dataclasses; field declaration order is wire order.
    """

    def wire_items(self) -> list[tuple[str, Any]]:
        """(wire name, value) pairs for every field that was set, in order."""
        items = []
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if value is UNSET:
                continue
            items.append((f.metadata.get("wire", f.name), value))
        return items

    def to_dict(self) -> dict[str, Any]:
        """
        Build the wire body.

        Returns:
            Insertion-ordered dict holding only the fields that were set
        """
        body = {name: to_wire(value) for name, value in self.wire_items()}
        log_encode(type(self).__name__, body)
        return body

    def to_json(self) -> str:
        """Serialize the wire body as compact JSON, preserving field order."""
        return serialize(self.to_dict())


R = TypeVar("R", bound=SparseRecord)


class SparseBuilder(Generic[R]):
    """
    Base for request builders.

    Holds mandatory values from construction plus whatever optional values
    the caller sets. ``build()`` can be called repeatedly; each call returns
    an independent snapshot.
    """

    record_type: ClassVar[type]

    def __init__(self, **mandatory: Any) -> None:
        self._values: dict[str, Any] = dict(mandatory)

    def _set(self, name: str, value: Any) -> Any:
        self._values[name] = value
        return self

    def build(self) -> R:
        """Materialize an immutable request record."""
        return self.record_type(
            **{name: snapshot(value) for name, value in self._values.items()}
        )
