"""
Property-based tests for the order-preserving JSON serializer.
"""

import json

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from hubwire.serialize import serialize
from hubwire.timestamp import FlexibleTimestamp
from hubwire.types import GistContent, State

# Constrain floats to a safe range that won't overflow when round-tripped through JSON
json_primitives = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2**53), max_value=2**53),
    st.floats(
        min_value=-1e308,
        max_value=1e308,
        allow_nan=False,
        allow_infinity=False,
        allow_subnormal=False,
    ),
    st.text(max_size=100),
)

json_values = st.recursive(
    json_primitives,
    lambda children: st.one_of(
        st.lists(children, max_size=5),
        st.dictionaries(st.text(max_size=20), children, max_size=5),
    ),
    max_leaves=20,
)


@given(value=json_values)
@settings(max_examples=100)
def test_serialization_is_stable_through_parsing(value: object) -> None:
    """
    Serializing, parsing the result and serializing again is idempotent.
    """
    first = serialize(value)
    second = serialize(json.loads(first))

    assert first == second, (
        f"Round-trip failed:\n"
        f"  Original: {value!r}\n"
        f"  First: {first}\n"
        f"  Second: {second}"
    )


@given(obj=st.dictionaries(st.text(max_size=20), json_primitives, max_size=10))
@settings(max_examples=100)
def test_keys_keep_insertion_order(obj: dict[str, object]) -> None:
    parsed = json.loads(serialize(obj))

    assert list(parsed) == list(obj)


@given(s=st.text(max_size=100))
@settings(max_examples=100)
def test_string_escaping_produces_valid_json(s: str) -> None:
    assert json.loads(serialize(s)) == s


def test_no_whitespace_between_tokens() -> None:
    assert serialize({"b": [1, 2, 3], "a": {"nested": True}}) == '{"b":[1,2,3],"a":{"nested":true}}'


def test_numbers() -> None:
    assert serialize(42) == "42"
    assert serialize(-0.0) == "0"
    assert serialize(1.0) == "1"
    assert serialize(2.5) == "2.5"


def test_string_escapes() -> None:
    assert serialize('a"b\\c') == '"a\\"b\\\\c"'
    assert serialize("\b\t\n\f\r") == '"\\b\\t\\n\\f\\r"'
    assert serialize("\x00\x1f") == '"\\u0000\\u001f"'
    assert serialize("\x7f café ☃") == '"\x7f café ☃"'


def test_large_and_small_floats() -> None:
    assert serialize(1e15) == "1000000000000000"
    assert serialize(1e16) == "1e+16"
    assert serialize(1.5e-7) == "1.5e-07"


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_floats_are_rejected(value: float) -> None:
    with pytest.raises(ValueError):
        serialize(value)


def test_unsupported_types_are_rejected() -> None:
    with pytest.raises(TypeError):
        serialize({1, 2})
    with pytest.raises(TypeError):
        serialize({1: "non-string key"})


def test_wire_hooks() -> None:
    value = {
        "at": FlexibleTimestamp.decode(0),
        "state": State.PENDING,
        "file": GistContent.new("bar"),
    }

    assert serialize(value) == (
        '{"at":"1970-01-01T00:00:00Z","state":"pending","file":{"content":"bar"}}'
    )
