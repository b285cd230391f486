from decimal import Decimal
from enum import Enum

import pytest

from confstore.types.datatypes import (
    INT8,
    INT16,
    INT32,
    INT64,
    INTEGER,
    NUMERIC_KINDS,
    STRING,
    STRING_ARRAY,
    ArrayType,
    EnumType,
    NumericKind,
    NumericType,
    array_of,
    enum_of,
    numeric,
    parse_integer,
    register_numeric_kind,
)


class Mode(Enum):
    FAST = 1
    SAFE = 2


@pytest.mark.parametrize("text,expected", [("42", 42), ("-7", -7), ("+3", 3), ("007", 7)])
def test_parse_integer_accepts(text, expected):
    assert parse_integer(text) == expected


@pytest.mark.parametrize("text", ["", " 1", "1 ", "1_000", "1.0", "0x10", "١٢"])
def test_parse_integer_rejects(text):
    with pytest.raises(ValueError):
        parse_integer(text)


@pytest.mark.parametrize(
    "token,low,high",
    [
        (INT8, -128, 127),
        (INT16, -32768, 32767),
        (INT32, -(2**31), 2**31 - 1),
        (INT64, -(2**63), 2**63 - 1),
    ],
)
def test_fixed_width_bounds(token, low, high):
    kind = token.kind
    assert kind.accepts(low) and kind.accepts(high)
    assert not kind.accepts(low - 1)
    assert not kind.accepts(high + 1)
    with pytest.raises(ValueError):
        kind.from_string(str(high + 1))


def test_bool_is_not_an_integer():
    assert not INTEGER.kind.accepts(True)
    assert INTEGER.kind.accepts(2**100)


def test_numeric_lookup_and_registration():
    assert numeric("int32") == INT32
    with pytest.raises(ValueError):
        numeric("complex")

    kind = NumericKind(name="uint16-test", native_type=int, parse=parse_integer, min_value=0, max_value=65535)
    try:
        assert register_numeric_kind(kind) is kind
        assert numeric("uint16-test").kind.from_string("65535") == 65535
        with pytest.raises(ValueError):
            register_numeric_kind(kind)
    finally:
        NUMERIC_KINDS.pop("uint16-test", None)


def test_decimal_kind():
    assert numeric("decimal").kind.from_string("1.10") == Decimal("1.10")


def test_enum_labels_default_to_names():
    token = enum_of(Mode)
    assert token.labels == (("FAST", Mode.FAST), ("SAFE", Mode.SAFE))
    assert EnumType(Mode).labels == token.labels
    assert token == enum_of(Mode, label=lambda m: str(m.value))


def test_array_tokens():
    assert array_of(STRING) == STRING_ARRAY
    assert isinstance(array_of(INT32), ArrayType)
    assert str(STRING_ARRAY) == "string[]"
    assert isinstance(INT32, NumericType)


@pytest.mark.parametrize(
    "text,expected",
    [("1.5", 1.5), ("-2", -2.0), (".5", 0.5), ("1e3", 1000.0), ("2.5E-1", 0.25)],
)
def test_float_literals(text, expected):
    assert numeric("float").kind.from_string(text) == expected


def test_float_specials():
    kind = numeric("float").kind
    assert kind.from_string("Infinity") == float("inf")
    assert kind.from_string("-inf") == float("-inf")
    assert kind.from_string("NaN") != kind.from_string("NaN")


@pytest.mark.parametrize("name", ["float", "decimal"])
@pytest.mark.parametrize("text", ["1_000", "1_0.5", " 1.5", "1.5 ", "", "1.2.3", "e5", "0x1p3"])
def test_fractional_kinds_reject_loose_literals(name, text):
    with pytest.raises(ValueError):
        numeric(name).kind.from_string(text)


def test_decimal_rejects_specials():
    with pytest.raises(ValueError):
        numeric("decimal").kind.from_string("NaN")
