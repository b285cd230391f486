"""
Type tokens for typed configuration reads.

A caller names the semantic type it wants with one of the tokens below; the
store dispatches on the token class. The set of token classes is closed:
StringType, ArrayType, BooleanType, NumericType, EnumType, DurationType and
AnyType.

Numeric parsing goes through the NUMERIC_KINDS registry. New numeric kinds are
added with register_numeric_kind().
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Optional

# -------- Numeric kinds --------

_INTEGER_LITERAL = re.compile(r"[+-]?\d+")


def parse_integer(text: str) -> int:
    """Strict integer literal: optional sign and ASCII digits only."""
    if not _INTEGER_LITERAL.fullmatch(text) or not text.isascii():
        raise ValueError(f"invalid integer literal: {text!r}")
    return int(text)


_DECIMAL_LITERAL = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_FLOAT_SPECIALS = re.compile(r"[+-]?(nan|inf|infinity)", re.IGNORECASE)


def parse_decimal(text: str) -> Decimal:
    """Strict decimal literal: sign, digits, optional fraction and exponent."""
    if not _DECIMAL_LITERAL.fullmatch(text) or not text.isascii():
        raise ValueError(f"invalid decimal literal: {text!r}")
    return Decimal(text)


def parse_float(text: str) -> float:
    """Decimal literal, or NaN / Infinity with an optional sign."""
    if _FLOAT_SPECIALS.fullmatch(text):
        return float(text)
    if not _DECIMAL_LITERAL.fullmatch(text) or not text.isascii():
        raise ValueError(f"invalid float literal: {text!r}")
    return float(text)


@dataclass(frozen=True)
class NumericKind:
    name: str
    native_type: type
    parse: Callable[[str], Any]
    min_value: Optional[int] = None
    max_value: Optional[int] = None

    def accepts(self, value: Any) -> bool:
        """True if `value` is already a valid instance of this kind."""
        if isinstance(value, bool) or not isinstance(value, self.native_type):
            return False
        return self.in_bounds(value)

    def in_bounds(self, value: Any) -> bool:
        if self.min_value is not None and value < self.min_value:
            return False
        if self.max_value is not None and value > self.max_value:
            return False
        return True

    def from_string(self, text: str) -> Any:
        value = self.parse(text)
        if not self.in_bounds(value):
            raise ValueError(
                f"{value} out of range for {self.name} [{self.min_value}, {self.max_value}]"
            )
        return value

    def __str__(self) -> str:
        return self.name


def _bounded_int(name: str, bits: int) -> NumericKind:
    return NumericKind(
        name=name,
        native_type=int,
        parse=parse_integer,
        min_value=-(2 ** (bits - 1)),
        max_value=2 ** (bits - 1) - 1,
    )


NUMERIC_KINDS: dict[str, NumericKind] = {}


def register_numeric_kind(kind: NumericKind) -> NumericKind:
    if kind.name in NUMERIC_KINDS:
        raise ValueError(f"Numeric kind already registered: {kind.name}")
    NUMERIC_KINDS[kind.name] = kind
    return kind


for _kind in (
    _bounded_int("int8", 8),
    _bounded_int("int16", 16),
    _bounded_int("int32", 32),
    _bounded_int("int64", 64),
    NumericKind(name="integer", native_type=int, parse=parse_integer),
    NumericKind(name="float", native_type=float, parse=parse_float),
    NumericKind(name="decimal", native_type=Decimal, parse=parse_decimal),
):
    register_numeric_kind(_kind)


# -------- Tokens --------


class DataType:
    """Base class of all type tokens."""


@dataclass(frozen=True)
class StringType(DataType):
    def __str__(self) -> str:
        return "string"


@dataclass(frozen=True)
class BooleanType(DataType):
    def __str__(self) -> str:
        return "boolean"


@dataclass(frozen=True)
class AnyType(DataType):
    def __str__(self) -> str:
        return "any"


@dataclass(frozen=True)
class DurationType(DataType):
    def __str__(self) -> str:
        return "duration"


@dataclass(frozen=True)
class ArrayType(DataType):
    element: DataType

    def __str__(self) -> str:
        return f"{self.element}[]"


@dataclass(frozen=True)
class NumericType(DataType):
    kind: NumericKind

    def __str__(self) -> str:
        return str(self.kind)


@dataclass(frozen=True)
class EnumType(DataType):
    """
    Enum token with an explicit, ordered list of (label, member) pairs.
    Labels default to member names.
    """

    enum_cls: type[Enum]
    labels: tuple[tuple[str, Enum], ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        if not self.labels:
            # Need to use object.__setattr__ for frozen dataclass
            object.__setattr__(
                self, "labels", tuple((member.name, member) for member in self.enum_cls)
            )

    def __str__(self) -> str:
        return f"enum {self.enum_cls.__qualname__}"


STRING = StringType()
BOOLEAN = BooleanType()
ANY = AnyType()
DURATION = DurationType()
STRING_ARRAY = ArrayType(STRING)

INT8 = NumericType(NUMERIC_KINDS["int8"])
INT16 = NumericType(NUMERIC_KINDS["int16"])
INT32 = NumericType(NUMERIC_KINDS["int32"])
INT64 = NumericType(NUMERIC_KINDS["int64"])
INTEGER = NumericType(NUMERIC_KINDS["integer"])
FLOAT = NumericType(NUMERIC_KINDS["float"])
DECIMAL = NumericType(NUMERIC_KINDS["decimal"])


def numeric(name: str) -> NumericType:
    try:
        return NumericType(NUMERIC_KINDS[name])
    except KeyError as exc:
        raise ValueError(f"Unknown numeric kind: {name}") from exc


def enum_of(
    enum_cls: type[Enum], label: Optional[Callable[[Enum], str]] = None
) -> EnumType:
    """
    Build an enum token. `label` maps a member to the string it is stored as
    (default: the member name, e.g. Color.GREEN -> "GREEN").
    """
    to_label = label or (lambda member: member.name)
    return EnumType(enum_cls, tuple((to_label(member), member) for member in enum_cls))


def array_of(element: DataType) -> ArrayType:
    return ArrayType(element)
