"""
Typed configuration access.

Wraps an untyped key/value backing store and coerces stored values to the
type a caller asks for at read time.

Components:
- TypedConfigStore: typed reads, untyped writes, key listing, copy, close
- InMemoryBackingStore: dict-backed store used by default
- Type tokens: STRING, STRING_ARRAY, BOOLEAN, DURATION, ANY, numeric kinds, enum_of()
- StoreSettings: list delimiter, boolean tokens, default duration unit

Usage:
    from confstore import DURATION, INT32, TypedConfigStore

    store = TypedConfigStore()
    store.set("cache.size", "512")
    store.set("cache.ttl", "10 m")
    store.get("cache.size", INT32)  # 512
    store.get("cache.ttl", DURATION)  # Duration(10, TimeUnit.MINUTES)
    store.get("cache.other", INT32)  # None
"""

from confstore.adapters.memory_store import InMemoryBackingStore
from confstore.adapters.typed_store import TypedConfigStore
from confstore.core.settings import StoreSettings
from confstore.errors.errors import (
    CoercionError,
    ConfigStoreError,
    InvariantViolation,
    UnsupportedTypeError,
)
from confstore.types.datatypes import (
    ANY,
    BOOLEAN,
    DECIMAL,
    DURATION,
    FLOAT,
    INT8,
    INT16,
    INT32,
    INT64,
    INTEGER,
    STRING,
    STRING_ARRAY,
    DataType,
    NumericKind,
    array_of,
    enum_of,
    numeric,
    register_numeric_kind,
)
from confstore.types.duration import Duration, TimeUnit, parse_time_unit

__all__ = [
    # Main entry point
    "TypedConfigStore",
    "InMemoryBackingStore",
    "StoreSettings",
    # Type tokens
    "DataType",
    "ANY",
    "BOOLEAN",
    "DECIMAL",
    "DURATION",
    "FLOAT",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "INTEGER",
    "STRING",
    "STRING_ARRAY",
    "NumericKind",
    "array_of",
    "enum_of",
    "numeric",
    "register_numeric_kind",
    # Durations
    "Duration",
    "TimeUnit",
    "parse_time_unit",
    # Errors
    "ConfigStoreError",
    "CoercionError",
    "InvariantViolation",
    "UnsupportedTypeError",
]
