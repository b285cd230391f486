from __future__ import annotations

import logging
from typing import Any, Optional

from confstore.adapters.memory_store import InMemoryBackingStore
from confstore.core.coercion import coerce_duration, coerce_enum, coerce_numeric
from confstore.core.settings import StoreSettings
from confstore.errors.errors import CoercionError, UnsupportedTypeError
from confstore.ports.backing_store import BackingStore
from confstore.ports.configuration import WriteConfiguration
from confstore.types.datatypes import (
    AnyType,
    ArrayType,
    BooleanType,
    DataType,
    DurationType,
    EnumType,
    NumericType,
    STRING,
    StringType,
)

logger = logging.getLogger(__name__)

_STORE_METHODS = (
    "contains_key",
    "get_property",
    "get_string",
    "get_string_array",
    "get_boolean",
    "get_keys",
    "set_property",
    "clear_property",
    "copy",
)


class TypedConfigStore(WriteConfiguration):
    """
    Typed access to an untyped key/value backing store.

    Reads coerce the stored value to the requested type token; writes store
    values as given and leave their representation to the backing store.

    Example:
        store = TypedConfigStore()
        store.set("storage.timeout", "30 s")
        store.get("storage.timeout", DURATION)  # Duration(30, TimeUnit.SECONDS)
        store.get("storage.missing", INT32)  # None
    """

    def __init__(
        self,
        store: Optional[BackingStore] = None,
        settings: Optional[StoreSettings] = None,
    ) -> None:
        if store is None:
            store = InMemoryBackingStore(settings=settings)
        missing = [name for name in _STORE_METHODS if not callable(getattr(store, name, None))]
        if missing:
            raise TypeError(
                f"{type(store).__name__} is not a backing store (missing: {', '.join(missing)})"
            )
        store_settings = getattr(store, "settings", None)
        if settings is None and isinstance(store_settings, StoreSettings):
            # follow the backing store when no settings are given
            settings = store_settings
        self._store = store
        self._settings = settings or StoreSettings()
        self._closed = False

    @property
    def backing_store(self) -> BackingStore:
        return self._store

    @property
    def settings(self) -> StoreSettings:
        return self._settings

    # --- reads ----------------------------------------------

    def get(self, key: str, datatype: DataType) -> Any:
        _check_key(key)
        if not self._store.contains_key(key):
            return None
        try:
            return self._coerce(key, datatype)
        except KeyError:
            # removed by another caller after contains_key
            return None

    def _coerce(self, key: str, datatype: DataType) -> Any:
        if isinstance(datatype, ArrayType):
            if datatype.element != STRING:
                raise UnsupportedTypeError(
                    f"Only string arrays are supported: {datatype}", datatype=datatype, key=key
                )
            return list(self._store.get_string_array(key))
        elif isinstance(datatype, NumericType):
            return coerce_numeric(key, self._store.get_property(key), datatype)
        elif isinstance(datatype, StringType):
            return self._store.get_string(key)
        elif isinstance(datatype, BooleanType):
            try:
                return self._store.get_boolean(key)
            except (ValueError, TypeError) as e:
                raw = self._store.get_property(key)
                raise CoercionError(
                    f'cannot parse "{raw}" as {datatype}',
                    key=key,
                    raw_value=raw,
                    target_type=datatype,
                ) from e
        elif isinstance(datatype, EnumType):
            return coerce_enum(key, self._store.get_property(key), datatype)
        elif isinstance(datatype, AnyType):
            return self._store.get_property(key)
        elif isinstance(datatype, DurationType):
            return coerce_duration(
                key, self._store.get_property(key), self._settings.default_duration_unit
            )
        else:
            raise UnsupportedTypeError(
                f"Unsupported data type: {datatype!r}", datatype=datatype, key=key
            )

    def get_keys(self, prefix: Optional[str] = None) -> list[str]:
        if prefix is not None and prefix.strip():
            keys = self._store.get_keys(prefix)
        else:
            keys = self._store.get_keys()
        return list(keys)

    # --- writes ---------------------------------------------

    def set(self, key: str, value: Any) -> None:
        _check_key(key)
        if value is None:
            self._store.clear_property(key)
        else:
            self._store.set_property(key, value)

    def remove(self, key: str) -> None:
        _check_key(key)
        self._store.clear_property(key)

    def copy(self) -> TypedConfigStore:
        duplicate = TypedConfigStore(self._store.copy(), settings=self._settings)
        logger.debug(f"Copied configuration store ({type(self._store).__name__})")
        return duplicate

    # --- lifecycle ------------------------------------------

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        close = getattr(self._store, "close", None)
        if callable(close):
            close()
        logger.debug("Configuration store closed")

    def __enter__(self) -> TypedConfigStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _check_key(key: str) -> None:
    if not isinstance(key, str) or not key:
        raise ValueError("Configuration key must be a non-empty string")
