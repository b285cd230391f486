from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Iterator, Mapping, Optional

from confstore.core.settings import StoreSettings
from confstore.ports.backing_store import BackingStore

_LOGGER = logging.getLogger(__name__)


class InMemoryBackingStore(BackingStore):
    """
    Dict-backed key/value store.

    Keys are flat strings; "a.b.c" is scoped under the prefixes "a" and "a.b".
    Values are kept exactly as written. All access goes through a re-entrant
    lock, so copy() and get_keys() always see a consistent snapshot.
    """

    def __init__(
        self,
        entries: Optional[Mapping[str, Any]] = None,
        settings: Optional[StoreSettings] = None,
    ) -> None:
        self._settings = settings or StoreSettings()
        self._lock = threading.RLock()
        self._data: dict[str, Any] = {}
        if entries:
            for key, value in entries.items():
                if value is not None:
                    self._data[key] = _detach(value)

    @property
    def settings(self) -> StoreSettings:
        return self._settings

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    # --- reads ----------------------------------------------

    def contains_key(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def get_property(self, key: str) -> Any:
        with self._lock:
            return self._data[key]

    def get_string(self, key: str) -> str:
        return self._to_string(self.get_property(key))

    def get_string_array(self, key: str) -> list[str]:
        value = self.get_property(key)
        if isinstance(value, (list, tuple)):
            return [self._to_string(item) for item in value]
        if isinstance(value, str):
            if not value:
                return []
            parts = value.split(self._settings.list_delimiter)
            if self._settings.trim_list_elements:
                parts = [part.strip() for part in parts]
            return parts
        return [self._to_string(value)]

    def get_boolean(self, key: str) -> bool:
        value = self.get_property(key)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            token = value.strip().lower()
            if token in self._settings.true_tokens:
                return True
            if token in self._settings.false_tokens:
                return False
        raise ValueError(f"{value!r} is not a boolean")

    def get_keys(self, prefix: Optional[str] = None) -> Iterator[str]:
        with self._lock:
            keys = list(self._data)
        if not prefix:
            return iter(keys)
        scoped = prefix + "."
        return (key for key in keys if key == prefix or key.startswith(scoped))

    # --- writes ---------------------------------------------

    def set_property(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = _detach(value)

    def clear_property(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def copy(self) -> InMemoryBackingStore:
        """
        Duplicate of the same concrete class. Subclass attributes are copied
        shallowly; entries and the lock are never shared.
        """
        with self._lock:
            duplicate = copy.copy(self)
            duplicate._lock = threading.RLock()
            duplicate._data = {key: _detach(value) for key, value in self._data.items()}
        _LOGGER.debug(
            "backing_store_copied",
            extra={"event": "backing_store_copied", "entries": len(duplicate)},
        )
        return duplicate

    def close(self) -> None:
        # nothing to release
        _LOGGER.debug("backing_store_closed", extra={"event": "backing_store_closed"})

    # --- helpers --------------------------------------------

    def _to_string(self, value: Any) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (list, tuple)):
            return self._settings.list_delimiter.join(self._to_string(item) for item in value)
        return str(value)


def _detach(value: Any) -> Any:
    """Copy mutable containers so two stores never share one."""
    if isinstance(value, (list, dict, set)):
        return copy.deepcopy(value)
    return value
