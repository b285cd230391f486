"""BackingStore Port Interface.

Contract: Untyped key/value source wrapped by the typed configuration layer.
Values may be native Python objects or their string form; the typed layer
decides how to coerce them. Thread safety is the implementation's concern.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Protocol


class BackingStore(Protocol):
    def contains_key(self, key: str) -> bool: ...

    def get_property(self, key: str) -> Any: ...

    def get_string(self, key: str) -> str: ...

    def get_string_array(self, key: str) -> list[str]: ...

    def get_boolean(self, key: str) -> bool:
        """Parse the stored value as a boolean; raise ValueError if it is not one."""
        ...

    def get_keys(self, prefix: Optional[str] = None) -> Iterator[str]:
        """
        Iterate over all keys, or only those scoped under `prefix`.
        The scoping rule belongs to the implementation.
        """
        ...

    def set_property(self, key: str, value: Any) -> None: ...

    def clear_property(self, key: str) -> None: ...

    def copy(self) -> BackingStore:
        """Return a new, independent store of the same kind holding the same entries."""
        ...

    def close(self) -> None: ...
