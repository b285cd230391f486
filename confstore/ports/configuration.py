"""Configuration Port Interfaces.

Contract: Typed reads (ReadConfiguration) and untyped writes
(WriteConfiguration) over a key/value configuration source.
A missing key reads as None; it is never an error.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol

from confstore.types.datatypes import DataType


class ReadConfiguration(Protocol):
    def get(self, key: str, datatype: DataType) -> Any:
        """
        Fetch the value stored under `key` coerced to `datatype`,
        or None if the key is not set.
        """
        ...

    def get_keys(self, prefix: Optional[str] = None) -> Iterable[str]: ...

    def close(self) -> None: ...


class WriteConfiguration(ReadConfiguration, Protocol):
    def set(self, key: str, value: Any) -> None:
        """Store `value` as is; None removes the key."""
        ...

    def remove(self, key: str) -> None: ...

    def copy(self) -> WriteConfiguration: ...
