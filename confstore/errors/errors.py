"""
Custom exceptions for typed configuration access.

Exception hierarchy:
- ConfigStoreError (base)
  - UnsupportedTypeError: requested type token is not supported
  - CoercionError: stored value cannot be converted to the requested type
  - InvariantViolation: misdeclared type (e.g. an enum without members)

A missing key is not an error; typed reads return None instead.
"""

from __future__ import annotations

from typing import Any, Optional


class ConfigStoreError(Exception):
    """Base exception for all configuration store errors."""

    def __init__(
        self,
        message: str,
        *,
        key: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.key = key
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.key:
            parts.append(f"[key={self.key}]")
        if self.details:
            parts.append(f"[details={self.details}]")
        return " ".join(parts)


class UnsupportedTypeError(ConfigStoreError):
    """Raised when a requested type token is not one the store can produce."""

    def __init__(
        self,
        message: str,
        *,
        datatype: Optional[Any] = None,
        key: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.datatype = datatype
        details = details or {}
        if datatype is not None:
            details["datatype"] = str(datatype)
        super().__init__(message, key=key, details=details)


class CoercionError(ConfigStoreError):
    """Raised when a stored value cannot be coerced into the requested type."""

    def __init__(
        self,
        message: str,
        *,
        key: Optional[str] = None,
        raw_value: Optional[Any] = None,
        target_type: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.raw_value = raw_value
        self.target_type = target_type
        details = details or {}
        if raw_value is not None:
            details["raw_value"] = str(raw_value)
        if target_type is not None:
            details["target_type"] = str(target_type)
        super().__init__(message, key=key, details=details)


class InvariantViolation(ConfigStoreError):
    """Raised when a type declaration itself is unusable."""
