"""Lookup-specific error classes.

These classes provide package-specific error handling for the remote
lookup service and the host record store.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "address_lookup"


class AddressLookupError(PydanticCustomError):
    """Error raised by the remote lookup layer.

    Inherits from PydanticCustomError so the error type, message and context
    travel together. The context always carries the package name and, for
    HTTP failures, the response ``status``.
    """

    @classmethod
    def from_exception(
        cls, error_type: str, error: Exception, context: dict[str, Any] | None = None
    ) -> AddressLookupError:
        """Wrap an arbitrary exception raised while talking to the service.

        Args:
            error_type: Type/category of the error.
            error: The exception to wrap.
            context: Additional context to include in the error.

        Returns:
            AddressLookupError with the original message and package context.
        """
        ctx = {"package": PACKAGE_NAME, **(context or {})}
        return cls(error_type, str(error), ctx)

    @property
    def status(self) -> int | None:
        """HTTP status reported by the service, when one was received."""
        status = (self.context or {}).get("status")
        return status if isinstance(status, int) else None


class RecordStoreError(Exception):
    """Raised by a record store when a read or update fails."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        self.message = message
        self.context = {"package": PACKAGE_NAME, **(context or {})}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"RecordStoreError({self.message!r}, context={self.context})"


class UnknownServiceError(ValueError):
    """Raised when a lookup backend name is not registered."""
