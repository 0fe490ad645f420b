"""Result classes for remote lookup calls.

Every remote call yields exactly one of three variants so callers check a
single shape instead of inspecting payloads for an ``error`` key and
catching exceptions separately.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """The call succeeded and the payload carried no application error."""

    data: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ServiceError:
    """The call succeeded but the service reported an error in its payload.

    The message is shown to the user verbatim.
    """

    message: str
    payload: dict[str, Any] = field(default_factory=dict)

    @property
    def is_ok(self) -> bool:
        return False


@dataclass(frozen=True)
class TransportFailure:
    """The call itself failed (connection, HTTP status, unreadable body)."""

    cause: Exception

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return str(self.cause)


ServiceResult = Union[Ok[T], ServiceError, TransportFailure]
