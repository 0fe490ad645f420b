"""Outbound notifications published by the controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from address_lookup.classification import SAVE_SUCCEEDED_MESSAGE, VALIDATION_FAILED_MESSAGE
from address_lookup.models.address import Candidate


@dataclass(frozen=True)
class SelectionResolved:
    """A candidate was resolved; ``resolved`` is the unprocessed payload."""

    id: str
    candidate: Candidate
    resolved: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ValidationFailed:
    """One or more bound fields failed validation; nothing was saved."""

    errors: list[str] = field(default_factory=list)
    message: str = VALIDATION_FAILED_MESSAGE


@dataclass(frozen=True)
class RecordChanged:
    """Host records that were updated and should be refreshed by caches."""

    record_ids: list[str]


@dataclass(frozen=True)
class SaveSucceeded:
    record_id: str
    message: str = SAVE_SUCCEEDED_MESSAGE


@dataclass(frozen=True)
class SaveFailed:
    message: str


@dataclass(frozen=True)
class SaveRequested:
    """Published on every save so a parent flow can persist the map itself."""

    record_id: str
    object_type: str
    field_map: dict[str, str] = field(default_factory=dict)


LookupEvent = (
    SelectionResolved
    | ValidationFailed
    | RecordChanged
    | SaveSucceeded
    | SaveFailed
    | SaveRequested
)
