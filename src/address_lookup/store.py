"""In-memory record store.

Hosts normally supply their own store; this one backs local development
and tests, and documents the behaviour the controller expects.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from address_lookup.models import RecordStoreError

logger = logging.getLogger(__name__)


class InMemoryRecordStore:
    """Dictionary-backed record store keyed by record id."""

    def __init__(
        self,
        records: Mapping[str, Mapping[str, Any]] | None = None,
        *,
        read_only_fields: Iterable[str] = (),
    ) -> None:
        """Initialize the store.

        Args:
            records: Initial records, record id to field map.
            read_only_fields: Field ids an update may not write.
        """
        self._records: dict[str, dict[str, Any]] = {
            record_id: dict(fields) for record_id, fields in (records or {}).items()
        }
        self._read_only = frozenset(read_only_fields)
        self._listeners: list[Callable[[list[str]], None]] = []
        self.update_count = 0

    def get_record(self, record_id: str) -> dict[str, Any]:
        """Copy of the stored record (raises KeyError when unknown)."""
        return dict(self._records[record_id])

    async def fetch_fields(self, record_id: str, field_ids: Sequence[str]) -> dict[str, Any]:
        record = self._records.get(record_id)
        if record is None:
            raise RecordStoreError(f"Record {record_id} not found", {"record_id": record_id})
        return {field_id: record[field_id] for field_id in field_ids if field_id in record}

    async def update_fields(self, record_id: str, field_map: Mapping[str, str]) -> None:
        record = self._records.get(record_id)
        if record is None:
            raise RecordStoreError(f"Record {record_id} not found", {"record_id": record_id})
        blocked = sorted(set(field_map) & self._read_only)
        if blocked:
            raise RecordStoreError(
                f"Fields are read-only: {', '.join(blocked)}",
                {"record_id": record_id, "fields": blocked},
            )
        record.update(field_map)
        self.update_count += 1
        logger.debug("Updated record %s fields %s", record_id, sorted(field_map))

    def add_listener(self, callback: Callable[[list[str]], None]) -> None:
        """Register a callback for record-change notifications."""
        self._listeners.append(callback)

    def notify_record_changed(self, record_ids: Sequence[str]) -> None:
        for callback in list(self._listeners):
            callback(list(record_ids))
