"""Address lookup controller.

Drives the search -> select -> resolve -> save cycle against a remote
lookup service and a host record store. Every operation catches its own
failures and turns them into ``LookupState.error``; nothing raised by the
service or the store reaches the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, TypeVar

from abstract_validation_base import BaseValidator

from address_lookup.classification import (
    SAVE_FAILED_MESSAGE,
    resolve_failure_message,
    save_failure_detail,
    search_failure_message,
)
from address_lookup.config import LookupServiceConfig, WidgetConfig
from address_lookup.mapping import build_update_map, seed_from_record
from address_lookup.models import (
    AddressRole,
    CandidateOption,
    LookupState,
    Ok,
    RecordChanged,
    ResolvedAddress,
    SaveFailed,
    SaveRequested,
    SaveSucceeded,
    SelectionResolved,
    ServiceResult,
    TransportFailure,
    ValidationFailed,
)
from address_lookup.notifications import EventBus
from address_lookup.protocols import RecordStoreProtocol, RemoteAddressServiceProtocol
from address_lookup.remote import LookupServiceFactory
from address_lookup.validation import (
    FieldValue,
    create_default_field_validators,
    validate_fields,
)

logger = logging.getLogger(__name__)

E = TypeVar("E")


class AddressLookupController:
    """Owns the widget state and orchestrates remote and record calls.

    State is replaced, never mutated: each transition stores a new
    ``LookupState``. Searches and selections are numbered; when
    ``config.discard_stale_responses`` is set, a response that completes
    after a newer request was issued is dropped.
    """

    def __init__(
        self,
        config: WidgetConfig,
        service: RemoteAddressServiceProtocol,
        store: RecordStoreProtocol,
        *,
        validator: BaseValidator[FieldValue] | None = None,
        events: EventBus | None = None,
    ) -> None:
        self.config = config
        self.binding = config.binding
        self._service = service
        self._store = store
        self._validator = validator or create_default_field_validators()
        self.events = events or EventBus()
        self._state = LookupState()
        self._search_seq = 0
        self._select_seq = 0

    @classmethod
    def create(
        cls,
        config: WidgetConfig,
        store: RecordStoreProtocol,
        service_config: LookupServiceConfig | None = None,
        **kwargs: Any,
    ) -> AddressLookupController:
        """Build a controller using the configured remote backend."""
        service = LookupServiceFactory.from_config(service_config)
        return cls(config, service, store, **kwargs)

    @property
    def state(self) -> LookupState:
        """Current state snapshot."""
        return self._state

    @property
    def candidate_options(self) -> list[CandidateOption]:
        """Candidates as ``(label, value)`` pick-list options."""
        return self._state.options

    def subscribe(self, event_type: type[E], callback: Callable[[E], None]) -> Callable[[], None]:
        """Register a callback for one kind of notification."""
        return self.events.subscribe(event_type, callback)

    def _transition(self, **changes: Any) -> LookupState:
        self._state = self._state.evolve(**changes)
        return self._state

    def _is_stale(self, seq: int, latest: int) -> bool:
        return self.config.discard_stale_responses and seq != latest

    async def _call(
        self, operation: Callable[[str], Awaitable[ServiceResult[Any]]], argument: str
    ) -> ServiceResult[Any]:
        try:
            return await operation(argument)
        except Exception as exc:
            name = getattr(operation, "__name__", operation)
            logger.warning("Lookup call %s failed: %s", name, exc)
            return TransportFailure(exc)

    async def load(self) -> LookupState:
        """Seed the resolved address from the host record's bound fields.

        Read failures are logged and leave the state unchanged.
        """
        field_ids = self.binding.field_ids
        if not field_ids:
            return self._state
        try:
            values = await self._store.fetch_fields(self.config.record_id, field_ids)
        except Exception as exc:
            logger.error("Error loading record %s: %s", self.config.record_id, exc)
            return self._state
        seeded = seed_from_record(self.binding, self._state.resolved, values)
        return self._transition(resolved=seeded)

    async def trigger_search(self, raw_input: str | None) -> LookupState:
        """Search for candidates matching a committed query.

        Args:
            raw_input: Text the user committed; surrounding whitespace is
                ignored and a blank query clears the candidate list without
                calling the service.

        Returns:
            The state after the search completed.
        """
        query = (raw_input or "").strip()
        self._search_seq += 1
        seq = self._search_seq
        self._transition(query=query, selected_id=None, error="")

        if not query:
            if self.config.discard_stale_responses:
                return self._transition(candidates=(), is_loading=False)
            return self._transition(candidates=())

        self._transition(is_loading=True)
        try:
            result = await self._call(self._service.search, query)
            if self._is_stale(seq, self._search_seq):
                logger.warning("Dropping stale search response for %r", query[:50])
                return self._state
            if isinstance(result, Ok):
                self._transition(candidates=result.data)
            else:
                self._transition(candidates=(), error=search_failure_message(result))
        finally:
            if not self._is_stale(seq, self._search_seq):
                self._transition(is_loading=False)
        return self._state

    async def select_candidate(self, candidate_id: str | None) -> LookupState:
        """Resolve the chosen candidate into a five-field address.

        An id that is not in the current candidate list (including None)
        clears the resolved address without calling the service.
        """
        self._select_seq += 1
        seq = self._select_seq
        candidate = self._state.find_candidate(candidate_id)
        self._transition(selected_id=candidate_id, error="")

        if candidate is None:
            return self._transition(resolved=ResolvedAddress.empty())

        result = await self._call(self._service.resolve, candidate.id)
        if self._is_stale(seq, self._select_seq):
            logger.warning("Dropping stale resolve response for %s", candidate.id)
            return self._state

        if isinstance(result, Ok) and not isinstance(result.data, Mapping):
            logger.warning("Resolve for %s returned a non-mapping payload", candidate.id)
            result = TransportFailure(
                TypeError(f"Expected a mapping, got {type(result.data).__name__}")
            )
        if not isinstance(result, Ok):
            return self._transition(
                resolved=ResolvedAddress.empty(), error=resolve_failure_message(result)
            )

        detail = dict(result.data)
        self._transition(resolved=ResolvedAddress.from_payload(detail))
        self.events.publish(
            SelectionResolved(id=candidate.id, candidate=candidate, resolved=detail)
        )
        return self._state

    async def clear_selection(self) -> LookupState:
        return await self.select_candidate(None)

    def set_field(self, role: AddressRole, value: str) -> LookupState:
        """Manually enter or correct one address field."""
        return self._transition(resolved=self._state.resolved.with_role(role, value))

    async def save(self) -> dict[str, str]:
        """Validate the bound fields and write non-empty values to the record.

        Returns:
            The field map that was sent to the store, or ``{}`` when
            validation failed or there was nothing to write.
        """
        self._transition(error="")
        resolved = self._state.resolved
        fields = [
            FieldValue(role=role, field_id=field_id, value=resolved.get(role))
            for role, field_id in self.binding.bound_roles()
        ]
        errors = validate_fields(self._validator, fields)
        if errors:
            logger.warning("Save blocked by %d invalid field(s)", len(errors))
            self.events.publish(ValidationFailed(errors=errors))
            return {}

        record_id = self.config.record_id
        field_map = build_update_map(self.binding, resolved)
        self.events.publish(
            SaveRequested(
                record_id=record_id,
                object_type=self.config.object_type,
                field_map=dict(field_map),
            )
        )
        if not field_map:
            return {}

        try:
            await self._store.update_fields(record_id, field_map)
        except Exception as exc:
            logger.error("Error updating record %s: %s", record_id, exc)
            self._transition(error=SAVE_FAILED_MESSAGE)
            self.events.publish(SaveFailed(message=save_failure_detail(exc)))
            return field_map

        try:
            self._store.notify_record_changed([record_id])
        except Exception as exc:
            logger.error("Record change notification failed for %s: %s", record_id, exc)
        self.events.publish(RecordChanged(record_ids=[record_id]))
        self.events.publish(SaveSucceeded(record_id=record_id))
        return field_map
