"""Stateful property-based tests using Hypothesis for the lookup workflow.

This module drives AddressLookupController through arbitrary sequences of
searches, selections, manual edits and saves, checking the state
invariants after every step.
"""

from __future__ import annotations

import asyncio

import hypothesis.strategies as st
from hypothesis import HealthCheck, settings
from hypothesis.stateful import RuleBasedStateMachine, invariant, rule

from address_lookup import (
    AddressLookupController,
    AddressRole,
    Candidate,
    InMemoryRecordStore,
    Ok,
    ResolvedAddress,
    ServiceError,
    TransportFailure,
    WidgetConfig,
)
from tests.fakes import RECORD_ID, FakeLookupService
from tests.strategies import (
    blank_queries,
    candidate_lists,
    queries,
    resolve_payloads,
    resolved_addresses,
)

search_outcomes = st.one_of(
    candidate_lists().map(Ok),
    st.sampled_from(["Quota exceeded", "Invalid query"]).map(ServiceError),
    st.sampled_from([ConnectionError("down"), RuntimeError("HTTP 429")]).map(TransportFailure),
)


class LookupControllerStateMachine(RuleBasedStateMachine):
    """State machine checking the controller's state invariants.

    Tracks what the last completed search and selection returned and
    verifies the controller never mixes stale and fresh data.
    """

    def __init__(self) -> None:
        super().__init__()
        self.service = FakeLookupService()
        self.store = InMemoryRecordStore({RECORD_ID: {"PostalCode": "EC1A 1BB"}})
        self.config = WidgetConfig(
            object_type="Contact",
            record_id=RECORD_ID,
            postcode_field="PostalCode",
            street_field="Street",
            city_field="City",
            country_field="Country",
        )
        self.controller = AddressLookupController(self.config, self.service, self.store)
        self.expected_candidates: list[Candidate] = []
        self.expected_resolved = ResolvedAddress()

    @rule(query=queries, outcome=search_outcomes)
    def search(self, query: str, outcome: object) -> None:
        """Search with a non-blank query."""
        self.service.search_result = outcome
        calls_before = len(self.service.search_calls)
        state = asyncio.run(self.controller.trigger_search(query))

        assert len(self.service.search_calls) == calls_before + 1
        assert self.service.search_calls[-1] == query.strip()
        if isinstance(outcome, Ok):
            self.expected_candidates = list(outcome.data)
            assert state.error == ""
        else:
            self.expected_candidates = []
            assert state.error != ""

    @rule(query=blank_queries)
    def blank_search(self, query: str) -> None:
        """Blank queries never reach the service."""
        calls_before = len(self.service.search_calls)
        state = asyncio.run(self.controller.trigger_search(query))

        assert len(self.service.search_calls) == calls_before
        assert state.error == ""
        self.expected_candidates = []

    @rule(data=st.data(), payload=resolve_payloads())
    def select_known(self, data: st.DataObject, payload: dict[str, str | None]) -> None:
        """Select a candidate from the current list, if there is one."""
        current = self.controller.state.candidates
        if not current:
            return
        candidate = data.draw(st.sampled_from(current))
        self.service.resolve_result = Ok(payload)

        state = asyncio.run(self.controller.select_candidate(candidate.id))

        self.expected_resolved = ResolvedAddress.from_payload(payload)
        assert state.resolved == self.expected_resolved

    @rule()
    def select_unknown(self) -> None:
        """Selecting something outside the list resets the address."""
        calls_before = len(self.service.resolve_calls)
        state = asyncio.run(self.controller.select_candidate("not-a-candidate"))

        assert len(self.service.resolve_calls) == calls_before
        self.expected_resolved = ResolvedAddress()
        assert state.resolved.is_empty

    @rule(resolved=resolved_addresses())
    def manual_entry(self, resolved: ResolvedAddress) -> None:
        """Type every field by hand."""
        for role in AddressRole:
            self.controller.set_field(role, resolved.get(role))
        self.expected_resolved = resolved

    @rule()
    def save(self) -> None:
        """Saving writes only bound, non-empty values."""
        before = self.store.get_record(RECORD_ID)
        field_map = asyncio.run(self.controller.save())
        after = self.store.get_record(RECORD_ID)

        assert all(field_map.values())
        for field_id, value in before.items():
            if field_id not in field_map:
                assert after[field_id] == value
        assert "County" not in after

    @invariant()
    def candidates_match_last_search(self) -> None:
        assert list(self.controller.state.candidates) == self.expected_candidates

    @invariant()
    def resolved_matches_last_selection(self) -> None:
        assert self.controller.state.resolved == self.expected_resolved

    @invariant()
    def not_loading_between_operations(self) -> None:
        assert not self.controller.state.is_loading


TestLookupControllerStateMachine = LookupControllerStateMachine.TestCase
TestLookupControllerStateMachine.settings = settings(
    max_examples=50,
    stateful_step_count=25,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
