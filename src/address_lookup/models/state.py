"""Widget state model.

The controller never mutates state in place: every transition produces a
new ``LookupState`` via :meth:`LookupState.evolve`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from address_lookup.models.address import Candidate, CandidateOption, ResolvedAddress


class LookupState(BaseModel):
    """Everything the UI shows at one point in time."""

    model_config = ConfigDict(frozen=True)

    query: str = ""
    candidates: tuple[Candidate, ...] = ()
    selected_id: str | None = None
    resolved: ResolvedAddress = Field(default_factory=ResolvedAddress)
    error: str = ""
    is_loading: bool = False

    def evolve(self, **changes: Any) -> LookupState:
        """Return a copy with ``changes`` applied."""
        if "candidates" in changes:
            changes["candidates"] = tuple(changes["candidates"])
        return self.model_copy(update=changes)

    def find_candidate(self, candidate_id: str | None) -> Candidate | None:
        """Candidate with ``candidate_id`` in the current list, if any."""
        if candidate_id is None:
            return None
        for candidate in self.candidates:
            if candidate.id == candidate_id:
                return candidate
        return None

    @property
    def options(self) -> list[CandidateOption]:
        """Candidates shaped as pick-list options, in service order."""
        return [candidate.to_option() for candidate in self.candidates]

    @property
    def has_error(self) -> bool:
        return bool(self.error)
