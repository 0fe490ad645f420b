"""Candidate and resolved address models.

This module contains the Pydantic models for a search suggestion and for
the five-field address produced once a suggestion has been resolved.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from address_lookup.mapping import concatenate_street_lines, resolve_city
from address_lookup.models.enums import MAX_STREET_LINES, AddressRole


class Candidate(BaseModel):
    """One address suggestion returned by a search, not yet resolved.

    Accepts the service's wire names (``address``, ``url``) as well as the
    Python field names.
    """

    model_config = ConfigDict(
        frozen=True, extra="ignore", populate_by_name=True, coerce_numbers_to_str=True
    )

    id: str = Field(description="Opaque identifier passed back to resolve")
    display_label: str = Field(
        default="",
        description="Human-readable one-line address",
        validation_alias=AliasChoices("display_label", "address"),
    )
    source_url: str = Field(
        default="",
        description="Service URL for the detailed record",
        validation_alias=AliasChoices("source_url", "url"),
    )

    @field_validator("display_label", "source_url", mode="before")
    @classmethod
    def _none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_option(self) -> CandidateOption:
        """Shape the candidate for a pick-list."""
        return CandidateOption(label=self.display_label, value=self.id)


@dataclass(frozen=True)
class CandidateOption:
    """Pick-list entry: what the user sees and the id sent back on selection."""

    label: str
    value: str


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


class ResolvedAddress(BaseModel):
    """Fully detailed address shaped into five logical fields.

    Instances are immutable; a new selection always produces a new value
    instead of patching the previous one.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    postcode: str = ""
    street: str = ""
    city: str = ""
    county: str = ""
    country: str = ""

    @classmethod
    def empty(cls) -> ResolvedAddress:
        """An address with every field blank."""
        return cls()

    @classmethod
    def from_payload(cls, detail: Mapping[str, Any]) -> ResolvedAddress:
        """Build a resolved address from a raw resolve payload.

        Args:
            detail: Mapping with ``line_1`` .. ``line_4``, ``postcode``,
                ``town_or_city``, ``district``, ``county`` and ``country``.

        Returns:
            ResolvedAddress with street lines joined and city falling back
            to the district.
        """
        lines = [detail.get(f"line_{n}") for n in range(1, MAX_STREET_LINES + 1)]
        return cls(
            postcode=_text(detail.get("postcode")),
            street=concatenate_street_lines(*(_text(line) for line in lines)),
            city=resolve_city(_text(detail.get("town_or_city")), _text(detail.get("district"))),
            county=_text(detail.get("county")),
            country=_text(detail.get("country")),
        )

    def get(self, role: AddressRole) -> str:
        """Value held for a logical role."""
        return str(getattr(self, role.value))

    def with_role(self, role: AddressRole, value: str) -> ResolvedAddress:
        """Copy of this address with one role replaced."""
        return self.model_copy(update={role.value: value})

    @property
    def is_empty(self) -> bool:
        """True when every field is blank."""
        return not any(self.get(role) for role in AddressRole)
