"""Field mapping rules between logical address roles and host record fields.

Everything here is pure: no I/O and no shared state. The controller uses
these functions to decide which host fields to read, how a raw resolve
payload becomes a street/city value, and which fields a save may write.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from address_lookup.models.enums import MAX_STREET_LINES, AddressRole

if TYPE_CHECKING:
    from address_lookup.models.address import ResolvedAddress

STREET_SEPARATOR = ", "


def concatenate_street_lines(*lines: str | None) -> str:
    """Join raw address lines into a single street value.

    Blank and whitespace-only lines are skipped; source order is kept.

    Args:
        *lines: Up to four address lines, any of which may be None.

    Returns:
        Non-blank lines joined with ", ".

    Raises:
        ValueError: If more than four lines are given.
    """
    if len(lines) > MAX_STREET_LINES:
        raise ValueError(f"At most {MAX_STREET_LINES} street lines are supported, got {len(lines)}")
    return STREET_SEPARATOR.join(line for line in lines if line and line.strip())


def resolve_city(primary: str | None, fallback: str | None) -> str:
    """Town/city value, falling back to the district when it is absent."""
    return primary or fallback or ""


def _normalize_field_id(field_id: str | None) -> str | None:
    if field_id is None:
        return None
    cleaned = field_id.strip()
    return cleaned or None


@dataclass(frozen=True)
class FieldBinding:
    """Host-supplied mapping from each logical role to a record field.

    Unbound roles (None) are left out of both record reads and writes.
    """

    postcode: str | None = None
    street: str | None = None
    city: str | None = None
    county: str | None = None
    country: str | None = None

    def __post_init__(self) -> None:
        for role in AddressRole:
            object.__setattr__(self, role.value, _normalize_field_id(getattr(self, role.value)))

    def external_field(self, role: AddressRole) -> str | None:
        """Record field identifier bound to ``role``, if any."""
        return getattr(self, role.value)  # type: ignore[no-any-return]

    def bound_roles(self) -> list[tuple[AddressRole, str]]:
        """Pairs of (role, field id) for every bound role, in role order."""
        pairs: list[tuple[AddressRole, str]] = []
        for role in AddressRole:
            field_id = self.external_field(role)
            if field_id:
                pairs.append((role, field_id))
        return pairs

    @property
    def field_ids(self) -> list[str]:
        """Bound field identifiers, used to request only the relevant fields."""
        return [field_id for _, field_id in self.bound_roles()]

    def qualified_fields(self, object_type: str) -> list[str]:
        """Bound field identifiers prefixed with the host object type."""
        prefix = object_type.strip()
        return [f"{prefix}.{field_id}" for field_id in self.field_ids]


def seed_from_record(
    binding: FieldBinding,
    current: ResolvedAddress,
    record_values: Mapping[str, Any],
) -> ResolvedAddress:
    """Seed a resolved address with values already stored on the host record.

    Only bound roles whose field is present in ``record_values`` are
    touched; a present but empty value becomes "".
    """
    updates: dict[str, str] = {}
    for role, field_id in binding.bound_roles():
        if field_id in record_values:
            value = record_values[field_id]
            updates[role.value] = str(value) if value else ""
    if not updates:
        return current
    return current.model_copy(update=updates)


def build_update_map(binding: FieldBinding, resolved: ResolvedAddress) -> dict[str, str]:
    """Field map for a save.

    A role is written only when it is bound and its resolved value is
    non-empty, so a populated host field is never overwritten with a blank.
    """
    updates: dict[str, str] = {}
    for role, field_id in binding.bound_roles():
        value = resolved.get(role)
        if value:
            updates[field_id] = value
    return updates
