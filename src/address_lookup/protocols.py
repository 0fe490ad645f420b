from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from address_lookup.models import Candidate, ServiceResult


@runtime_checkable
class RemoteAddressServiceProtocol(Protocol):
    """Protocol for the remote lookup/resolve service.

    Implementations must not raise for service or transport failures;
    they return a ServiceError or TransportFailure instead.
    """

    async def search(self, query: str) -> ServiceResult[list[Candidate]]:
        """Find candidate addresses for a user query.

        Args:
            query: Trimmed, non-empty query text.

        Returns:
            Ok with candidates in service ranking order, or a failure variant.
        """
        ...

    async def resolve(self, candidate_id: str) -> ServiceResult[dict[str, Any]]:
        """Fetch the full detail for one candidate.

        Args:
            candidate_id: Identifier of a candidate returned by search.

        Returns:
            Ok with the raw detail payload, or a failure variant.
        """
        ...


@runtime_checkable
class RecordStoreProtocol(Protocol):
    """Protocol for the host record store.

    The store is treated as an opaque key-value record accessor and is
    responsible for its own consistency guarantees.
    """

    async def fetch_fields(self, record_id: str, field_ids: Sequence[str]) -> dict[str, Any]:
        """Read the requested fields of a record.

        Args:
            record_id: Host record identifier.
            field_ids: Field identifiers to read.

        Returns:
            Mapping of field id to value for the fields the record has.

        Raises:
            RecordStoreError: If the record cannot be read.
        """
        ...

    async def update_fields(self, record_id: str, field_map: Mapping[str, str]) -> None:
        """Write field values to a record.

        Args:
            record_id: Host record identifier.
            field_map: Field id to new value.

        Raises:
            RecordStoreError: If the update is rejected.
        """
        ...

    def notify_record_changed(self, record_ids: Sequence[str]) -> None:
        """Tell caches and listeners that the given records changed."""
        ...
