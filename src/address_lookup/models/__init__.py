"""Address lookup models package.

Re-exports the public models, results, events and errors.
"""

from __future__ import annotations  # noqa: I001

# Import order is intentional to avoid circular imports - do not auto-fix
from address_lookup.models.enums import (
    ADDRESS_ROLES,
    MAX_STREET_LINES,
    AddressRole,
)
from address_lookup.models.errors import (
    PACKAGE_NAME,
    AddressLookupError,
    RecordStoreError,
    UnknownServiceError,
)
from address_lookup.models.results import (
    Ok,
    ServiceError,
    ServiceResult,
    TransportFailure,
)
from address_lookup.models.address import (
    Candidate,
    CandidateOption,
    ResolvedAddress,
)
from address_lookup.models.state import LookupState
from address_lookup.models.events import (
    LookupEvent,
    RecordChanged,
    SaveFailed,
    SaveRequested,
    SaveSucceeded,
    SelectionResolved,
    ValidationFailed,
)

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "AddressLookupError",
    "RecordStoreError",
    "UnknownServiceError",
    # Enums and constants
    "AddressRole",
    "ADDRESS_ROLES",
    "MAX_STREET_LINES",
    # Results
    "Ok",
    "ServiceError",
    "ServiceResult",
    "TransportFailure",
    # Address models
    "Candidate",
    "CandidateOption",
    "ResolvedAddress",
    # State
    "LookupState",
    # Events
    "LookupEvent",
    "RecordChanged",
    "SaveFailed",
    "SaveRequested",
    "SaveSucceeded",
    "SelectionResolved",
    "ValidationFailed",
]
