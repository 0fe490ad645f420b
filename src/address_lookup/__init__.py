"""address-lookup: look up an address, resolve it and fill a host record.

This package provides the state machine behind an address lookup widget:
- Search a remote lookup service for candidate addresses
- Resolve a chosen candidate into postcode/street/city/county/country
- Map those fields onto caller-chosen record fields and save them
- Classify failures (service errors, rate limiting, transport errors)

Quick Start:
    >>> from address_lookup import AddressLookupController, GetAddressClient, WidgetConfig
    >>> from address_lookup import InMemoryRecordStore
    >>> config = WidgetConfig(
    ...     object_type="Account",
    ...     record_id="001",
    ...     postcode_field="BillingPostalCode",
    ...     street_field="BillingStreet",
    ...     city_field="BillingCity",
    ... )
    >>> store = InMemoryRecordStore({"001": {}})
    >>> controller = AddressLookupController(config, GetAddressClient(), store)
    >>> await controller.load()
    >>> await controller.trigger_search("10 Downing St")
    >>> await controller.select_candidate(controller.candidate_options[0].value)
    >>> print(controller.state.resolved.postcode)  # "SW1A 2AA"
    >>> await controller.save()
"""

from __future__ import annotations  # noqa: I001

# Import order is intentional to avoid circular imports - do not auto-fix
from address_lookup.models import (
    ADDRESS_ROLES,
    PACKAGE_NAME,
    AddressLookupError,
    AddressRole,
    Candidate,
    CandidateOption,
    LookupState,
    Ok,
    RecordChanged,
    RecordStoreError,
    ResolvedAddress,
    SaveFailed,
    SaveRequested,
    SaveSucceeded,
    SelectionResolved,
    ServiceError,
    ServiceResult,
    TransportFailure,
    UnknownServiceError,
    ValidationFailed,
)
from address_lookup.mapping import (
    FieldBinding,
    build_update_map,
    concatenate_street_lines,
    resolve_city,
    seed_from_record,
)
from address_lookup.classification import (
    RATE_LIMITED_MESSAGE,
    RESOLVE_FAILED_MESSAGE,
    SAVE_FAILED_MESSAGE,
    SEARCH_FAILED_MESSAGE,
    is_rate_limited,
)
from address_lookup.config import LookupServiceConfig, WidgetConfig
from address_lookup.notifications import EventBus
from address_lookup.protocols import RecordStoreProtocol, RemoteAddressServiceProtocol
from address_lookup.remote import GetAddressClient, LookupServiceFactory
from address_lookup.store import InMemoryRecordStore
from address_lookup.validation import (
    FieldValue,
    MaxLengthValidator,
    PatternValidator,
    RequiredFieldValidator,
    create_default_field_validators,
)
from address_lookup.controller import AddressLookupController

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Controller
    "AddressLookupController",
    # Configuration
    "WidgetConfig",
    "LookupServiceConfig",
    # Mapping
    "FieldBinding",
    "build_update_map",
    "concatenate_street_lines",
    "resolve_city",
    "seed_from_record",
    # Models
    "ADDRESS_ROLES",
    "AddressRole",
    "Candidate",
    "CandidateOption",
    "LookupState",
    "ResolvedAddress",
    # Results
    "Ok",
    "ServiceError",
    "ServiceResult",
    "TransportFailure",
    # Events
    "EventBus",
    "RecordChanged",
    "SaveFailed",
    "SaveRequested",
    "SaveSucceeded",
    "SelectionResolved",
    "ValidationFailed",
    # Errors and classification
    "PACKAGE_NAME",
    "AddressLookupError",
    "RecordStoreError",
    "UnknownServiceError",
    "RATE_LIMITED_MESSAGE",
    "RESOLVE_FAILED_MESSAGE",
    "SAVE_FAILED_MESSAGE",
    "SEARCH_FAILED_MESSAGE",
    "is_rate_limited",
    # Collaborators
    "RecordStoreProtocol",
    "RemoteAddressServiceProtocol",
    "GetAddressClient",
    "LookupServiceFactory",
    "InMemoryRecordStore",
    # Validation
    "FieldValue",
    "MaxLengthValidator",
    "PatternValidator",
    "RequiredFieldValidator",
    "create_default_field_validators",
]
