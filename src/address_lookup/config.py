"""Widget and remote-service configuration.

``WidgetConfig`` is supplied by the host once and never changes afterwards.
``LookupServiceConfig`` reads its defaults from the environment so the
same code can point at a sandbox or production lookup service.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field, field_validator

from address_lookup.mapping import FieldBinding

DEFAULT_BASE_URL = "https://api.getaddress.io"
DEFAULT_BACKEND = "getaddress"


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return float(value)


@dataclass
class LookupServiceConfig:
    """Connection settings for the remote lookup service."""

    base_url: str = field(
        default_factory=lambda: os.getenv("ADDRESS_LOOKUP_URL", DEFAULT_BASE_URL)
    )
    timeout: float = field(default_factory=lambda: _env_float("ADDRESS_LOOKUP_TIMEOUT", 10.0))
    backend: str = field(
        default_factory=lambda: os.getenv("ADDRESS_LOOKUP_BACKEND", DEFAULT_BACKEND)
    )


class WidgetConfig(BaseModel):
    """Host-supplied configuration for one widget instance."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    object_type: str = Field(description="Host object type name, e.g. 'Account'")
    record_id: str = Field(description="Identifier of the host record to fill")
    title: str = Field(default="Address Lookup", description="Display title")
    postcode_field: str | None = None
    street_field: str | None = None
    city_field: str | None = None
    county_field: str | None = None
    country_field: str | None = None
    discard_stale_responses: bool = Field(
        default=True,
        description="Drop responses that complete after a newer request was issued",
    )

    @field_validator(
        "postcode_field",
        "street_field",
        "city_field",
        "county_field",
        "country_field",
        mode="after",
    )
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        return value or None

    @property
    def binding(self) -> FieldBinding:
        """Role to record-field binding derived from the configured fields."""
        return FieldBinding(
            postcode=self.postcode_field,
            street=self.street_field,
            city=self.city_field,
            county=self.county_field,
            country=self.country_field,
        )
