"""Address role enumerations and constants."""

from __future__ import annotations

from enum import Enum


class AddressRole(str, Enum):
    """The five logical address components a host field can be bound to."""

    POSTCODE = "postcode"
    STREET = "street"
    CITY = "city"
    COUNTY = "county"
    COUNTRY = "country"


# All roles in display/write order
ADDRESS_ROLES: list[AddressRole] = list(AddressRole)

# Number of raw address lines the lookup service returns
MAX_STREET_LINES = 4
