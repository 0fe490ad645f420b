from __future__ import annotations

from address_lookup.remote.client import GetAddressClient
from address_lookup.remote.factory import LookupServiceFactory

__all__ = [
    "GetAddressClient",
    "LookupServiceFactory",
]
