"""Registry of remote lookup backends."""

from __future__ import annotations

from typing import Any, ClassVar

from address_lookup.config import LookupServiceConfig
from address_lookup.models import UnknownServiceError
from address_lookup.protocols import RemoteAddressServiceProtocol


class LookupServiceFactory:
    """Factory for creating remote lookup service instances.

    Example:
        >>> service = LookupServiceFactory.create("getaddress", base_url="https://...")

        # Register a custom backend
        >>> LookupServiceFactory.register("ideal", IdealPostcodesClient)
        >>> service = LookupServiceFactory.create("ideal")
    """

    _registry: ClassVar[dict[str, type[RemoteAddressServiceProtocol]]] = {}
    _default_type: ClassVar[str] = "getaddress"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        if "getaddress" not in cls._registry:
            from address_lookup.remote.client import GetAddressClient

            cls._registry["getaddress"] = GetAddressClient

    @classmethod
    def register(cls, name: str, impl_class: type[RemoteAddressServiceProtocol]) -> None:
        """Register a backend class under ``name``."""
        cls._registry[name] = impl_class

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._registry.pop(name, None)

    @classmethod
    def create(cls, name: str | None = None, **kwargs: Any) -> RemoteAddressServiceProtocol:
        """Create a backend instance.

        Args:
            name: Backend name. Defaults to "getaddress".
            **kwargs: Arguments passed to the backend constructor.

        Returns:
            Remote lookup service instance.

        Raises:
            UnknownServiceError: If the backend name is not registered.
        """
        cls._ensure_defaults_registered()

        type_name = name if name is not None else cls._default_type
        if type_name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys()))
            raise UnknownServiceError(
                f"Unknown lookup service type: {type_name}. Available types: {available}"
            )
        return cls._registry[type_name](**kwargs)

    @classmethod
    def from_config(cls, config: LookupServiceConfig | None = None) -> RemoteAddressServiceProtocol:
        """Create the backend named by ``config.backend``."""
        config = config or LookupServiceConfig()
        return cls.create(config.backend, config=config)

    @classmethod
    def available_types(cls) -> list[str]:
        cls._ensure_defaults_registered()
        return sorted(cls._registry.keys())
