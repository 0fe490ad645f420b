from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from address_lookup.config import LookupServiceConfig
from address_lookup.models import (
    PACKAGE_NAME,
    AddressLookupError,
    Candidate,
    Ok,
    ServiceError,
    ServiceResult,
    TransportFailure,
)

logger = logging.getLogger(__name__)


class GetAddressClient:
    """Async REST client for a getAddress-style autocomplete service.

    ``GET /autocomplete/{query}`` returns ``{"suggestions": [...]}`` and
    ``GET /get/{id}`` returns the detailed address; either may instead
    return ``{"error": "..."}``.
    """

    name = "getaddress"

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        params: Optional[Mapping[str, str]] = None,
        config: Optional[LookupServiceConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config or LookupServiceConfig()
        self.base_url = base_url or self._config.base_url
        self._timeout = timeout if timeout is not None else self._config.timeout
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self._timeout,
            params=dict(params or {}),
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> GetAddressClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _request(self, path: str) -> dict[str, Any]:
        try:
            response = await self._client.get(path)
        except httpx.HTTPError as exc:
            raise AddressLookupError.from_exception("remote_request", exc) from exc

        if response.status_code >= 400:
            detail: Optional[str] = None
            try:
                payload = response.json()
                if isinstance(payload, dict):
                    detail = (
                        payload.get("Message") or payload.get("message") or payload.get("error")
                    )
            except ValueError:
                detail = None
            message = detail or response.text or response.reason_phrase
            raise AddressLookupError(
                "remote_http_error",
                f"{response.status_code}: {message}",
                {"package": PACKAGE_NAME, "status": response.status_code},
            )

        if not response.content.strip():
            return {}
        try:
            payload = response.json()
        except ValueError as exc:
            raise AddressLookupError.from_exception("remote_parse", exc) from exc
        if not isinstance(payload, dict):
            raise AddressLookupError(
                "remote_parse",
                "Lookup service returned non-object payload",
                {"package": PACKAGE_NAME},
            )
        return payload

    async def search(self, query: str) -> ServiceResult[list[Candidate]]:
        """Autocomplete ``query`` into a ranked list of candidates."""
        path = f"/autocomplete/{quote(query, safe='')}"
        try:
            payload = await self._request(path)
        except AddressLookupError as exc:
            logger.warning("Address search failed for %r: %s", query[:50], exc)
            return TransportFailure(exc)

        if payload.get("error"):
            return ServiceError(str(payload["error"]), payload)

        suggestions = payload.get("suggestions")
        if not isinstance(suggestions, list):
            suggestions = []
        try:
            candidates = [Candidate.model_validate(item) for item in suggestions]
        except ValidationError as exc:
            return TransportFailure(AddressLookupError.from_exception("remote_parse", exc))

        logger.debug("Address search for %r returned %d suggestions", query[:50], len(candidates))
        return Ok(candidates)

    async def resolve(self, candidate_id: str) -> ServiceResult[dict[str, Any]]:
        """Fetch the detailed address for a candidate id."""
        path = f"/get/{quote(candidate_id, safe='')}"
        try:
            payload = await self._request(path)
        except AddressLookupError as exc:
            logger.warning("Address resolve failed for %s: %s", candidate_id, exc)
            return TransportFailure(exc)

        if payload.get("error"):
            return ServiceError(str(payload["error"]), payload)

        logger.debug("Resolved address %s", candidate_id)
        return Ok(payload)
