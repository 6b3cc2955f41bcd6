"""
Low-level async HTTP client for the QuantaRoute API.

One method per backend capability, each a thin shape-mapping over `call`.
Backend failures are classified here and nowhere else.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from ..constants import ApiPaths, ErrorMessages, QuantaRouteConfig
from .errors import AuthenticationError, BackendError, RateLimitError, TransportError

logger = logging.getLogger(__name__)


def unwrap(payload: Any) -> Any:
    """Return the backend's ``data`` member when present, else the payload itself."""
    if isinstance(payload, dict) and payload.get("data"):
        return payload["data"]
    return payload


def _error_message(response: httpx.Response) -> str:
    """Pull the most useful message out of a failed backend response."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason_phrase or response.text[:200]


class QuantaRouteClient:
    """Async HTTP client for the QuantaRoute geocoding API.

    Features:
    - Credential attached as ``x-api-key`` on every request
    - Backend envelope unwrapping
    - Uniform 401 / 429 / other / no-response error classification

    The underlying httpx client is created lazily unless one is shared in
    via ``http_client``; a shared client is never closed by this object.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = QuantaRouteConfig.BASE_URL,
        timeout: float = QuantaRouteConfig.TIMEOUT_SECONDS,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self) -> "QuantaRouteClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Lazily create httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "User-Agent": QuantaRouteConfig.USER_AGENT,
            QuantaRouteConfig.API_KEY_HEADER: self._api_key,
        }

    async def call(
        self,
        method: str,
        path: str,
        body: dict | None = None,
        query: dict | None = None,
    ) -> Any:
        """Issue one request to the backend and return its decoded JSON.

        Args:
            method: HTTP method ("GET" or "POST")
            path: Backend path, e.g. "/v1/digipin/geocode"
            body: JSON body for POST requests
            query: Query string parameters

        Returns:
            Decoded JSON payload (None for an empty body)

        Raises:
            AuthenticationError: Backend answered 401
            RateLimitError: Backend answered 429
            BackendError: Backend answered any other non-2xx status
            TransportError: No response was received
        """
        client = await self._get_client()
        url = f"{self._base_url}{path}"
        logger.debug("QuantaRoute %s %s", method, path)

        try:
            response = await client.request(
                method, url, json=body, params=query, headers=self._headers()
            )
        except httpx.TimeoutException as e:
            raise TransportError(ErrorMessages.REQUEST_FAILED.format(f"timeout ({e})")) from e
        except httpx.HTTPError as e:
            raise TransportError(ErrorMessages.REQUEST_FAILED.format(e)) from e

        if response.is_error:
            message = _error_message(response)
            logger.warning("QuantaRoute %s %s -> HTTP %d", method, path, response.status_code)
            if response.status_code == 401:
                raise AuthenticationError(ErrorMessages.AUTHENTICATION_FAILED.format(message))
            if response.status_code == 429:
                raise RateLimitError(ErrorMessages.RATE_LIMITED.format(message))
            raise BackendError(
                ErrorMessages.API_ERROR.format(response.status_code, message),
                status_code=response.status_code,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise BackendError(
                ErrorMessages.API_ERROR.format(response.status_code, "invalid JSON response"),
                status_code=response.status_code,
            ) from e

    # --- DigiPin operations ---

    async def geocode(
        self,
        address: str,
        city: str | None = None,
        state: str | None = None,
        pincode: str | None = None,
        country: str | None = None,
    ) -> Any:
        """Geocode an address to a DigiPin and coordinates."""
        data: dict[str, str] = {
            "address": address,
            "country": country or QuantaRouteConfig.DEFAULT_COUNTRY,
        }
        if city:
            data["city"] = city
        if state:
            data["state"] = state
        if pincode:
            data["pincode"] = pincode
        return unwrap(await self.call("POST", ApiPaths.GEOCODE, body=data))

    async def reverse_geocode(self, digipin: str) -> Any:
        """Resolve a DigiPin to coordinates and address information."""
        return unwrap(await self.call("POST", ApiPaths.REVERSE, body={"digipin": digipin}))

    async def coordinates_to_digipin(self, latitude: float, longitude: float) -> Any:
        """Convert a coordinate pair to its DigiPin."""
        body = {"latitude": latitude, "longitude": longitude}
        return unwrap(await self.call("POST", ApiPaths.COORDINATES_TO_DIGIPIN, body=body))

    async def validate_digipin(self, digipin: str) -> Any:
        """Validate a DigiPin. The code is embedded in the path."""
        path = ApiPaths.VALIDATE.format(quote(digipin, safe=""))
        return unwrap(await self.call("GET", path))

    async def batch_geocode(self, addresses: list[dict]) -> Any:
        """Geocode up to 100 addresses in one backend call."""
        return unwrap(
            await self.call("POST", ApiPaths.BATCH_GEOCODE, body={"addresses": addresses})
        )

    async def autocomplete(
        self, query: str, limit: int = QuantaRouteConfig.AUTOCOMPLETE_DEFAULT_LIMIT
    ) -> Any:
        """Address suggestions; ``limit`` is capped at 10."""
        params = {"q": query, "limit": min(limit, QuantaRouteConfig.AUTOCOMPLETE_MAX_LIMIT)}
        return unwrap(await self.call("GET", ApiPaths.AUTOCOMPLETE, query=params))

    # --- Location lookup operations ---

    async def lookup_location_from_coordinates(self, latitude: float, longitude: float) -> Any:
        """Administrative boundaries (pincode, state, division, locality) for coordinates."""
        body = {"latitude": latitude, "longitude": longitude}
        return unwrap(await self.call("POST", ApiPaths.LOCATION_LOOKUP, body=body))

    async def lookup_location_from_digipin(self, digipin: str) -> Any:
        """Administrative boundaries for a DigiPin."""
        return unwrap(
            await self.call("POST", ApiPaths.LOCATION_LOOKUP, body={"digipin": digipin})
        )

    async def batch_location_lookup(self, locations: list[dict]) -> Any:
        """Look up up to 100 locations, each by coordinates or DigiPin."""
        return unwrap(
            await self.call(
                "POST", ApiPaths.LOCATION_BATCH_LOOKUP, body={"locations": locations}
            )
        )

    async def find_nearby_boundaries(
        self,
        latitude: float,
        longitude: float,
        radius_km: float = QuantaRouteConfig.NEARBY_DEFAULT_RADIUS_KM,
        limit: int = QuantaRouteConfig.NEARBY_DEFAULT_LIMIT,
    ) -> Any:
        """Postal boundaries around a point; ``limit`` is capped at 50."""
        params = {
            "lat": latitude,
            "lng": longitude,
            "radius": radius_km,
            "limit": min(limit, QuantaRouteConfig.NEARBY_MAX_LIMIT),
        }
        return unwrap(await self.call("GET", ApiPaths.LOCATION_NEARBY, query=params))

    # --- Service operations ---

    async def get_usage(self) -> Any:
        return unwrap(await self.call("GET", ApiPaths.USAGE))

    async def get_location_statistics(self) -> Any:
        return unwrap(await self.call("GET", ApiPaths.LOCATION_STATS))

    async def get_health(self) -> Any:
        return unwrap(await self.call("GET", ApiPaths.HEALTH))

    async def close(self) -> None:
        """Close the httpx client if this object created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
