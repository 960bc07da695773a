"""Client for the geocoding proxy endpoints."""

import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from weather_lookup.config import PROXY_BASE_URL, REQUEST_TIMEOUT_SECONDS
from weather_lookup.places.models import AutocompleteResponse, PlaceDetailsResponse, PlaceSuggestion
from weather_lookup.weather.client import WeatherFetchError
from weather_lookup.weather.models import Coordinates

logger = logging.getLogger(__name__)


class ProxyRequestError(WeatherFetchError):
    """Raised when the proxy cannot resolve a request."""
    pass


class ProxyClient:
    """Async client calling the proxy's autocomplete and details endpoints."""

    def __init__(self, base_url: str = PROXY_BASE_URL, client: Optional[httpx.AsyncClient] = None):
        """Initialize the proxy client.

        Args:
            base_url: Base URL of the geocoding proxy
            client: Optional preconfigured HTTP client
        """
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(timeout=REQUEST_TIMEOUT_SECONDS)

    async def autocomplete(self, text: str) -> List[PlaceSuggestion]:
        """Fetch place suggestions for free text.

        Returns:
            Suggestions, empty if the response carries no predictions

        Raises:
            ProxyRequestError: If the request or decoding fails
        """
        data = await self._get("/api/autocomplete", text)
        try:
            return AutocompleteResponse(**data).predictions or []
        except (TypeError, ValidationError) as e:
            logger.error(f"Invalid autocomplete response: {e!r}")
            raise ProxyRequestError("Invalid autocomplete response") from e

    async def place_coordinates(self, place_id: str) -> Coordinates:
        """Resolve a place identifier to coordinates.

        Raises:
            ProxyRequestError: If the request fails or the place has no location
        """
        data = await self._get("/api/place/details", place_id)
        try:
            location = PlaceDetailsResponse(**data).result.geometry.location
            return Coordinates(lat=location.lat, lon=location.lng)
        except (TypeError, ValidationError) as e:
            logger.error(f"Place {place_id!r} could not be resolved: {e!r}")
            raise ProxyRequestError("Place details unavailable") from e

    async def _get(self, path: str, value: str) -> dict:
        try:
            response = await self.client.get(f"{self.base_url}{path}", params={"input": value})
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Proxy returned {e.response.status_code} for {path}")
            raise ProxyRequestError("Network error") from e
        except httpx.RequestError as e:
            logger.error(f"Request error to proxy {path}: {e!r}")
            raise ProxyRequestError("Network error") from e
        except ValueError as e:
            logger.error(f"Invalid JSON from proxy {path}: {e}")
            raise ProxyRequestError("Invalid proxy response") from e

    async def aclose(self):
        """Close the async HTTP client."""
        await self.client.aclose()
