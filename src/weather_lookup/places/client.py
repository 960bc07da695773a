"""HTTP client for the Google Places API."""

import logging
from typing import Any, Dict, Optional

import httpx

from weather_lookup.config import (
    GOOGLE_API_KEY, PLACES_AUTOCOMPLETE_URL, PLACES_DETAILS_URL,
    PLACES_AUTOCOMPLETE_TYPES, REQUEST_TIMEOUT_SECONDS
)

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """Raised when relaying a request to Google Places fails."""
    pass


class UpstreamTransportError(UpstreamError):
    """The upstream request could not be completed."""
    pass


class UpstreamDecodeError(UpstreamError):
    """The upstream response body was not valid JSON."""
    pass


class GooglePlacesClient:
    """Async relay for the Places autocomplete and details endpoints."""

    def __init__(
        self,
        api_key: str = GOOGLE_API_KEY,
        client: Optional[httpx.AsyncClient] = None,
        autocomplete_url: str = PLACES_AUTOCOMPLETE_URL,
        details_url: str = PLACES_DETAILS_URL
    ):
        """Initialize the places client.

        Args:
            api_key: Server-held Google API key
            client: Optional preconfigured HTTP client
            autocomplete_url: Upstream autocomplete endpoint
            details_url: Upstream place details endpoint
        """
        self.api_key = api_key
        self.autocomplete_url = autocomplete_url
        self.details_url = details_url
        self.client = client or httpx.AsyncClient(timeout=REQUEST_TIMEOUT_SECONDS)

    async def autocomplete(self, text: str) -> Any:
        """Fetch place predictions for free text.

        Args:
            text: Text typed by the user

        Returns:
            Upstream JSON body, unchanged

        Raises:
            UpstreamError: If the request or decoding fails
        """
        params = {"input": text, "types": PLACES_AUTOCOMPLETE_TYPES, "key": self.api_key}
        logger.info(f"Relaying autocomplete request for {text!r}")
        return await self._relay(self.autocomplete_url, params)

    async def place_details(self, place_id: str) -> Any:
        """Fetch details for a place identifier.

        Args:
            place_id: Identifier taken from an autocomplete prediction

        Returns:
            Upstream JSON body, unchanged

        Raises:
            UpstreamError: If the request or decoding fails
        """
        params = {"place_id": place_id, "key": self.api_key}
        logger.info(f"Relaying place details request for {place_id!r}")
        return await self._relay(self.details_url, params)

    async def _relay(self, url: str, params: Dict[str, str]) -> Any:
        # The upstream status is not inspected: Places reports errors in the body
        try:
            response = await self.client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.error(f"Request error to Google Places API: {e!r}")
            raise UpstreamTransportError(str(e)) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from Google Places API (status {response.status_code}): {e}")
            raise UpstreamDecodeError(str(e)) from e

        logger.debug(f"Google Places API answered {response.status_code} with status={data.get('status') if isinstance(data, dict) else None}")
        return data

    async def aclose(self):
        """Close the async HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
