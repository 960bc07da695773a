"""HTTP client for the OpenWeatherMap API."""

import logging
from typing import Any, Dict, Optional

import httpx

from weather_lookup.config import (
    WEATHER_API_KEY, WEATHER_CURRENT_URL, WEATHER_FORECAST_URL,
    WEATHER_UNITS, REQUEST_TIMEOUT_SECONDS
)

logger = logging.getLogger(__name__)


class WeatherFetchError(Exception):
    """Raised when weather data cannot be fetched."""
    pass


class OpenWeatherClient:
    """Async client for current conditions and the 5-day/3-hour forecast."""

    def __init__(
        self,
        api_key: str = WEATHER_API_KEY,
        client: Optional[httpx.AsyncClient] = None,
        current_url: str = WEATHER_CURRENT_URL,
        forecast_url: str = WEATHER_FORECAST_URL
    ):
        """Initialize the weather client.

        Args:
            api_key: OpenWeatherMap API key
            client: Optional preconfigured HTTP client
            current_url: Current conditions endpoint
            forecast_url: Forecast endpoint
        """
        self.api_key = api_key
        self.current_url = current_url
        self.forecast_url = forecast_url
        self.client = client or httpx.AsyncClient(timeout=REQUEST_TIMEOUT_SECONDS)

    async def get_current_weather(self, lat: float, lon: float) -> Dict[str, Any]:
        """Fetch current conditions for given coordinates.

        Raises:
            WeatherFetchError: If the request fails or returns a non-success status
        """
        return await self._get(self.current_url, lat, lon)

    async def get_forecast(self, lat: float, lon: float) -> Dict[str, Any]:
        """Fetch the 5-day/3-hour forecast for given coordinates.

        Raises:
            WeatherFetchError: If the request fails or returns a non-success status
        """
        return await self._get(self.forecast_url, lat, lon)

    async def _get(self, url: str, lat: float, lon: float) -> Dict[str, Any]:
        params = {"lat": lat, "lon": lon, "appid": self.api_key, "units": WEATHER_UNITS}
        logger.info(f"Fetching {url} for lat={lat}, lon={lon}")

        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error from OpenWeatherMap: {e.response.status_code} - {e.response.text}")
            raise WeatherFetchError(f"Weather service returned {e.response.status_code}") from e
        except httpx.TimeoutException as e:
            logger.error(f"Timed out requesting OpenWeatherMap: {e!r}")
            raise WeatherFetchError("Weather service timed out") from e
        except httpx.RequestError as e:
            logger.error(f"Request error to OpenWeatherMap: {e!r}")
            raise WeatherFetchError("Network error") from e
        except ValueError as e:
            logger.error(f"Invalid JSON from OpenWeatherMap: {e}")
            raise WeatherFetchError("Invalid weather data") from e

    async def aclose(self):
        """Close the async HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
