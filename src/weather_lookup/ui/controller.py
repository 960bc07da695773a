"""Controller driving the weather view: startup, search and selection."""

import asyncio
import logging
from typing import Optional

from weather_lookup.config import MIN_QUERY_LENGTH
from weather_lookup.ui.location import Locator, resolve_location
from weather_lookup.ui.proxy_client import ProxyClient, ProxyRequestError
from weather_lookup.ui.state import WeatherState
from weather_lookup.weather.client import WeatherFetchError
from weather_lookup.weather.models import Coordinates
from weather_lookup.weather.service import WeatherService

logger = logging.getLogger(__name__)


class WeatherController:
    """Runs the user-triggered flows against a WeatherState."""

    def __init__(
        self,
        weather_service: WeatherService,
        proxy_client: ProxyClient,
        state: Optional[WeatherState] = None,
        locator: Optional[Locator] = None
    ):
        """Initialize the controller.

        Args:
            weather_service: Service fetching weather snapshots
            proxy_client: Client for the geocoding proxy
            state: State container (creates a fresh one if None)
            locator: Device position source, None if unsupported
        """
        self.weather_service = weather_service
        self.proxy_client = proxy_client
        self.state = state or WeatherState()
        self.locator = locator
        # Fetch flows own the loading flag, only one runs at a time
        self._fetch_lock = asyncio.Lock()

    async def start(self) -> bool:
        """Resolve the startup location and load its weather.

        Returns:
            True if weather was loaded
        """
        coordinates = await resolve_location(self.locator, on_phase=self.state.set_location_phase)
        return await self.load_weather(coordinates)

    async def load_weather(self, coordinates: Coordinates) -> bool:
        """Fetch and commit a weather snapshot for coordinates.

        Returns:
            True on success, False if a WeatherFetchError was recorded
        """
        async with self._fetch_lock:
            self.state.begin_loading()
            return await self._fetch_and_commit(coordinates)

    async def on_query_change(self, text: str) -> None:
        """Handle a change of the search text."""
        self.state.query = text
        sequence = self.state.next_query_sequence()

        if len(text) <= MIN_QUERY_LENGTH:
            self.state.clear_suggestions()
            return

        try:
            suggestions = await self.proxy_client.autocomplete(text)
        except ProxyRequestError as e:
            logger.error(f"Error fetching suggestions: {e}")
            return

        self.state.apply_suggestions(sequence, suggestions)

    async def select_suggestion(self, place_id: str) -> bool:
        """Load weather for a selected suggestion.

        Returns:
            True on success, False if a WeatherFetchError was recorded
        """
        async with self._fetch_lock:
            self.state.begin_loading()
            self.state.clear_suggestions()
            # Invalidate autocomplete responses still in flight
            self.state.next_query_sequence()

            try:
                coordinates = await self.proxy_client.place_coordinates(place_id)
            except ProxyRequestError as e:
                logger.error(f"Error resolving place {place_id!r}: {e}")
                self.state.fail(str(e))
                return False

            loaded = await self._fetch_and_commit(coordinates)
            if loaded:
                self.state.query = ""
            return loaded

    async def _fetch_and_commit(self, coordinates: Coordinates) -> bool:
        try:
            weather, forecast = await self.weather_service.fetch_weather(coordinates.lat, coordinates.lon)
        except WeatherFetchError as e:
            logger.error(f"Error fetching weather data: {e}")
            self.state.fail(str(e))
            return False

        self.state.commit_snapshot(weather, forecast)
        return True
