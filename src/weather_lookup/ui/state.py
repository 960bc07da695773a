"""UI state container with explicit transitions."""

import logging
from datetime import tzinfo
from typing import List, Optional

from weather_lookup.places.models import PlaceSuggestion
from weather_lookup.ui.location import LocationPhase
from weather_lookup.weather.models import CurrentWeather, DailyBucket, ForecastEntry, ForecastSeries
from weather_lookup.weather.service import get_hourly_forecast, group_forecast_by_day

logger = logging.getLogger(__name__)


class WeatherState:
    """Everything the weather view renders.

    Current weather and forecast form one snapshot: they are committed
    together, and a failed fetch keeps the previous snapshot while recording
    the error.
    """

    def __init__(self):
        self.weather: Optional[CurrentWeather] = None
        self.forecast: Optional[ForecastSeries] = None
        self.suggestions: List[PlaceSuggestion] = []
        self.query: str = ""
        self.loading: bool = True
        self.error: Optional[str] = None
        self.location_phase: LocationPhase = LocationPhase.RESOLVING
        self._query_sequence = 0

    def set_location_phase(self, phase: LocationPhase) -> None:
        self.location_phase = phase

    def begin_loading(self) -> None:
        self.loading = True

    def commit_snapshot(self, weather: CurrentWeather, forecast: ForecastSeries) -> None:
        """Replace weather and forecast together and leave the loading state."""
        self.weather = weather
        self.forecast = forecast
        self.error = None
        self.loading = False

    def fail(self, message: str) -> None:
        """Record a fetch error and leave the loading state, keeping the last snapshot."""
        self.error = message
        self.loading = False

    def next_query_sequence(self) -> int:
        self._query_sequence += 1
        return self._query_sequence

    def clear_suggestions(self) -> None:
        self.suggestions = []

    def apply_suggestions(self, sequence: int, suggestions: List[PlaceSuggestion]) -> bool:
        """Replace suggestions unless a newer query has been issued since.

        Returns:
            True if applied, False if the response was stale
        """
        if sequence != self._query_sequence:
            logger.debug(f"Discarding stale suggestions #{sequence} (latest #{self._query_sequence})")
            return False
        self.suggestions = suggestions
        return True

    def daily_buckets(self, tz: Optional[tzinfo] = None) -> List[DailyBucket]:
        if self.forecast is None:
            return []
        return group_forecast_by_day(self.forecast, tz)

    def hourly_forecast(self) -> List[ForecastEntry]:
        if self.forecast is None:
            return []
        return get_hourly_forecast(self.forecast)
