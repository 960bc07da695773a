"""Weather service for fetching and shaping forecast data."""

import asyncio
import logging
from collections import defaultdict
from datetime import date, tzinfo
from typing import Dict, List, Optional, Tuple

from pydantic import ValidationError

from weather_lookup.config import FORECAST_DAYS, HOURLY_ENTRIES
from weather_lookup.weather.client import OpenWeatherClient, WeatherFetchError
from weather_lookup.weather.models import (
    CurrentWeather, DailyBucket, ForecastEntry, ForecastSeries
)

logger = logging.getLogger(__name__)


class WeatherService:
    """Service fetching current conditions and forecast as one snapshot."""

    def __init__(self, client: Optional[OpenWeatherClient] = None):
        """Initialize the weather service.

        Args:
            client: Weather client instance (creates default if None)
        """
        self.client = client or OpenWeatherClient()

    async def fetch_weather(self, lat: float, lon: float) -> Tuple[CurrentWeather, ForecastSeries]:
        """Fetch current weather and forecast for a coordinate pair.

        Both calls must succeed; there is no partial result.

        Args:
            lat: Latitude in decimal degrees
            lon: Longitude in decimal degrees

        Returns:
            Tuple of (current weather, forecast series)

        Raises:
            WeatherFetchError: If either call fails or returns malformed data
        """
        # Wait for both calls so neither is left running after a failure
        results = await asyncio.gather(
            self.client.get_current_weather(lat, lon),
            self.client.get_forecast(lat, lon),
            return_exceptions=True
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        current_raw, forecast_raw = results

        try:
            current = CurrentWeather.from_api(current_raw)
            forecast = ForecastSeries.from_api(forecast_raw)
        except (KeyError, TypeError, IndexError, ValueError, ValidationError) as e:
            logger.error(f"Invalid weather data format: {e!r}")
            raise WeatherFetchError("Invalid weather data") from e

        logger.info(f"Fetched weather for {current.name or 'unknown location'} with {len(forecast.entries)} forecast entries")
        return current, forecast

    async def aclose(self):
        """Close the weather client."""
        if self.client:
            try:
                await self.client.aclose()
            except Exception as e:
                logger.error(f"Error closing weather client: {e}")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()


def group_forecast_by_day(
    series: ForecastSeries,
    tz: Optional[tzinfo] = None,
    max_days: int = FORECAST_DAYS
) -> List[DailyBucket]:
    """Group forecast entries by calendar date in the viewer's time zone.

    Buckets follow first-occurrence order and entries keep their original
    order within a bucket. Only the first ``max_days`` buckets are returned;
    fewer dates means fewer buckets.

    Args:
        series: Forecast series in provider order
        tz: Viewer's time zone (local system zone if None)
        max_days: Maximum number of buckets to return

    Returns:
        List of daily buckets
    """
    daily_data: Dict[date, List[ForecastEntry]] = defaultdict(list)

    for entry in series.entries:
        local_date = entry.timestamp.astimezone(tz).date()
        daily_data[local_date].append(entry)

    buckets = [
        DailyBucket(day=day, entries=entries)
        for day, entries in list(daily_data.items())[:max_days]
    ]
    logger.debug(f"Grouped {len(series.entries)} entries into {len(daily_data)} days, kept {len(buckets)}")
    return buckets


def get_hourly_forecast(series: ForecastSeries, count: int = HOURLY_ENTRIES) -> List[ForecastEntry]:
    """Return the first ``count`` forecast entries, in original order."""
    return series.entries[:count]
