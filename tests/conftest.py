"""Shared fixtures: OpenWeatherMap payloads and mocked HTTP transports."""

from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List

import httpx
import pytest

from weather_lookup.weather.models import ForecastEntry, ForecastSeries

START = datetime(2024, 6, 1, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def current_payload() -> Dict:
    return {
        "name": "Manila",
        "main": {"temp": 31.2, "feels_like": 36.4, "humidity": 70},
        "weather": [{"description": "scattered clouds"}],
        "wind": {"speed": 4.1},
    }


@pytest.fixture
def forecast_payload() -> Callable[..., Dict]:
    """Build a /forecast body with 3-hour steps from START."""
    def build(count: int = 40, start: datetime = START) -> Dict:
        items = []
        for i in range(count):
            moment = start + timedelta(hours=3 * i)
            items.append({
                "dt": int(moment.timestamp()),
                "dt_txt": moment.strftime("%Y-%m-%d %H:%M:%S"),
                "main": {"temp": 20 + i},
                "weather": [{"description": f"step {i}"}],
            })
        return {"cod": "200", "list": items, "city": {"name": "Manila"}}
    return build


@pytest.fixture
def make_series() -> Callable[..., ForecastSeries]:
    """Build a ForecastSeries from explicit timestamps or a 3-hour run."""
    def build(count: int = 40, start: datetime = START, timestamps: List[datetime] = None) -> ForecastSeries:
        if timestamps is None:
            timestamps = [start + timedelta(hours=3 * i) for i in range(count)]
        return ForecastSeries(entries=[
            ForecastEntry(timestamp=moment, temperature=float(i), description=f"step {i}")
            for i, moment in enumerate(timestamps)
        ])
    return build


@pytest.fixture
def mock_http() -> Callable[[Callable], httpx.AsyncClient]:
    """Wrap a request handler in an AsyncClient backed by MockTransport."""
    def build(handler: Callable) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return build
