"""Tests for startup location resolution."""

import asyncio
import logging

import pytest

from weather_lookup.ui.location import (
    EnvironmentLocator, FixedLocator, GeolocationUnavailable, LocationPhase, resolve_location
)
from weather_lookup.weather.models import Coordinates

MANILA = Coordinates(lat=14.5995, lon=120.9842)


@pytest.mark.asyncio
async def test_device_position_is_used():
    phases = []

    coordinates = await resolve_location(FixedLocator(48.8566, 2.3522), on_phase=phases.append)

    assert coordinates == Coordinates(lat=48.8566, lon=2.3522)
    assert phases == [LocationPhase.RESOLVING, LocationPhase.READY]


@pytest.mark.asyncio
async def test_denied_permission_falls_back_with_warning(caplog):
    phases = []

    async def denied() -> Coordinates:
        raise GeolocationUnavailable("User denied Geolocation")

    with caplog.at_level(logging.WARNING, logger="weather_lookup.ui.location"):
        coordinates = await resolve_location(denied, on_phase=phases.append)

    assert coordinates == MANILA
    assert phases == [LocationPhase.RESOLVING, LocationPhase.FALLBACK, LocationPhase.READY]
    assert "User denied Geolocation" in caplog.text


@pytest.mark.asyncio
async def test_unsupported_capability_falls_back():
    assert await resolve_location(None) == MANILA


@pytest.mark.asyncio
async def test_slow_locator_times_out_to_fallback():
    async def never() -> Coordinates:
        await asyncio.sleep(10)
        return Coordinates(lat=0, lon=0)

    assert await resolve_location(never, timeout=0.01) == MANILA


@pytest.mark.asyncio
async def test_environment_locator(monkeypatch):
    monkeypatch.setenv("DEVICE_LAT", "35.6762")
    monkeypatch.setenv("DEVICE_LON", "139.6503")

    assert await EnvironmentLocator()() == Coordinates(lat=35.6762, lon=139.6503)


@pytest.mark.asyncio
@pytest.mark.parametrize("lat, lon", [(None, None), ("abc", "1"), ("95", "10")])
async def test_environment_locator_unavailable(monkeypatch, lat, lon):
    for name, value in (("DEVICE_LAT", lat), ("DEVICE_LON", lon)):
        if value is None:
            monkeypatch.delenv(name, raising=False)
        else:
            monkeypatch.setenv(name, value)

    with pytest.raises(GeolocationUnavailable):
        await EnvironmentLocator()()


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [PermissionError("location services off"), OSError("no device"), ValueError("bad fix")])
async def test_unexpected_locator_failure_falls_back(caplog, error):
    phases = []

    async def broken() -> Coordinates:
        raise error

    with caplog.at_level(logging.WARNING, logger="weather_lookup.ui.location"):
        coordinates = await resolve_location(broken, on_phase=phases.append)

    assert coordinates == MANILA
    assert phases == [LocationPhase.RESOLVING, LocationPhase.FALLBACK, LocationPhase.READY]
    assert type(error).__name__ in caplog.text
