"""Startup location resolution with a fixed fallback point."""

import asyncio
import logging
import os
from enum import Enum
from typing import Awaitable, Callable, Optional

from pydantic import ValidationError

from weather_lookup.config import FALLBACK_LAT, FALLBACK_LON, GEOLOCATION_TIMEOUT_SECONDS
from weather_lookup.weather.models import Coordinates

logger = logging.getLogger(__name__)

Locator = Callable[[], Awaitable[Coordinates]]

FALLBACK_COORDINATES = Coordinates(lat=FALLBACK_LAT, lon=FALLBACK_LON)


class GeolocationUnavailable(Exception):
    """Raised when the device position cannot be obtained."""
    pass


class LocationPhase(str, Enum):
    RESOLVING = "resolving"
    FALLBACK = "fallback"
    READY = "ready"


class FixedLocator:
    """Locator returning an explicit coordinate pair."""

    def __init__(self, lat: float, lon: float):
        self.coordinates = Coordinates(lat=lat, lon=lon)

    async def __call__(self) -> Coordinates:
        return self.coordinates


class EnvironmentLocator:
    """Locator reading the device position from DEVICE_LAT / DEVICE_LON."""

    def __init__(self, lat_var: str = "DEVICE_LAT", lon_var: str = "DEVICE_LON"):
        self.lat_var = lat_var
        self.lon_var = lon_var

    async def __call__(self) -> Coordinates:
        lat = os.getenv(self.lat_var)
        lon = os.getenv(self.lon_var)
        if not lat or not lon:
            raise GeolocationUnavailable(f"{self.lat_var}/{self.lon_var} not set")
        try:
            return Coordinates(lat=float(lat), lon=float(lon))
        except (ValueError, ValidationError) as e:
            raise GeolocationUnavailable(f"Invalid device position: {lat}, {lon}") from e


async def resolve_location(
    locator: Optional[Locator],
    on_phase: Optional[Callable[[LocationPhase], None]] = None,
    timeout: float = GEOLOCATION_TIMEOUT_SECONDS
) -> Coordinates:
    """Resolve startup coordinates, falling back to the fixed point.

    Never raises for location failures; they are logged as warnings.

    Args:
        locator: Device position source, None if unsupported
        on_phase: Callback receiving each phase transition
        timeout: Seconds to wait for the locator

    Returns:
        Device coordinates, or the fallback coordinates
    """
    def enter(phase: LocationPhase) -> None:
        if on_phase is not None:
            on_phase(phase)

    enter(LocationPhase.RESOLVING)
    try:
        if locator is None:
            raise GeolocationUnavailable("Geolocation is not supported")
        coordinates = await asyncio.wait_for(locator(), timeout=timeout)
    except Exception as e:
        # Any locator failure, including a timeout, degrades to the fallback point
        logger.warning(f"Geolocation error: {type(e).__name__}: {str(e) or 'timed out'}; using fallback location")
        enter(LocationPhase.FALLBACK)
        coordinates = FALLBACK_COORDINATES

    enter(LocationPhase.READY)
    logger.info(f"Location resolved to ({coordinates.lat}, {coordinates.lon})")
    return coordinates
