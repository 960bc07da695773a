"""Configuration settings for the weather lookup service and client."""

import os
from typing import Final
from dotenv import load_dotenv

load_dotenv()

# Google Places API (proxied, key stays on the server)
PLACES_AUTOCOMPLETE_URL: Final[str] = "https://maps.googleapis.com/maps/api/place/autocomplete/json"
PLACES_DETAILS_URL: Final[str] = "https://maps.googleapis.com/maps/api/place/details/json"
PLACES_AUTOCOMPLETE_TYPES: Final[str] = "geocode"
GOOGLE_API_KEY: str = os.getenv("GOOGLE_API_KEY", "")

# OpenWeatherMap API (called directly by the client)
WEATHER_CURRENT_URL: Final[str] = "https://api.openweathermap.org/data/2.5/weather"
WEATHER_FORECAST_URL: Final[str] = "https://api.openweathermap.org/data/2.5/forecast"
WEATHER_UNITS: Final[str] = "metric"
WEATHER_API_KEY: str = os.getenv("WEATHER_API_KEY", "")

# Fallback location (Manila)
FALLBACK_LAT: Final[float] = 14.5995
FALLBACK_LON: Final[float] = 120.9842
FALLBACK_CITY: Final[str] = "Manila"

# Server configuration
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "5000"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

# Keepalive configuration
KEEPALIVE_URL: str = os.getenv("KEEPALIVE_URL", "")
KEEPALIVE_INTERVAL_SECONDS: float = float(os.getenv("KEEPALIVE_INTERVAL_SECONDS", str(14 * 60)))

# Client configuration
PROXY_BASE_URL: str = os.getenv("PROXY_BASE_URL", "http://localhost:5000")
REQUEST_TIMEOUT_SECONDS: float = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "10"))
GEOLOCATION_TIMEOUT_SECONDS: float = float(os.getenv("GEOLOCATION_TIMEOUT_SECONDS", "10"))

# Presentation settings
MIN_QUERY_LENGTH: Final[int] = 2  # Queries this short never hit the proxy
FORECAST_DAYS: Final[int] = 5
HOURLY_ENTRIES: Final[int] = 9
