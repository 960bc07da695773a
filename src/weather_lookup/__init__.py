"""Weather lookup: Google Places proxy service and OpenWeatherMap client."""

__version__ = "0.1.0"
