"""Data models for weather lookups."""

from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """Coordinate pair used for weather lookups."""
    lat: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    lon: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")


class CurrentWeather(BaseModel):
    """Current conditions at a location."""
    name: str = Field(..., description="Location name reported by the provider")
    temperature: float = Field(..., description="Temperature in Celsius")
    feels_like: float = Field(..., description="Feels-like temperature in Celsius")
    humidity: float = Field(..., description="Relative humidity in percent")
    wind_speed: float = Field(..., description="Wind speed")
    description: str = Field(..., description="One-line condition description")

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "CurrentWeather":
        """Build from an OpenWeatherMap ``/weather`` response."""
        main = data["main"]
        return cls(
            name=data.get("name") or "",
            temperature=main["temp"],
            feels_like=main["feels_like"],
            humidity=main["humidity"],
            wind_speed=data["wind"]["speed"],
            description=_first_description(data)
        )


class ForecastEntry(BaseModel):
    """One 3-hour forecast step."""
    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(..., description="Timezone-aware UTC time of the step")
    temperature: float = Field(..., description="Temperature in Celsius")
    description: str = Field(..., description="One-line condition description")

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "ForecastEntry":
        """Build from one element of an OpenWeatherMap forecast ``list``."""
        if "dt" in item:
            timestamp = datetime.fromtimestamp(item["dt"], tz=timezone.utc)
        else:
            # dt_txt is "YYYY-MM-DD HH:MM:SS" in UTC
            timestamp = datetime.fromisoformat(item["dt_txt"]).replace(tzinfo=timezone.utc)
        return cls(
            timestamp=timestamp,
            temperature=item["main"]["temp"],
            description=_first_description(item)
        )


class ForecastSeries(BaseModel):
    """5-day forecast at 3-hour resolution, in provider order."""
    entries: List[ForecastEntry] = Field(default_factory=list, description="Forecast steps")
    city: Optional[str] = Field(None, description="City name reported by the provider")

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ForecastSeries":
        """Build from an OpenWeatherMap ``/forecast`` response."""
        return cls(
            entries=[ForecastEntry.from_api(item) for item in data["list"]],
            city=(data.get("city") or {}).get("name")
        )


class DailyBucket(BaseModel):
    """Forecast entries falling on one calendar date."""
    day: date = Field(..., description="Calendar date in the viewer's time zone")
    entries: List[ForecastEntry] = Field(..., description="Entries in original order")

    @property
    def average_temperature(self) -> float:
        return sum(entry.temperature for entry in self.entries) / len(self.entries)

    @property
    def description(self) -> str:
        return self.entries[0].description


def _first_description(data: Dict[str, Any]) -> str:
    conditions = data.get("weather") or []
    if not conditions:
        return ""
    return conditions[0].get("description", "")
