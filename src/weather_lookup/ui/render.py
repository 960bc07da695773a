"""Text presentation of the weather view."""

from datetime import datetime, tzinfo
from typing import List, Optional

from weather_lookup.ui.state import WeatherState


def render_state(state: WeatherState, tz: Optional[tzinfo] = None, now: Optional[datetime] = None) -> str:
    """Render the state as the weather card, day cards and hourly strip.

    Args:
        state: State to render
        tz: Viewer's time zone (local system zone if None)
        now: Current time shown in the header (defaults to now)

    Returns:
        Multi-line text
    """
    if state.loading:
        return "Loading..."

    lines: List[str] = []
    if state.error:
        lines.append(f"Error: {state.error}")

    weather = state.weather
    if weather is None:
        return "\n".join(lines) or "No weather data"

    now = (now or datetime.now(tz)).astimezone(tz)
    lines.append(f"{weather.name or 'Location'}  {now:%Y-%m-%d %H:%M}")
    lines.append(f"{weather.temperature}°  {weather.description.capitalize()}")
    lines.append(f"Wind: {weather.wind_speed} m/s  Humidity: {weather.humidity}%  Feels like: {weather.feels_like}°C")

    buckets = state.daily_buckets(tz)
    if buckets:
        lines.append("")
        lines.append("  ".join(
            f"{bucket.day:%a} {round(bucket.average_temperature)}° {bucket.description}"
            for bucket in buckets
        ))

    hourly = state.hourly_forecast()
    if hourly:
        lines.append("")
        lines.append("Hourly Forecast")
        for entry in hourly:
            lines.append(f"  {entry.timestamp.astimezone(tz):%H:%M}  {round(entry.temperature)}°  {entry.description}")

    return "\n".join(lines)
