"""Plain-text rendering for the CLI."""

from __future__ import annotations

from core.forecast import Weather
from core.geocoding import Location
from core.weather_codes import emoji


def render_weather_report(location: Location, weather: Weather) -> str:
    """Create the four-line weather summary printed on success."""

    return (
        f"{location.name}, {location.country}\n"
        f"{weather.weather_code_description} {emoji(weather.weather_code)}\n"
        f"Temp: {weather.temperature:.1f}°C\n"
        f"Feels like: {weather.apparent_temperature:.1f}°C\n"
    )


def render_error(err: BaseException) -> str:
    return f"Error: {err}\n"


__all__ = ["render_weather_report", "render_error"]
