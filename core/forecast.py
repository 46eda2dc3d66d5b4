"""Fetch current conditions for a coordinate pair from the Open-Meteo forecast API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from core.http_client import Deadline, get_json, read_float, read_int, read_object
from core.weather_codes import describe

logger = logging.getLogger(__name__)

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
CURRENT_FIELDS = "temperature_2m,apparent_temperature,windspeed_10m,weather_code"


@dataclass(frozen=True)
class Weather:
    """Current conditions in metric units (°C, km/h)."""

    temperature: float
    apparent_temperature: float
    wind_speed: float
    weather_code: int
    weather_code_description: str

    @classmethod
    def from_code(cls, *, temperature: float, apparent_temperature: float, wind_speed: float, weather_code: int) -> "Weather":
        return cls(
            temperature=temperature,
            apparent_temperature=apparent_temperature,
            wind_speed=wind_speed,
            weather_code=weather_code,
            weather_code_description=describe(weather_code),
        )


def build_forecast_params(latitude: float, longitude: float) -> dict:
    return {
        "latitude": f"{latitude:.4f}",
        "longitude": f"{longitude:.4f}",
        "current": CURRENT_FIELDS,
        "temperature_unit": "celsius",
        "windspeed_unit": "kmh",
        "timezone": "auto",
    }


def fetch_current_weather(
    latitude: float,
    longitude: float,
    *,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
    deadline: Optional[Deadline] = None,
    url: str = FORECAST_URL,
) -> Weather:
    """Return the current conditions at ``latitude``/``longitude``.

    Missing values in the ``current`` block read as zero.
    """

    params = build_forecast_params(latitude, longitude)
    payload = get_json(url, params, what="weather", session=session, timeout=timeout, deadline=deadline)

    current = read_object(payload, "current")
    weather = Weather.from_code(
        temperature=read_float(current, "temperature_2m"),
        apparent_temperature=read_float(current, "apparent_temperature"),
        wind_speed=read_float(current, "windspeed_10m"),
        weather_code=read_int(current, "weather_code"),
    )
    logger.debug("Weather at (%.4f, %.4f): %s", latitude, longitude, weather)
    return weather


__all__ = ["FORECAST_URL", "CURRENT_FIELDS", "Weather", "build_forecast_params", "fetch_current_weather"]
