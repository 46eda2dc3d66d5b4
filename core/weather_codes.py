"""WMO weather code lookups.

Open-Meteo reports conditions as WMO codes (https://open-meteo.com/en/docs).
Both helpers are total: codes outside the table get a generic fallback.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

UNKNOWN_DESCRIPTION = "Unknown"
UNKNOWN_EMOJI = "🌡️"

DESCRIPTIONS: Mapping[int, str] = MappingProxyType({
    0: "Clear",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Slight snow",
    73: "Moderate snow",
    75: "Heavy snow",
    77: "Snow grains",
    80: "Slight showers",
    81: "Moderate showers",
    82: "Violent showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with hail",
    99: "Thunderstorm with heavy hail",
})

EMOJIS: Mapping[int, str] = MappingProxyType({
    0: "☀️",
    1: "🌤️",
    2: "⛅",
    3: "☁️",
    45: "🌫️",
    48: "🌫️",
    51: "🌧️",
    53: "🌧️",
    55: "🌧️",
    61: "🌧️",
    63: "🌧️",
    65: "🌧️",
    71: "🌨️",
    73: "🌨️",
    75: "❄️",
    77: "🌨️",
    80: "🌦️",
    81: "🌦️",
    82: "🌧️",
    85: "🌨️",
    86: "🌨️",
    95: "⛈️",
    96: "⛈️",
    99: "⛈️",
})


def describe(code: int) -> str:
    return DESCRIPTIONS.get(code, UNKNOWN_DESCRIPTION)


def emoji(code: int) -> str:
    return EMOJIS.get(code, UNKNOWN_EMOJI)


__all__ = ["DESCRIPTIONS", "EMOJIS", "UNKNOWN_DESCRIPTION", "UNKNOWN_EMOJI", "describe", "emoji"]
