"""Resolve a free-text place name to coordinates via Open-Meteo geocoding."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from core.errors import DecodeError, NotFoundError
from core.http_client import Deadline, get_json, read_float, read_str

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"


@dataclass(frozen=True)
class Location:
    name: str
    latitude: float
    longitude: float
    country: str


def resolve_location(
    city_name: str,
    *,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
    deadline: Optional[Deadline] = None,
    url: str = GEOCODING_URL,
) -> Location:
    """Return the provider's first match for ``city_name``.

    Equally named places are not disambiguated; provider order wins. Fields
    missing from the match default to ``""`` / ``0.0``.

    Raises:
        ValueError: ``city_name`` is empty or whitespace.
        NotFoundError: the provider returned no results.
        RemoteStatusError, DecodeError, TransportError, RequestTimeoutError:
            see :func:`core.http_client.get_json`.
    """

    if not city_name or not city_name.strip():
        raise ValueError("city name cannot be empty")

    params = {"name": city_name, "count": 1, "language": "en", "format": "json"}
    payload = get_json(url, params, what="location", session=session, timeout=timeout, deadline=deadline)

    results = payload.get("results") or []
    if not isinstance(results, list):
        raise DecodeError("failed to parse response: 'results' is not a list")
    if not results:
        logger.info("No geocoding match for %r", city_name)
        raise NotFoundError()

    first = results[0] if results[0] is not None else {}
    if not isinstance(first, dict):
        raise DecodeError("failed to parse response: 'results' entry is not an object")

    location = Location(
        name=read_str(first, "name"),
        latitude=read_float(first, "latitude"),
        longitude=read_float(first, "longitude"),
        country=read_str(first, "country_code"),
    )
    logger.debug("Resolved %r to %s", city_name, location)
    return location


__all__ = ["GEOCODING_URL", "Location", "resolve_location"]
