"""Run the name -> location -> weather chain under one time budget."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import requests

from core.forecast import FORECAST_URL, Weather, fetch_current_weather
from core.geocoding import GEOCODING_URL, Location, resolve_location
from core.http_client import DEFAULT_REQUEST_TIMEOUT, Deadline, get_session

logger = logging.getLogger(__name__)

DEFAULT_TOTAL_TIMEOUT = 15.0


def lookup_weather(
    city_name: str,
    *,
    total_timeout: float = DEFAULT_TOTAL_TIMEOUT,
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
    session: Optional[requests.Session] = None,
    geocoding_url: str = GEOCODING_URL,
    forecast_url: str = FORECAST_URL,
    deadline: Optional[Deadline] = None,
) -> Tuple[Location, Weather]:
    """Resolve ``city_name`` and fetch its current weather.

    Both requests share ``session`` and one :class:`Deadline` of
    ``total_timeout`` seconds. The first error aborts the chain and propagates
    unchanged, so callers get both results or none. The budget is checked
    before each request and passed down as the socket timeout; a server that
    keeps trickling bytes can still overrun it during a single call.
    """

    http = session if session is not None else get_session()
    budget = deadline if deadline is not None else Deadline(total_timeout)

    location = resolve_location(
        city_name,
        timeout=request_timeout,
        session=http,
        deadline=budget,
        url=geocoding_url,
    )
    weather = fetch_current_weather(
        location.latitude,
        location.longitude,
        timeout=request_timeout,
        session=http,
        deadline=budget,
        url=forecast_url,
    )
    logger.debug("Lookup for %r finished with %.2fs to spare", city_name, budget.remaining())
    return location, weather


__all__ = ["DEFAULT_TOTAL_TIMEOUT", "lookup_weather"]
