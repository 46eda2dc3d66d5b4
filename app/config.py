"""Centralize defaults and environment lookups for the CLI."""

from __future__ import annotations

import logging
import os
from typing import Dict

from dotenv import load_dotenv

from core.forecast import FORECAST_URL
from core.geocoding import GEOCODING_URL
from core.http_client import DEFAULT_REQUEST_TIMEOUT
from core.lookup import DEFAULT_TOTAL_TIMEOUT

load_dotenv()

# ---------------------------------------------------------------------------
# Default configuration values
# ---------------------------------------------------------------------------
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s %(message)s"

# ---------------------------------------------------------------------------
# Environment-derived settings
# ---------------------------------------------------------------------------
def _positive_float(raw: str | None, default: float) -> float:
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def get_total_timeout(env: Dict[str, str] | None = None) -> float:
    """Return the time budget in seconds shared by the geocoding and forecast calls.

    Args:
        env: Optional mapping used instead of ``os.environ`` to simplify testing.
    """

    source = env if env is not None else os.environ
    return _positive_float(source.get("SKY_TIMEOUT"), DEFAULT_TOTAL_TIMEOUT)


def get_request_timeout(env: Dict[str, str] | None = None) -> float:
    """Return the cap in seconds applied to each individual request."""

    source = env if env is not None else os.environ
    return _positive_float(source.get("SKY_REQUEST_TIMEOUT"), DEFAULT_REQUEST_TIMEOUT)


def get_geocoding_url(env: Dict[str, str] | None = None) -> str:
    source = env if env is not None else os.environ
    return source.get("SKY_GEOCODING_URL") or GEOCODING_URL


def get_forecast_url(env: Dict[str, str] | None = None) -> str:
    source = env if env is not None else os.environ
    return source.get("SKY_FORECAST_URL") or FORECAST_URL


def get_log_level(env: Dict[str, str] | None = None) -> int:
    """Return the numeric logging level; unknown names fall back to WARNING."""

    source = env if env is not None else os.environ
    raw = (source.get("SKY_LOG_LEVEL") or _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    if isinstance(level, int):
        return level
    return logging.getLevelName(_DEFAULT_LOG_LEVEL)


def get_log_format() -> str:
    return _DEFAULT_LOG_FORMAT
