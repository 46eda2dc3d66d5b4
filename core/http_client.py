"""Shared HTTP plumbing for the Open-Meteo clients.

Both clients go through :func:`get_json`, which owns the error mapping:
transport failures, non-200 statuses and undecodable bodies each become a
distinct :mod:`core.errors` exception. A :class:`Deadline` lets the CLI spend
one time budget across the geocoding call and the forecast call.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Mapping, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from core.errors import DecodeError, RemoteStatusError, RequestTimeoutError, TransportError

logger = logging.getLogger(__name__)

USER_AGENT = "sky-cli/0.1.0"
DEFAULT_REQUEST_TIMEOUT = 10.0


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------
def build_session() -> requests.Session:
    """Return a session that never retries on its own."""

    session = requests.Session()
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    })
    # read=False re-raises ReadTimeoutError so requests reports it as ReadTimeout
    no_retry = Retry(total=0, read=False, raise_on_status=False)
    session.mount("https://", HTTPAdapter(max_retries=no_retry))
    session.mount("http://", HTTPAdapter(max_retries=no_retry))
    return session


_session = build_session()


def get_session() -> requests.Session:
    return _session


# ---------------------------------------------------------------------------
# Time budget
# ---------------------------------------------------------------------------
class Deadline:
    """Wall-clock budget shared by every request in one lookup."""

    def __init__(self, budget: float, *, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._expires_at = clock() + budget

    def remaining(self) -> float:
        return max(0.0, self._expires_at - self._clock())

    def request_timeout(self, cap: float) -> float:
        """Return the timeout for the next request, or raise once the budget is spent."""

        remaining = self.remaining()
        if remaining <= 0.0:
            raise RequestTimeoutError("deadline exceeded")
        return min(remaining, cap)


# ---------------------------------------------------------------------------
# JSON GET
# ---------------------------------------------------------------------------
def get_json(
    url: str,
    params: Mapping[str, Any],
    *,
    what: str,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
    deadline: Optional[Deadline] = None,
) -> Dict[str, Any]:
    """GET ``url`` and return the decoded JSON object.

    Args:
        url: Endpoint to call.
        params: Query parameters, encoded by ``requests``.
        what: Noun used in transport error messages ("location", "weather").
        session: Session to send through; defaults to the module session.
        timeout: Per-request cap in seconds.
        deadline: Optional shared budget; the effective timeout never exceeds it.

    Raises:
        RequestTimeoutError: the budget ran out or the request timed out.
        TransportError: connection, DNS or I/O failure.
        RemoteStatusError: any status other than 200.
        DecodeError: the body is not a JSON object.
    """

    http = session if session is not None else get_session()
    cap = timeout if timeout is not None else DEFAULT_REQUEST_TIMEOUT
    effective = deadline.request_timeout(cap) if deadline is not None else cap

    logger.debug("GET %s params=%s timeout=%.2fs", url, dict(params), effective)
    try:
        response = http.get(url, params=params, timeout=effective)
    except requests.Timeout as exc:
        logger.warning("Request for %s timed out after %.2fs", what, effective)
        raise RequestTimeoutError(f"failed to fetch {what}: request timed out") from exc
    except requests.RequestException as exc:
        logger.warning("Request for %s failed: %s", what, exc)
        raise TransportError(f"failed to fetch {what}: {exc}") from exc

    if response.status_code != 200:
        logger.warning("Request for %s returned HTTP %s", what, response.status_code)
        raise RemoteStatusError(response.status_code)

    try:
        payload = response.json()
    except ValueError as exc:
        raise DecodeError(f"failed to parse response: {exc}") from exc
    if not isinstance(payload, dict):
        raise DecodeError("failed to parse response: expected a JSON object")
    return payload


# ---------------------------------------------------------------------------
# Tolerant field readers (missing or null -> zero value)
# ---------------------------------------------------------------------------
def read_object(record: Mapping[str, Any], key: str) -> Dict[str, Any]:
    value = record.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DecodeError(f"failed to parse response: '{key}' is not an object")
    return value


def read_str(record: Mapping[str, Any], key: str) -> str:
    value = record.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"failed to parse response: '{key}' is not a string")
    return value


def read_float(record: Mapping[str, Any], key: str) -> float:
    value = record.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"failed to parse response: '{key}' is not a number")
    return float(value)


def read_int(record: Mapping[str, Any], key: str) -> int:
    value = record.get(key)
    if value is None:
        return 0
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"failed to parse response: '{key}' is not an integer")
    return value


__all__ = [
    "USER_AGENT",
    "DEFAULT_REQUEST_TIMEOUT",
    "Deadline",
    "build_session",
    "get_session",
    "get_json",
    "read_object",
    "read_str",
    "read_float",
    "read_int",
]
