"""Error taxonomy shared by the geocoding and forecast clients.

Every failure in the lookup chain surfaces as one of these exceptions. None of
them are retried; the CLI renders ``str(exc)`` and exits non-zero.
"""

from __future__ import annotations


class SkyError(Exception):
    """Base class for every failure raised by the weather lookup chain."""


class TransportError(SkyError):
    """Connection, DNS or socket failure while talking to a remote API."""


class RequestTimeoutError(TransportError, TimeoutError):
    """The shared time budget ran out before a request completed."""


class RemoteStatusError(SkyError):
    """The remote API answered with a status other than 200."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"API returned status {status_code}")
        self.status_code = status_code


class DecodeError(SkyError):
    """Response body was not the JSON document we expected."""


class NotFoundError(SkyError):
    """Geocoding returned no match for the requested name."""

    def __init__(self, message: str = "location not found") -> None:
        super().__init__(message)


__all__ = [
    "SkyError",
    "TransportError",
    "RequestTimeoutError",
    "RemoteStatusError",
    "DecodeError",
    "NotFoundError",
]
