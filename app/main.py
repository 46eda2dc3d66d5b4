"""Command-line entry point: print the current weather for a city.

Usage:
  sky Tokyo
  sky New York --timeout 5
  sky                      # prompts for a city on stdin
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from app.config import (
    get_forecast_url,
    get_geocoding_url,
    get_log_format,
    get_log_level,
    get_request_timeout,
    get_total_timeout,
)
from core.errors import SkyError
from core.lookup import lookup_weather
from core.report import render_error, render_weather_report

logger = logging.getLogger(__name__)

PROMPT = "Enter city name: "


def configure_logging() -> None:
    logging.basicConfig(format=get_log_format(), level=get_log_level(), stream=sys.stderr)
    logging.getLogger("urllib3").setLevel(max(logging.WARNING, get_log_level()))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sky", description="Show current weather for a city.")
    parser.add_argument("city", nargs="*", help="City name; prompted for when omitted.")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Total seconds allowed for both API calls (env: SKY_TIMEOUT).",
    )
    return parser


def read_city(words: List[str], stdin: TextIO, stdout: TextIO) -> str:
    """Return the city from ``words`` or one line of ``stdin``, trimmed.

    Raises ``EOFError`` when stdin is closed before a line arrives.
    """

    if words:
        return " ".join(words).strip()
    stdout.write(PROMPT)
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise EOFError("failed to read input")
    return line.strip()


def main(
    argv: Optional[List[str]] = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        city = read_city(args.city, stdin, stdout)
    except EOFError as exc:
        stderr.write(render_error(exc))
        return 1
    if not city:
        stderr.write(render_error(ValueError("city name cannot be empty")))
        return 1

    total_timeout = args.timeout if args.timeout and args.timeout > 0 else get_total_timeout()
    try:
        location, weather = lookup_weather(
            city,
            total_timeout=total_timeout,
            request_timeout=get_request_timeout(),
            geocoding_url=get_geocoding_url(),
            forecast_url=get_forecast_url(),
        )
    except SkyError as exc:
        logger.debug("Lookup for %r failed", city, exc_info=True)
        stderr.write(render_error(exc))
        return 1

    stdout.write(render_weather_report(location, weather))
    return 0


if __name__ == "__main__":
    sys.exit(main())
