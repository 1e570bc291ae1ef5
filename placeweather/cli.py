"""Command line entry point: fetch current weather for a place or coordinates."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional, Sequence

from .config import ConfigurationError
from .services.weather import WeatherService, WeatherServiceError, get_weather_service


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="placeweather", description="Fetch current weather for a place")
    parser.add_argument("place", nargs="?", help="Place name, e.g. 'Paris'")
    parser.add_argument("--lat", type=float, help="Latitude")
    parser.add_argument("--lon", type=float, help="Longitude")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log provider activity to stderr")
    return parser


def main(argv: Optional[Sequence[str]] = None, service: Optional[WeatherService] = None) -> int:
    parser = build_parser()
    options = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if options.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not options.place and (options.lat is None or options.lon is None):
        parser.error("a place name or both --lat and --lon are required")

    try:
        service = service or get_weather_service()
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    payload: dict[str, Any] = {}
    try:
        if options.place:
            place, weather = service.weather_for(options.place)
            payload["place"] = place.to_dict()
        else:
            weather = service.fetch(options.lat, options.lon)
    except WeatherServiceError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    payload["weather"] = weather.to_dict()
    print(json.dumps(payload))
    return 0


__all__ = ["build_parser", "main"]
