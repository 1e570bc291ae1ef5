"""OpenWeather geocoding and current weather provider."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional

from .base import HttpProvider, ProviderError, epoch_or_none, first_item, is_number, mapping, number_or_none
from ..entities import CurrentWeather, GeoResult


logger = logging.getLogger(__name__)

BACKFILL_FIELDS = ("humidity", "pressure", "wind_speed", "cloud_cover", "sunrise", "sunset")


class OpenWeatherProvider(HttpProvider):
    """Integration with the OpenWeather geocoding, current and one-call endpoints."""

    name = "openweather"
    base_url = "https://api.openweathermap.org"

    def __init__(self, api_key: str, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = (base_url or self.base_url).rstrip("/")

    # Public API ---------------------------------------------------------
    def geocode(self, name: str) -> Optional[GeoResult]:
        data = self._get_json(
            f"{self.base_url}/geo/1.0/direct",
            {"q": name, "limit": 1, "appid": self.api_key},
        )
        if not isinstance(data, list) or not data:
            return None
        first = first_item(data)
        if not is_number(first.get("lat")) or not is_number(first.get("lon")):
            return None
        return GeoResult(
            name=first.get("name") or name,
            latitude=first["lat"],
            longitude=first["lon"],
            country=first.get("country"),
        )

    def current(self, latitude: float, longitude: float) -> Optional[CurrentWeather]:
        """Return the current observation, or ``None`` if the payload lacks temperature/code."""
        data = self._get_json(f"{self.base_url}/data/2.5/weather", self._coords(latitude, longitude))
        if not isinstance(data, dict):
            return None
        main = mapping(data.get("main"))
        condition = first_item(data.get("weather"))
        temperature = main.get("temp")
        code = condition.get("id")
        if not is_number(temperature) or not is_number(code):
            return None

        wind = mapping(data.get("wind"))
        clouds = mapping(data.get("clouds"))
        sys_info = mapping(data.get("sys"))
        weather = CurrentWeather(
            temperature=temperature,
            weather_code=int(code),
            source="openweather",
            description=condition.get("description"),
            feels_like=number_or_none(main.get("feels_like")),
            humidity=number_or_none(main.get("humidity")),
            wind_speed=number_or_none(wind.get("speed")),
            pressure=number_or_none(main.get("pressure")),
            cloud_cover=number_or_none(clouds.get("all")),
            sunrise=epoch_or_none(sys_info.get("sunrise")),
            sunset=epoch_or_none(sys_info.get("sunset")),
            timestamp=epoch_or_none(data.get("dt")),
        )
        if any(getattr(weather, field) is None for field in BACKFILL_FIELDS):
            weather = self._backfill(weather, latitude, longitude)
        return weather

    # Helpers ------------------------------------------------------------
    def _backfill(self, weather: CurrentWeather, latitude: float, longitude: float) -> CurrentWeather:
        try:
            data = self._get_json(f"{self.base_url}/data/3.0/onecall", self._coords(latitude, longitude))
        except ProviderError as exc:
            self._log.warning("One-call back-fill failed: %s", exc)
            return weather
        if not isinstance(data, dict):
            return weather
        current = mapping(data.get("current"))
        if not current:
            return weather

        today = first_item(data.get("daily"))
        candidates: dict[str, Any] = {
            "humidity": number_or_none(current.get("humidity")),
            "pressure": number_or_none(current.get("pressure")),
            "wind_speed": number_or_none(current.get("wind_speed")),
            "cloud_cover": number_or_none(current.get("clouds")),
            "sunrise": _first_epoch(today.get("sunrise"), current.get("sunrise")),
            "sunset": _first_epoch(today.get("sunset"), current.get("sunset")),
        }
        missing = {
            field: value
            for field, value in candidates.items()
            if getattr(weather, field) is None and value is not None
        }
        if missing:
            logger.debug("Back-filled %s from one-call", ", ".join(sorted(missing)))
        return replace(weather, **missing)

    def _coords(self, latitude: float, longitude: float) -> dict:
        return {"lat": latitude, "lon": longitude, "units": "metric", "appid": self.api_key}


def _first_epoch(*values: object) -> Optional[int]:
    for value in values:
        epoch = epoch_or_none(value)
        if epoch is not None:
            return epoch
    return None


__all__ = ["BACKFILL_FIELDS", "OpenWeatherProvider"]
