from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

from .base import HttpProvider, first_item, is_number, mapping, number_or_none
from ..codes import describe_open_meteo_code
from ..entities import CurrentWeather, GeoResult


CURRENT_VARIABLES = [
    "temperature_2m",
    "weather_code",
    "relative_humidity_2m",
    "wind_speed_10m",
    "apparent_temperature",
    "cloud_cover",
]


class OpenMeteoProvider(HttpProvider):
    """Keyless Open-Meteo forecast and geocoding integration."""

    name = "open-meteo"
    base_url = "https://api.open-meteo.com"
    geocoding_url = "https://geocoding-api.open-meteo.com"

    def __init__(self, base_url: Optional[str] = None, geocoding_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = (base_url or self.base_url).rstrip("/")
        self.geocoding_url = (geocoding_url or self.geocoding_url).rstrip("/")

    def geocode(self, name: str) -> Optional[GeoResult]:
        data = self._get_json(f"{self.geocoding_url}/v1/search", {"name": name, "count": 1})
        if not isinstance(data, dict):
            return None
        first = first_item(data.get("results"))
        if not is_number(first.get("latitude")) or not is_number(first.get("longitude")):
            return None
        return GeoResult(
            name=first.get("name") or name,
            latitude=first["latitude"],
            longitude=first["longitude"],
            country=first.get("country"),
        )

    def current(self, latitude: float, longitude: float) -> Optional[CurrentWeather]:
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(CURRENT_VARIABLES),
            "daily": "sunrise,sunset",
            "hourly": "pressure_msl,surface_pressure",
            "forecast_days": 1,
            "timezone": "auto",
        }
        data = self._get_json(f"{self.base_url}/v1/forecast", params)
        current = data.get("current") if isinstance(data, dict) else None
        if not isinstance(current, dict):
            self._log.error("Response is missing the current block")
            return None
        temperature = current.get("temperature_2m")
        code = current.get("weather_code")
        if not is_number(temperature) or not is_number(code):
            self._log.error("Current block lacks temperature or weather code")
            return None

        # timezone=auto returns local wall-clock times without an offset
        offset = _utc_offset(data.get("utc_offset_seconds"))
        daily = mapping(data.get("daily"))
        hourly = mapping(data.get("hourly"))
        timestamp = _to_epoch(current.get("time"), offset)

        return CurrentWeather(
            temperature=temperature,
            weather_code=int(code),
            source="open-meteo",
            description=describe_open_meteo_code(int(code)),
            feels_like=number_or_none(current.get("apparent_temperature")),
            humidity=number_or_none(current.get("relative_humidity_2m")),
            wind_speed=number_or_none(current.get("wind_speed_10m")),
            pressure=self._pressure(hourly, timestamp, offset),
            cloud_cover=number_or_none(current.get("cloud_cover")),
            sunrise=_to_epoch(_first(daily.get("sunrise")), offset),
            sunset=_to_epoch(_first(daily.get("sunset")), offset),
            timestamp=timestamp,
        )

    # helpers ------------------------------------------------------------
    def _pressure(self, hourly: dict, timestamp: Optional[int], offset: timezone) -> Optional[float]:
        times = hourly.get("time")
        if not isinstance(times, list) or not times:
            return None
        if timestamp is None:
            index = 0
        else:
            index = nearest_index([_to_epoch(value, offset) for value in times], timestamp)
        if index is None:
            return None
        pressure = _safe_index(hourly.get("pressure_msl"), index)
        if pressure is None:
            pressure = _safe_index(hourly.get("surface_pressure"), index)
        return pressure


def nearest_index(epochs: Sequence[Optional[int]], target: int) -> Optional[int]:
    """Index of the epoch closest to ``target``; the earliest wins on ties."""
    best: Optional[int] = None
    best_delta: Optional[int] = None
    for idx, epoch in enumerate(epochs):
        if epoch is None:
            continue
        delta = abs(epoch - target)
        if best_delta is None or delta < best_delta:
            best, best_delta = idx, delta
    return best


def _utc_offset(value: object) -> timezone:
    if is_number(value) and abs(value) < 86400:  # type: ignore[operator]
        return timezone(timedelta(seconds=int(value)))  # type: ignore[arg-type]
    return timezone.utc


def _to_epoch(value: Optional[str], tz: timezone) -> Optional[int]:
    if not isinstance(value, str) or not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return int(parsed.timestamp())


def _first(values: object) -> Optional[str]:
    if isinstance(values, list) and values:
        return values[0]
    return None


def _safe_index(values: Optional[List[Optional[float]]], index: int) -> Optional[float]:
    try:
        value = values[index]  # type: ignore[index]
    except (IndexError, KeyError, TypeError):
        return None
    return number_or_none(value)


__all__ = ["CURRENT_VARIABLES", "OpenMeteoProvider", "nearest_index"]
