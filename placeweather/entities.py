from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Literal, Optional

from .codes import WeatherCategory, classify


Source = Literal["openweather", "open-meteo"]


@dataclass(frozen=True)
class GeoResult:
    """Resolved place, coordinates in WGS84 decimal degrees."""

    name: str
    latitude: float
    longitude: float
    country: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CurrentWeather:
    """Normalized current observation.

    ``weather_code`` belongs to the code space of ``source``:
    - ``openweather`` uses the 2xx-8xx condition groups
    - ``open-meteo`` uses the WMO interpretation codes (0-99)

    Temperatures are Celsius, pressure hPa, and ``sunrise``/``sunset``/``timestamp``
    are Unix epoch seconds.
    """

    temperature: float
    weather_code: int
    source: Source
    description: Optional[str] = None
    feels_like: Optional[float] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None
    pressure: Optional[float] = None
    cloud_cover: Optional[float] = None
    sunrise: Optional[int] = None
    sunset: Optional[int] = None
    timestamp: Optional[int] = None

    @property
    def category(self) -> WeatherCategory:
        return classify(self.weather_code)

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["category"] = self.category
        return payload


__all__ = ["CurrentWeather", "GeoResult", "Source"]
