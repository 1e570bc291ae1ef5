"""Current weather for a named place, via OpenWeather with an Open-Meteo fallback."""
from __future__ import annotations

from .codes import WeatherCategory, classify, describe_open_meteo_code
from .config import Settings
from .entities import CurrentWeather, GeoResult
from .services.weather import (
    PlaceNotFound,
    WeatherNotAvailable,
    WeatherService,
    WeatherServiceError,
    get_weather_service,
)

__version__ = "0.1.0"

__all__ = [
    "CurrentWeather",
    "GeoResult",
    "PlaceNotFound",
    "Settings",
    "WeatherCategory",
    "WeatherNotAvailable",
    "WeatherService",
    "WeatherServiceError",
    "classify",
    "describe_open_meteo_code",
    "get_weather_service",
]
