"""Weather service that resolves places and fetches weather with provider fallback."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Callable, List, Optional, Tuple, TypeVar

import requests

from ..config import Settings
from ..entities import CurrentWeather, GeoResult
from ..providers.base import ProviderError, QuotaExceeded, RequestConfig
from ..providers.openmeteo import OpenMeteoProvider
from ..providers.openweather import OpenWeatherProvider

T = TypeVar("T")


class WeatherServiceError(RuntimeError):
    """Raised when no provider can satisfy a request."""


class PlaceNotFound(WeatherServiceError):
    """No provider returned a match for the place name."""


class WeatherNotAvailable(WeatherServiceError):
    """No provider returned usable current weather."""


class WeatherService:
    """Try the credentialed provider first (when configured), then the keyless one."""

    def __init__(
        self,
        *,
        fallback_provider: OpenMeteoProvider,
        primary_provider: Optional[OpenWeatherProvider] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.primary = primary_provider
        self.fallback = fallback_provider
        self._log = logger or logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_settings(cls, settings: Settings, session: Optional[requests.Session] = None) -> "WeatherService":
        request_config = RequestConfig(timeout=settings.http_timeout)
        primary = None
        if settings.has_openweather:
            primary = OpenWeatherProvider(
                api_key=settings.openweather_api_key,
                base_url=settings.openweather_base_url,
                session=session,
                request_config=request_config,
                testing_mode=settings.testing_mode,
            )
        fallback = OpenMeteoProvider(
            base_url=settings.openmeteo_base_url,
            geocoding_url=settings.openmeteo_geocoding_url,
            session=session,
            request_config=request_config,
            testing_mode=settings.testing_mode,
        )
        return cls(primary_provider=primary, fallback_provider=fallback)

    # Public API ---------------------------------------------------------
    @property
    def providers(self) -> List:
        return [provider for provider in (self.primary, self.fallback) if provider is not None]

    def resolve(self, name: str) -> GeoResult:
        result, error = self._first_success(lambda provider: provider.geocode(name))
        if result is None:
            raise PlaceNotFound(f"No place found for {name!r}") from error
        return result

    def fetch(self, latitude: float, longitude: float) -> CurrentWeather:
        result, error = self._first_success(lambda provider: provider.current(latitude, longitude))
        if result is None:
            raise WeatherNotAvailable(f"No weather available for {latitude:.4f},{longitude:.4f}") from error
        return result

    def weather_for(self, name: str) -> Tuple[GeoResult, CurrentWeather]:
        place = self.resolve(name)
        return place, self.fetch(place.latitude, place.longitude)

    # Helpers ------------------------------------------------------------
    def _first_success(self, attempt: Callable[..., Optional[T]]) -> Tuple[Optional[T], Optional[Exception]]:
        error: Optional[Exception] = None
        for provider in self.providers:
            try:
                result = attempt(provider)
            except QuotaExceeded as exc:
                self._log.warning("Provider %s quota exceeded", provider.name)
                error = exc
                continue
            except ProviderError as exc:
                self._log.warning("Provider %s failed: %s", provider.name, exc)
                error = exc
                continue
            if result is not None:
                return result, None
            self._log.info("Provider %s returned no usable data", provider.name)
        return None, error


@lru_cache(maxsize=1)
def get_weather_service() -> WeatherService:
    return WeatherService.from_settings(Settings.from_env())


__all__ = [
    "PlaceNotFound",
    "WeatherNotAvailable",
    "WeatherService",
    "WeatherServiceError",
    "get_weather_service",
]
