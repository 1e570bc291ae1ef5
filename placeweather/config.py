"""Runtime configuration read from the process environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


class ConfigurationError(ValueError):
    """Raised when an environment variable holds an unusable value."""


def env(environ: Mapping[str, str], name: str, default: str) -> str:
    """Fetch an environment variable, treating blank values as unset."""

    value = environ.get(name, "").strip()
    return value or default


@dataclass(frozen=True)
class Settings:
    openweather_api_key: Optional[str] = None
    http_timeout: float = 10.0
    openweather_base_url: str = "https://api.openweathermap.org"
    openmeteo_base_url: str = "https://api.open-meteo.com"
    openmeteo_geocoding_url: str = "https://geocoding-api.open-meteo.com"
    testing_mode: bool = False

    @property
    def has_openweather(self) -> bool:
        return bool(self.openweather_api_key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ
        raw_timeout = env(environ, "WEATHER_HTTP_TIMEOUT", "10")
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ConfigurationError(f"WEATHER_HTTP_TIMEOUT must be a number, got {raw_timeout!r}") from exc
        if timeout <= 0:
            raise ConfigurationError("WEATHER_HTTP_TIMEOUT must be positive")

        return cls(
            openweather_api_key=env(environ, "OPENWEATHER_API_KEY", "") or None,
            http_timeout=timeout,
            openweather_base_url=env(environ, "OPENWEATHER_BASE_URL", cls.openweather_base_url),
            openmeteo_base_url=env(environ, "OPENMETEO_BASE_URL", cls.openmeteo_base_url),
            openmeteo_geocoding_url=env(environ, "OPENMETEO_GEOCODING_URL", cls.openmeteo_geocoding_url),
            testing_mode=env(environ, "TESTING_MODE", "0") == "1",
        )


__all__ = ["ConfigurationError", "Settings", "env"]
