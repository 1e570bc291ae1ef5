from __future__ import annotations

import pytest

from requests_mock import Mocker

from placeweather.services.weather import get_weather_service


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture(autouse=True)
def _quiet_environment(monkeypatch):
    for name in (
        "OPENWEATHER_API_KEY",
        "OPENWEATHER_BASE_URL",
        "OPENMETEO_BASE_URL",
        "OPENMETEO_GEOCODING_URL",
        "WEATHER_HTTP_TIMEOUT",
        "TESTING_MODE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_weather_service.cache_clear()
    yield
    get_weather_service.cache_clear()
