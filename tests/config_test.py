from __future__ import annotations

import pytest

from placeweather.config import ConfigurationError, Settings


def test_defaults_without_environment():
    settings = Settings.from_env({})

    assert settings.openweather_api_key is None
    assert not settings.has_openweather
    assert settings.http_timeout == 10.0
    assert settings.openmeteo_base_url == "https://api.open-meteo.com"


def test_reads_values_from_environment():
    settings = Settings.from_env(
        {
            "OPENWEATHER_API_KEY": "abc",
            "WEATHER_HTTP_TIMEOUT": "2.5",
            "OPENMETEO_GEOCODING_URL": "https://geo.local",
        }
    )

    assert settings.has_openweather
    assert settings.http_timeout == 2.5
    assert settings.openmeteo_geocoding_url == "https://geo.local"


def test_blank_api_key_is_absent():
    assert Settings.from_env({"OPENWEATHER_API_KEY": "   "}).openweather_api_key is None


def test_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv("OPENWEATHER_API_KEY", "from-env")

    assert Settings.from_env().openweather_api_key == "from-env"


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_invalid_timeout(value):
    with pytest.raises(ConfigurationError):
        Settings.from_env({"WEATHER_HTTP_TIMEOUT": value})


def test_testing_mode_flag():
    assert Settings.from_env({"TESTING_MODE": "1"}).testing_mode
    assert not Settings.from_env({"TESTING_MODE": "0"}).testing_mode
    assert not Settings.from_env({}).testing_mode
