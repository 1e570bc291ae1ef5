"""Weather condition codes shared by the providers."""
from __future__ import annotations

from typing import Dict, Literal, Optional


WeatherCategory = Literal["clear", "clouds", "rain", "snow", "fog"]


OPEN_METEO_DESCRIPTIONS: Dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow",
    73: "Moderate snow",
    75: "Heavy snow",
    77: "Snow grains",
    80: "Rain showers",
    81: "Rain showers",
    82: "Violent rain showers",
    85: "Snow showers",
    86: "Snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}

_OPEN_METEO_CATEGORIES: Dict[int, WeatherCategory] = {
    **dict.fromkeys((0, 1), "clear"),
    **dict.fromkeys((2, 3), "clouds"),
    **dict.fromkeys((45, 48), "fog"),
    **dict.fromkeys((51, 53, 55, 61, 63, 65, 80, 81, 82), "rain"),
    **dict.fromkeys((71, 73, 75, 85, 86), "snow"),
}


def classify(code: int) -> WeatherCategory:
    """Map a provider weather code to a coarse display category.

    OpenWeather group ranges are checked before the Open-Meteo table since the
    two code spaces overlap numerically. Unknown codes are ``"clouds"``.
    """
    if 200 <= code < 600:
        return "rain"
    if 600 <= code < 700:
        return "snow"
    if 700 <= code < 800:
        return "fog"
    if code == 800:
        return "clear"
    if 800 < code < 900:
        return "clouds"
    return _OPEN_METEO_CATEGORIES.get(code, "clouds")


def describe_open_meteo_code(code: int) -> Optional[str]:
    return OPEN_METEO_DESCRIPTIONS.get(code)


__all__ = ["OPEN_METEO_DESCRIPTIONS", "WeatherCategory", "classify", "describe_open_meteo_code"]
