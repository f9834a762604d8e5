"""Shared pytest fixtures for OpenWeather client tests."""

from __future__ import annotations

from typing import Any, Dict, Generator, List

import pytest


@pytest.fixture
def clean_env(monkeypatch, tmp_path) -> None:
    """Remove OpenWeather env vars and run from a directory without a .env file."""
    env_vars = [
        "OPENWEATHER_API_KEY",
        "OWM_API_KEY",
        "API_KEY",
        "OPENWEATHER_API_URL",
        "OPENWEATHER_UNITS",
        "OPENWEATHER_LANG",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings singleton between tests to ensure isolation."""
    from openweather.config import settings as settings_module

    settings_module._settings = None
    yield
    settings_module._settings = None


@pytest.fixture
def current_weather_payload() -> Dict[str, Any]:
    return {
        "coord": {"lon": -93.26, "lat": 44.98},
        "weather": [
            {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}
        ],
        "base": "stations",
        "main": {
            "temp": 282.55,
            "feels_like": 281.86,
            "temp_min": 280.37,
            "temp_max": 284.26,
            "pressure": 1023,
            "humidity": 100,
        },
        "visibility": 10000,
        "wind": {"speed": 1.5, "deg": 350},
        "clouds": {"all": 1},
        "rain": {"1h": 0.25},
        "dt": 1560350645,
        "sys": {
            "type": 1,
            "id": 5122,
            "country": "US",
            "sunrise": 1560343627,
            "sunset": 1560396563,
        },
        "timezone": -18000,
        "id": 5037649,
        "name": "Minneapolis",
        "cod": 200,
    }


@pytest.fixture
def forecast_payload() -> Dict[str, Any]:
    return {
        "cod": "200",
        "message": 0,
        "cnt": 2,
        "list": [
            {
                "dt": 1661882400,
                "main": {"temp": 296.34, "feels_like": 296.02, "pressure": 1015, "humidity": 50},
                "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10n"}],
                "clouds": {"all": 20},
                "wind": {"speed": 1.82, "deg": 268},
                "visibility": 10000,
                "pop": 0.27,
                "rain": {"3h": 0.12},
                "sys": {"pod": "n"},
                "dt_txt": "2022-08-30 18:00:00",
            },
            {
                "dt": 1661871600,
                "main": {"temp": 293.1, "pressure": 1016, "humidity": 70},
                "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01n"}],
                "clouds": {"all": 0},
                "wind": {"speed": 0.62, "deg": 349},
                "dt_txt": "2022-08-30 15:00:00",
            },
        ],
        "city": {
            "id": 3163858,
            "name": "Zocca",
            "coord": {"lat": 44.34, "lon": 10.99},
            "country": "IT",
            "population": 4593,
            "timezone": 7200,
        },
    }


@pytest.fixture
def daily_forecast_payload() -> Dict[str, Any]:
    return {
        "city": {"id": 2643743, "name": "London", "country": "GB"},
        "cod": "200",
        "message": 0.0892,
        "cnt": 1,
        "list": [
            {
                "dt": 1568977200,
                "sunrise": 1568958164,
                "sunset": 1569002733,
                "temp": {"day": 293.79, "min": 288.85, "max": 294.47, "night": 288.85, "eve": 290.44, "morn": 293.79},
                "feels_like": {"day": 278.87, "night": 282.73, "eve": 281.92, "morn": 278.87},
                "pressure": 1025.04,
                "humidity": 42,
                "weather": [{"id": 800, "main": "Clear", "description": "sky is clear", "icon": "01d"}],
                "speed": 4.66,
                "deg": 102,
                "clouds": 0,
                "pop": 0.1,
            }
        ],
    }


@pytest.fixture
def one_call_payload() -> Dict[str, Any]:
    return {
        "lat": 37.65,
        "lon": -119.04,
        "timezone": "America/Los_Angeles",
        "timezone_offset": -25200,
        "current": {
            "dt": 1595243443,
            "sunrise": 1595243663,
            "sunset": 1595296278,
            "temp": 293.28,
            "feels_like": 292.87,
            "pressure": 1016,
            "humidity": 75,
            "dew_point": 288.76,
            "uvi": 10.64,
            "clouds": 0,
            "visibility": 10000,
            "wind_speed": 2.16,
            "wind_deg": 223,
            "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01n"}],
        },
        "daily": [
            {
                "dt": 1595268000,
                "temp": {"day": 298.82, "min": 293.25, "max": 301.9},
                "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
                "rain": 2.51,
                "uvi": 9.46,
            }
        ],
    }


@pytest.fixture
def uv_payload() -> Dict[str, Any]:
    return {
        "lat": 37.75,
        "lon": -122.37,
        "date_iso": "2017-06-23T12:00:00Z",
        "date": 1498219200,
        "value": 10.16,
    }


@pytest.fixture
def uv_forecast_payload(uv_payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    second = dict(uv_payload, date=1498305600, date_iso="2017-06-24T12:00:00Z", value=9.42)
    return [uv_payload, second]
