"""Flatten OpenWeather response models into rows and pandas DataFrames.

Each helper produces one row per list entry with nested blocks expanded into
flat columns. Epoch fields are converted to timezone-aware UTC timestamps in
the ``time`` column.

Requires pandas, installed with the ``frames`` extra.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Union

import pandas as pd

from .models import (
    City,
    ForecastEntry,
    ForecastUvIndex,
    HistoricalUvIndex,
    Precipitation,
    Weather,
    WeatherReport16Day,
    WeatherReport5Day,
    WeatherReportHistorical,
)


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _first_weather(conditions: List[Weather]) -> Dict[str, Any]:
    """Main/description of the primary condition (the API lists it first)."""
    if not conditions:
        return {"weather_main": None, "weather_description": None}
    return {
        "weather_main": conditions[0].main,
        "weather_description": conditions[0].description,
    }


def _volume(precipitation: Optional[Precipitation]) -> Optional[float]:
    if precipitation is None:
        return None
    if precipitation.three_hour is not None:
        return precipitation.three_hour
    return precipitation.one_hour


def _city_columns(city: Optional[City]) -> Dict[str, Any]:
    if city is None:
        return {}
    return {"city_id": city.id, "city_name": city.name, "country": city.country}


def _to_dataframe(rows: List[Dict[str, Any]]) -> pd.DataFrame:
    dataframe = pd.DataFrame(rows)
    if dataframe.empty:
        return dataframe
    dataframe["time"] = pd.to_datetime(dataframe["time"], unit="s", utc=True)
    return dataframe.sort_values("time").reset_index(drop=True)


# ─────────────────────────────────────────────────────────────────────────────
# Row builders
# ─────────────────────────────────────────────────────────────────────────────

def flatten_entries(
    entries: Iterable[ForecastEntry], city: Optional[City] = None
) -> List[Dict[str, Any]]:
    """Flatten 3-hour forecast or hourly history entries."""
    rows: List[Dict[str, Any]] = []
    for entry in entries:
        row: Dict[str, Any] = {
            **_city_columns(city),
            "time": entry.dt,
            "temp": entry.main.temp,
            "feels_like": entry.main.feels_like,
            "temp_min": entry.main.temp_min,
            "temp_max": entry.main.temp_max,
            "pressure": entry.main.pressure,
            "humidity": entry.main.humidity,
            **_first_weather(entry.weather),
            "clouds": entry.clouds.all if entry.clouds else None,
            "wind_speed": entry.wind.speed if entry.wind else None,
            "wind_deg": entry.wind.deg if entry.wind else None,
            "pop": entry.pop,
            "rain": _volume(entry.rain),
            "snow": _volume(entry.snow),
        }
        rows.append(row)
    return rows


def flatten_daily(report: WeatherReport16Day) -> List[Dict[str, Any]]:
    """Flatten the daily entries of a 16-day forecast."""
    rows: List[Dict[str, Any]] = []
    for entry in report.entries:
        rows.append(
            {
                **_city_columns(report.city),
                "time": entry.dt,
                "temp_day": entry.temp.day,
                "temp_min": entry.temp.min,
                "temp_max": entry.temp.max,
                "temp_night": entry.temp.night,
                "pressure": entry.pressure,
                "humidity": entry.humidity,
                **_first_weather(entry.weather),
                "wind_speed": entry.speed,
                "wind_deg": entry.deg,
                "clouds": entry.clouds,
                "pop": entry.pop,
                "rain": entry.rain,
                "snow": entry.snow,
            }
        )
    return rows


# ─────────────────────────────────────────────────────────────────────────────
# DataFrames
# ─────────────────────────────────────────────────────────────────────────────

def forecast_to_dataframe(report: WeatherReport5Day) -> pd.DataFrame:
    """One row per 3-hour step of a 5-day forecast."""
    return _to_dataframe(flatten_entries(report.entries, report.city))


def daily_forecast_to_dataframe(report: WeatherReport16Day) -> pd.DataFrame:
    """One row per day of a 16-day forecast."""
    return _to_dataframe(flatten_daily(report))


def historical_to_dataframe(report: WeatherReportHistorical) -> pd.DataFrame:
    """One row per hour of city history."""
    dataframe = _to_dataframe(flatten_entries(report.entries))
    if not dataframe.empty:
        dataframe.insert(0, "city_id", report.city_id)
    return dataframe


def uv_index_to_dataframe(report: Union[ForecastUvIndex, HistoricalUvIndex]) -> pd.DataFrame:
    """One row per UV index reading."""
    rows = [
        {"time": item.date, "lat": item.lat, "lon": item.lon, "uv_index": item.value}
        for item in report
    ]
    return _to_dataframe(rows)


__all__ = [
    "flatten_entries",
    "flatten_daily",
    "forecast_to_dataframe",
    "daily_forecast_to_dataframe",
    "historical_to_dataframe",
    "uv_index_to_dataframe",
]
