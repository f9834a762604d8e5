"""Configuration management for the OpenWeather client."""

from __future__ import annotations

from .settings import OpenWeatherSettings, get_settings, load_api_key

__all__ = ["OpenWeatherSettings", "get_settings", "load_api_key"]
