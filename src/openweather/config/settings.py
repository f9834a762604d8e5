"""Centralized configuration management using Pydantic Settings.

Configuration is read from environment variables and an optional ``.env``
file in the working directory.

Example:
    >>> from openweather.config import get_settings
    >>> print(get_settings().api_url)
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import API_BASE
from ..exceptions import OpenWeatherConfigError
from ..models import ClientConfig
from ..parameters import Language, Settings, Unit

LOGGER = logging.getLogger(__name__)


class OpenWeatherSettings(BaseSettings):
    """Settings for the OpenWeather client.

    Example .env file:
        OPENWEATHER_API_KEY=your_api_key
        OPENWEATHER_UNITS=metric
        OPENWEATHER_LANG=en
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("OPENWEATHER_API_KEY", "OWM_API_KEY", "API_KEY"),
        description="OpenWeather API key",
    )
    api_url: str = Field(
        default=API_BASE,
        validation_alias=AliasChoices("OPENWEATHER_API_URL"),
        description="OpenWeather API base URL",
    )
    units: Optional[Unit] = Field(
        default=None,
        validation_alias=AliasChoices("OPENWEATHER_UNITS"),
        description="Default unit system (standard, metric, imperial)",
    )
    lang: Optional[Language] = Field(
        default=None,
        validation_alias=AliasChoices("OPENWEATHER_LANG"),
        description="Default language code",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Ensure the base URL starts with http:// or https://."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("OpenWeather API URL must start with http:// or https://")
        return v.rstrip("/") + "/"

    def client_config(self) -> ClientConfig:
        """Build the client configuration from these settings."""
        return ClientConfig(base_url=self.api_url)

    def request_settings(self) -> Settings:
        """Default unit/language settings for requests."""
        return Settings(unit=self.units, lang=self.lang)


# Lazy initialization - only create settings when accessed
_settings: Optional[OpenWeatherSettings] = None
_settings_lock = threading.Lock()


def get_settings() -> OpenWeatherSettings:
    """Get or create the settings singleton (thread-safe).

    Returns:
        OpenWeatherSettings loaded from environment variables/.env file.

    Raises:
        ValidationError: If a configured value is invalid.
    """
    global _settings

    if _settings is not None:
        return _settings

    with _settings_lock:
        if _settings is None:
            LOGGER.debug("Initializing OpenWeather settings from environment and .env file")
            try:
                _settings = OpenWeatherSettings()
            except ValidationError as e:
                LOGGER.error("Configuration validation failed: %s", e)
                raise

    return _settings


def load_api_key(
    api_key: Optional[str] = None, settings: Optional[OpenWeatherSettings] = None
) -> str:
    """Resolve the API key from the argument, the environment or a .env file.

    Raises:
        OpenWeatherConfigError: If no key is available.
    """
    if api_key is not None:
        return api_key
    settings = settings or OpenWeatherSettings()
    if settings.api_key:
        return settings.api_key
    raise OpenWeatherConfigError(
        "Missing API key. Provide via parameter, OPENWEATHER_API_KEY environment variable, or .env file."
    )


__all__ = ["OpenWeatherSettings", "get_settings", "load_api_key"]
