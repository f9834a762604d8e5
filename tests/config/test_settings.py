"""Tests for Pydantic settings configuration.

This module tests the configuration loading to ensure:
- Settings load from environment variables and .env files
- Alternative API key variable names are accepted
- Invalid values raise ValidationError
- The singleton is created once
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from openweather.config.settings import OpenWeatherSettings, get_settings, load_api_key
from openweather.exceptions import OpenWeatherConfigError
from openweather.parameters import Language, Settings, Unit


class TestOpenWeatherSettings:
    """Tests for OpenWeatherSettings."""

    def test_defaults(self, clean_env):
        """Without configuration every optional value is unset."""
        settings = OpenWeatherSettings()
        assert settings.api_key is None
        assert settings.api_url == "https://api.openweathermap.org/data/2.5/"
        assert settings.units is None
        assert settings.lang is None

    def test_load_from_env_vars(self, monkeypatch, clean_env):
        """Settings should load from OPENWEATHER_* environment variables."""
        monkeypatch.setenv("OPENWEATHER_API_KEY", "env-key")
        monkeypatch.setenv("OPENWEATHER_API_URL", "http://localhost:9000/owm")
        monkeypatch.setenv("OPENWEATHER_UNITS", "metric")
        monkeypatch.setenv("OPENWEATHER_LANG", "fr")

        settings = OpenWeatherSettings()

        assert settings.api_key == "env-key"
        assert settings.api_url == "http://localhost:9000/owm/"
        assert settings.units == Unit.METRIC
        assert settings.lang == Language.FRENCH
        assert settings.request_settings() == Settings(unit=Unit.METRIC, lang=Language.FRENCH)
        assert settings.client_config().base_url == "http://localhost:9000/owm/"

    @pytest.mark.parametrize("variable", ["OWM_API_KEY", "API_KEY"])
    def test_alternative_key_names(self, monkeypatch, clean_env, variable):
        """Alternative variable names are accepted for the API key."""
        monkeypatch.setenv(variable, "alt-key")
        assert OpenWeatherSettings().api_key == "alt-key"

    def test_load_from_env_file(self, clean_env, tmp_path: Path):
        """A .env file in the working directory is read."""
        (tmp_path / ".env").write_text("OPENWEATHER_API_KEY=file-key\n", encoding="utf-8")
        assert OpenWeatherSettings().api_key == "file-key"

    def test_env_overrides_env_file(self, monkeypatch, clean_env, tmp_path: Path):
        """Environment variables take precedence over .env values."""
        (tmp_path / ".env").write_text("OPENWEATHER_API_KEY=file-key\n", encoding="utf-8")
        monkeypatch.setenv("OPENWEATHER_API_KEY", "env-key")
        assert OpenWeatherSettings().api_key == "env-key"

    def test_invalid_url_raises_error(self, monkeypatch, clean_env):
        """A base URL without http(s) scheme is rejected."""
        monkeypatch.setenv("OPENWEATHER_API_URL", "ftp://example.com")
        with pytest.raises(ValidationError) as exc_info:
            OpenWeatherSettings()
        assert "http" in str(exc_info.value)

    def test_invalid_units_raises_error(self, monkeypatch, clean_env):
        monkeypatch.setenv("OPENWEATHER_UNITS", "kelvin")
        with pytest.raises(ValidationError):
            OpenWeatherSettings()


class TestGetSettings:
    def test_singleton(self, clean_env):
        assert get_settings() is get_settings()


class TestLoadApiKey:
    def test_load_from_parameter(self, clean_env):
        assert load_api_key("test-key-123") == "test-key-123"

    def test_load_from_environment(self, monkeypatch, clean_env):
        monkeypatch.setenv("OPENWEATHER_API_KEY", "env-key-456")
        assert load_api_key() == "env-key-456"

    def test_load_from_settings_object(self, clean_env):
        assert load_api_key(settings=OpenWeatherSettings(api_key="obj-key")) == "obj-key"

    def test_load_missing_raises_error(self, clean_env):
        with pytest.raises(OpenWeatherConfigError, match="Missing API key"):
            load_api_key()

    def test_explicit_empty_key_is_kept(self, monkeypatch, clean_env):
        monkeypatch.setenv("OPENWEATHER_API_KEY", "env-key")
        assert load_api_key("") == ""
