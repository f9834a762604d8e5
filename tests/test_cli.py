from __future__ import annotations
import json
from unittest.mock import MagicMock, patch
import pytest
from openweather.cli import build_parser, location_from_args, run_cli
from openweather.exceptions import OpenWeatherAPIError
from openweather.location import CityAndCountryName, CityName, GeoCoordinates, ZipCode
from openweather.models import ErrorReport, WeatherReportCurrent
from openweather.parameters import Language, Settings, Unit


def _args(*argv: str):
    return build_parser().parse_args(["current", *argv])


class TestLocationFromArgs:
    def test_city(self):
        assert location_from_args(_args("--city", "Oslo")) == CityName("Oslo")

    def test_city_and_country(self):
        location = location_from_args(_args("--city", "Minneapolis", "--country", "USA"))
        assert location == CityAndCountryName("Minneapolis", "USA")

    def test_coordinates(self):
        location = location_from_args(_args("--lat", "44.98", "--lon", "-93.26"))
        assert location == GeoCoordinates(lat=44.98, lon=-93.26)

    def test_zip(self):
        location = location_from_args(_args("--zip", "55401", "--country", "us"))
        assert location == ZipCode("55401", "us")

    def test_zip_requires_country(self):
        with pytest.raises(ValueError, match="--zip requires --country"):
            location_from_args(_args("--zip", "55401"))

    def test_lat_requires_lon(self):
        with pytest.raises(ValueError, match="--lat and --lon"):
            location_from_args(_args("--lat", "44.98"))

    def test_exactly_one_location(self):
        with pytest.raises(ValueError, match="exactly one location"):
            location_from_args(_args())
        with pytest.raises(ValueError, match="exactly one location"):
            location_from_args(_args("--city", "Oslo", "--city-id", "3143244"))


@patch("openweather.cli.configure_logging")
class TestRunCli:
    def test_current_prints_json(self, _logging, clean_env, capsys, current_weather_payload):
        report = WeatherReportCurrent.model_validate(current_weather_payload)
        with patch("openweather.cli.OpenWeatherClient") as mock_cls:
            client = mock_cls.return_value.__enter__.return_value
            client.get_current_weather.return_value = report

            code = run_cli(["current", "--city", "Minneapolis", "--api-key", "k", "--units", "metric"])

        assert code == 0
        assert mock_cls.call_args.kwargs["api_key"] == "k"
        client.get_current_weather.assert_called_once_with(
            CityName("Minneapolis"), Settings(unit=Unit.METRIC)
        )
        output = json.loads(capsys.readouterr().out)
        assert output["name"] == "Minneapolis"
        assert output["rain"] == {"1h": 0.25, "3h": None}

    def test_daily_uses_days(self, _logging, clean_env, monkeypatch):
        monkeypatch.setenv("OPENWEATHER_LANG", "de")
        with patch("openweather.cli.OpenWeatherClient") as mock_cls:
            client = mock_cls.return_value.__enter__.return_value
            client.get_16_day_forecast.return_value = MagicMock(
                model_dump_json=MagicMock(return_value="{}")
            )
            code = run_cli(["daily", "--city-id", "2643743", "--days", "3", "--api-key", "k"])

        assert code == 0
        args = client.get_16_day_forecast.call_args.args
        assert args[1] == 3
        assert args[2] == Settings(lang=Language.GERMAN)

    def test_api_error_returns_one(self, _logging, clean_env):
        error = OpenWeatherAPIError(ErrorReport(code="401", message="Invalid API key."))
        with patch("openweather.cli.OpenWeatherClient") as mock_cls:
            mock_cls.return_value.__enter__.return_value.get_current_uv_index.side_effect = error
            code = run_cli(["uvi", "--city", "Oslo", "--api-key", "bad"])
        assert code == 1

    def test_missing_api_key_returns_one(self, _logging, clean_env):
        assert run_cli(["current", "--city", "Oslo"]) == 1

    def test_invalid_configuration_returns_one(self, _logging, clean_env, monkeypatch):
        monkeypatch.setenv("OPENWEATHER_UNITS", "kelvin")
        with patch("openweather.cli.OpenWeatherClient") as mock_cls:
            code = run_cli(["current", "--city", "Oslo", "--api-key", "k"])
        assert code == 1
        mock_cls.assert_not_called()

    def test_missing_location_exits(self, _logging, clean_env):
        with pytest.raises(SystemExit):
            run_cli(["current"])


class TestColoredFormatter:
    def test_plain_format(self):
        import logging
        from openweather.logging_config import ColoredFormatter

        record = logging.LogRecord("openweather.client", logging.ERROR, __file__, 1, "bad %s", ("key",), None)
        assert ColoredFormatter(use_color=False).format(record) == "[ERROR] openweather.client - bad key"

    def test_colored_format_keeps_message(self):
        import logging
        from openweather.logging_config import ColoredFormatter, LogColors

        record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)
        formatted = ColoredFormatter(use_color=True).format(record)
        assert formatted.startswith(LogColors.INFO)
        assert formatted.endswith(" - hello")
