#!/usr/bin/env python3
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional
from pydantic import BaseModel, ValidationError
from openweather.client import OpenWeatherClient
from openweather.config.settings import get_settings
from openweather.exceptions import OpenWeatherError
from openweather.location import (
    CityAndCountryName,
    CityId,
    CityName,
    GeoCoordinates,
    LocationSpecifier,
    ZipCode,
)
from openweather.logging_config import configure_logging
from openweather.parameters import Language, Settings, Unit

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser for the openweather CLI."""
    parser = argparse.ArgumentParser(
        description="Query the OpenWeather API and print the response as JSON."
    )
    parser.add_argument(
        "report",
        choices=["current", "forecast", "daily", "uvi"],
        help="Which report to fetch",
    )
    parser.add_argument("--city", help="City name")
    parser.add_argument("--country", help="Country name or code (with --city or --zip)")
    parser.add_argument("--lat", type=float, help="Latitude (with --lon)")
    parser.add_argument("--lon", type=float, help="Longitude (with --lat)")
    parser.add_argument("--city-id", help="OpenWeather city ID")
    parser.add_argument("--zip", help="Zip code (requires --country)")
    parser.add_argument(
        "--days",
        type=int,
        default=7,
        help="Number of days for the daily forecast (default: 7)",
    )
    parser.add_argument(
        "--units",
        choices=[unit.value for unit in Unit],
        help="Unit system (default: API default or OPENWEATHER_UNITS)",
    )
    parser.add_argument(
        "--lang",
        choices=[lang.value for lang in Language],
        help="Language code (default: API default or OPENWEATHER_LANG)",
    )
    parser.add_argument("--api-key", help="Override API key")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def location_from_args(args: argparse.Namespace) -> LocationSpecifier:
    """Resolve exactly one location specifier from the parsed arguments."""
    candidates: List[LocationSpecifier] = []
    if args.city:
        if args.country and not args.zip:
            candidates.append(CityAndCountryName(city=args.city, country=args.country))
        else:
            candidates.append(CityName(city=args.city))
    if args.lat is not None or args.lon is not None:
        if args.lat is None or args.lon is None:
            raise ValueError("Both --lat and --lon must be provided together.")
        candidates.append(GeoCoordinates(lat=args.lat, lon=args.lon))
    if args.city_id:
        candidates.append(CityId(id=args.city_id))
    if args.zip:
        if not args.country:
            raise ValueError("--zip requires --country.")
        candidates.append(ZipCode(zip=args.zip, country=args.country))

    if len(candidates) != 1:
        raise ValueError("Specify exactly one location: --city, --lat/--lon, --city-id or --zip.")
    return candidates[0]


def run_cli(argv: Optional[List[str]] = None) -> int:
    """Execute CLI with given arguments.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        location = location_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        app_settings = get_settings()
    except ValidationError as exc:
        LOGGER.error("Invalid OpenWeather configuration: %s", exc)
        return 1
    defaults = app_settings.request_settings()
    settings = Settings(
        unit=Unit(args.units) if args.units else defaults.unit,
        lang=Language(args.lang) if args.lang else defaults.lang,
    )

    try:
        with OpenWeatherClient(
            api_key=args.api_key or app_settings.api_key,
            config=app_settings.client_config(),
        ) as client:
            report: BaseModel
            if args.report == "current":
                report = client.get_current_weather(location, settings)
            elif args.report == "forecast":
                report = client.get_5_day_forecast(location, settings)
            elif args.report == "daily":
                report = client.get_16_day_forecast(location, args.days, settings)
            else:
                report = client.get_current_uv_index(location, settings)
    except OpenWeatherError as exc:
        LOGGER.error("%s", exc)
        return 1

    sys.stdout.write(report.model_dump_json(by_alias=True, indent=2) + "\n")
    return 0


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
