"""OpenWeather API Client Package.

This package wraps the OpenWeatherMap 2.5 API with:
- Typed location specifiers and unit/language settings
- Type-safe responses via Pydantic models
- Dependency injection for the HTTP client (testability)
- Error reports told apart from success payloads by their shape

Example usage:
    >>> from openweather import CityAndCountryName, get_current_weather
    >>> report = get_current_weather(CityAndCountryName("Minneapolis", "USA"), "your-key")
    >>> report.main.temp

    # Or keep one client (and its HTTP session) for several calls:
    >>> from openweather import OpenWeatherClient
    >>> with OpenWeatherClient(api_key="your-key") as client:
    ...     forecast = client.get_5_day_forecast(CityName("Oslo"))
"""

from __future__ import annotations

from .client import (
    HTTPClient,
    HTTPResponse,
    OpenWeatherClient,
    RequestsHTTPClient,
    build_url,
    fetch,
    get_16_day_forecast,
    get_5_day_forecast,
    get_accumulated_precipitation_data,
    get_accumulated_temperature_data,
    get_current_uv_index,
    get_current_weather,
    get_forecast_uv_index,
    get_historical_data,
    get_historical_uv_index,
    get_one_call_current,
    get_one_call_historical,
)
from .config import OpenWeatherSettings, get_settings, load_api_key
from .constants import API_BASE, DAILY_FORECAST_MAX_DAYS, UV_FORECAST_MAX_DAYS
from .exceptions import (
    OpenWeatherAPIError,
    OpenWeatherConfigError,
    OpenWeatherConnectionError,
    OpenWeatherError,
    OpenWeatherInputError,
    OpenWeatherParseError,
    OpenWeatherURLError,
)
from .location import (
    CityAndCountryName,
    CityId,
    CityName,
    GeoCoordinates,
    LocationSpecifier,
    ZipCode,
)
from .models import (
    ClientConfig,
    Coordinates,
    ErrorReport,
    ForecastUvIndex,
    HistoricalUvIndex,
    UvIndex,
    WeatherAccumulatedPrecipitation,
    WeatherAccumulatedTemperature,
    WeatherReport16Day,
    WeatherReport5Day,
    WeatherReportCurrent,
    WeatherReportHistorical,
    WeatherReportOneCall,
    WeatherReportOneCallHistorical,
)
from .parameters import Language, Settings, Unit

__version__ = "0.1.0"

__all__ = [
    # Main client
    "OpenWeatherClient",
    "HTTPClient",
    "HTTPResponse",
    "RequestsHTTPClient",
    "build_url",
    "fetch",
    # Endpoint functions
    "get_current_weather",
    "get_5_day_forecast",
    "get_16_day_forecast",
    "get_one_call_current",
    "get_one_call_historical",
    "get_historical_data",
    "get_accumulated_temperature_data",
    "get_accumulated_precipitation_data",
    "get_current_uv_index",
    "get_forecast_uv_index",
    "get_historical_uv_index",
    # Locations and settings
    "LocationSpecifier",
    "CityName",
    "CityAndCountryName",
    "GeoCoordinates",
    "CityId",
    "ZipCode",
    "Unit",
    "Language",
    "Settings",
    # Models
    "ClientConfig",
    "Coordinates",
    "ErrorReport",
    "WeatherReportCurrent",
    "WeatherReport5Day",
    "WeatherReport16Day",
    "WeatherReportOneCall",
    "WeatherReportOneCallHistorical",
    "WeatherReportHistorical",
    "WeatherAccumulatedTemperature",
    "WeatherAccumulatedPrecipitation",
    "UvIndex",
    "ForecastUvIndex",
    "HistoricalUvIndex",
    # Exceptions
    "OpenWeatherError",
    "OpenWeatherAPIError",
    "OpenWeatherParseError",
    "OpenWeatherConnectionError",
    "OpenWeatherInputError",
    "OpenWeatherURLError",
    "OpenWeatherConfigError",
    # Configuration
    "OpenWeatherSettings",
    "get_settings",
    "load_api_key",
    # Constants
    "API_BASE",
    "DAILY_FORECAST_MAX_DAYS",
    "UV_FORECAST_MAX_DAYS",
]
