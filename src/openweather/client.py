from __future__ import annotations
import datetime as dt
import logging
import re
from typing import Any, List, NamedTuple, Optional, Protocol, Sequence, Tuple, Type, TypeVar, Union
import requests
from pydantic import BaseModel, ValidationError
from .config.settings import load_api_key
from .constants import (
    API_KEY_PARAM,
    DAILY_FORECAST_MAX_DAYS,
    ENDPOINT_PATHS,
    HISTORY_TYPE,
    ONE_CALL_EXCLUDE,
    UV_FORECAST_MAX_DAYS,
)
from .exceptions import (
    OpenWeatherAPIError,
    OpenWeatherConnectionError,
    OpenWeatherInputError,
    OpenWeatherParseError,
    OpenWeatherURLError,
)
from .location import GeoCoordinates, LocationSpecifier, format_coordinate
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
from .parameters import Settings

LOGGER = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)
Params = List[Tuple[str, str]]
Timestamp = Union[int, dt.datetime]
CoordinatesLike = Union[Coordinates, GeoCoordinates]

_API_KEY_PATTERN = re.compile(rf"({API_KEY_PARAM}=)[^&]*")


class HTTPResponse(NamedTuple):
    status_code: int
    text: str


# HTTP Client Protocol
class HTTPClient(Protocol):
    def get(self, url: str) -> HTTPResponse:
        ...


class RequestsHTTPClient:
    def __init__(self) -> None:
        self._session: Optional[requests.Session] = None

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "RequestsHTTPClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def get(self, url: str) -> HTTPResponse:
        session = self._get_session()
        response: Optional[requests.Response] = None

        try:
            response = session.get(url)
            # Decode leniently; the API does not always declare a charset
            body = response.content.decode("utf-8", errors="replace")
            return HTTPResponse(status_code=response.status_code, text=body)
        except requests.RequestException as exc:
            raise OpenWeatherConnectionError(
                f"Http request to {redact_api_key(url)} failed: {exc}"
            ) from exc
        finally:
            if response is not None:
                response.close()


def redact_api_key(url: str) -> str:
    """Hide the API key value in a URL before it is logged."""
    return _API_KEY_PATTERN.sub(r"\1***", url)


def build_url(base_url: str, path: str, params: Sequence[Tuple[str, str]]) -> str:
    """
    Serialize an endpoint path and ordered query parameters into a URL.

    Args:
        base_url: API base URL ending with a slash.
        path: Endpoint path relative to the base.
        params: Ordered (key, value) pairs; order is preserved in the query.

    Returns:
        The complete, percent-encoded URL.

    Raises:
        OpenWeatherURLError: If the URL cannot be prepared.
    """
    try:
        prepared = requests.Request("GET", f"{base_url}{path}", params=list(params)).prepare()
    except (
        requests.exceptions.InvalidURL,
        requests.exceptions.MissingSchema,
        requests.exceptions.InvalidSchema,
        UnicodeError,
    ) as exc:
        raise OpenWeatherURLError(f"Error parsing url: {exc}") from exc
    return prepared.url


def fetch(url: str, model: Type[T], http_client: HTTPClient) -> T:
    """
    GET a URL and decode the body as ``model``, falling back to an error report.

    The API does not reliably signal failures through status codes, so the
    body shape decides: a body that validates as ``model`` is returned, a body
    that validates as ``ErrorReport`` raises ``OpenWeatherAPIError``, anything
    else raises ``OpenWeatherParseError`` with both validation errors.
    """
    response = http_client.get(url)
    LOGGER.debug("Url: %s", redact_api_key(url))
    LOGGER.debug("Status: %s", response.status_code)
    LOGGER.debug("Body: %s", response.text)

    try:
        return model.model_validate_json(response.text)
    except ValidationError as exc:
        success_error = exc

    LOGGER.debug("Body is not a %s, trying ErrorReport", model.__name__)
    try:
        report = ErrorReport.model_validate_json(response.text)
    except ValidationError as report_error:
        raise OpenWeatherParseError(
            success_error, report_error, expected=model.__name__
        ) from report_error
    raise OpenWeatherAPIError(report)


def validate_day_count(days: int, maximum: int) -> None:
    """Reject day counts outside ``1..maximum`` before any request is made."""
    if isinstance(days, bool) or not isinstance(days, int) or days < 1 or days > maximum:
        raise OpenWeatherInputError(
            f"Only support 1 to {maximum} day forecasts but {days!r} requested"
        )


def to_epoch_seconds(value: Timestamp) -> int:
    """Convert a timestamp to epoch seconds; naive datetimes are taken as UTC."""
    if isinstance(value, dt.datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=dt.timezone.utc)
        return int(value.timestamp())
    if isinstance(value, bool) or not isinstance(value, int):
        raise OpenWeatherInputError(f"Expected epoch seconds or datetime, got {value!r}")
    return value


# Main client class for interacting with the OpenWeather API
class OpenWeatherClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        config: Optional[ClientConfig] = None,
        http_client: Optional[HTTPClient] = None,
    ):
        self._api_key = load_api_key(api_key)
        self._config = config or ClientConfig()
        # HTTP client - track if we own it for cleanup
        self._owns_http_client = http_client is None
        self._http_client = http_client or RequestsHTTPClient()

    def close(self) -> None:
        if self._owns_http_client and hasattr(self._http_client, "close"):
            self._http_client.close()

    def __enter__(self) -> "OpenWeatherClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def config(self) -> ClientConfig:
        return self._config

    def endpoint_url(self, endpoint: str, params: Sequence[Tuple[str, str]]) -> str:
        return build_url(self._config.base_url, ENDPOINT_PATHS[endpoint], params)

    # Params for location based endpoints: location, endpoint params, key, settings
    def location_params(
        self,
        location: LocationSpecifier,
        settings: Optional[Settings] = None,
        extra: Sequence[Tuple[str, str]] = (),
    ) -> Params:
        params = location.format()
        params.extend(extra)
        params.append((API_KEY_PARAM, self._api_key))
        params.extend((settings or Settings()).format())
        return params

    # Params for one-call endpoints: settings, coordinates, endpoint params, key
    def coordinate_params(
        self,
        coordinates: CoordinatesLike,
        settings: Optional[Settings] = None,
        extra: Sequence[Tuple[str, str]] = (),
    ) -> Params:
        params = (settings or Settings()).format()
        params.append(("lat", format_coordinate(coordinates.lat)))
        params.append(("lon", format_coordinate(coordinates.lon)))
        params.extend(extra)
        params.append((API_KEY_PARAM, self._api_key))
        return params

    def _get(self, endpoint: str, params: Params, model: Type[T]) -> T:
        url = self.endpoint_url(endpoint, params)
        return fetch(url, model, self._http_client)

    @staticmethod
    def _range_params(start: Timestamp, end: Timestamp) -> Params:
        return [
            ("start", f"{to_epoch_seconds(start)}"),
            ("end", f"{to_epoch_seconds(end)}"),
        ]

    def get_current_weather(
        self, location: LocationSpecifier, settings: Optional[Settings] = None
    ) -> WeatherReportCurrent:
        params = self.location_params(location, settings)
        return self._get("current", params, WeatherReportCurrent)

    def get_5_day_forecast(
        self, location: LocationSpecifier, settings: Optional[Settings] = None
    ) -> WeatherReport5Day:
        params = self.location_params(location, settings)
        return self._get("forecast_5_day", params, WeatherReport5Day)

    def get_16_day_forecast(
        self,
        location: LocationSpecifier,
        days: int,
        settings: Optional[Settings] = None,
    ) -> WeatherReport16Day:
        validate_day_count(days, DAILY_FORECAST_MAX_DAYS)
        params = self.location_params(location, settings, [("cnt", f"{days}")])
        return self._get("forecast_16_day", params, WeatherReport16Day)

    def get_one_call_current(
        self, coordinates: CoordinatesLike, settings: Optional[Settings] = None
    ) -> WeatherReportOneCall:
        params = self.coordinate_params(coordinates, settings, [("exclude", ONE_CALL_EXCLUDE)])
        return self._get("one_call", params, WeatherReportOneCall)

    def get_one_call_historical(
        self,
        coordinates: CoordinatesLike,
        timestamp: Timestamp,
        settings: Optional[Settings] = None,
    ) -> WeatherReportOneCallHistorical:
        extra = [("dt", f"{to_epoch_seconds(timestamp)}")]
        params = self.coordinate_params(coordinates, settings, extra)
        return self._get("one_call_historical", params, WeatherReportOneCallHistorical)

    def get_historical_data(
        self,
        location: LocationSpecifier,
        start: Timestamp,
        end: Timestamp,
        settings: Optional[Settings] = None,
    ) -> WeatherReportHistorical:
        extra = [("type", HISTORY_TYPE)] + self._range_params(start, end)
        params = self.location_params(location, settings, extra)
        return self._get("history_city", params, WeatherReportHistorical)

    def get_accumulated_temperature_data(
        self,
        location: LocationSpecifier,
        start: Timestamp,
        end: Timestamp,
        threshold: int,
        settings: Optional[Settings] = None,
    ) -> WeatherAccumulatedTemperature:
        extra = [("type", HISTORY_TYPE)] + self._range_params(start, end)
        extra.append(("threshold", f"{threshold}"))
        params = self.location_params(location, settings, extra)
        return self._get("accumulated_temperature", params, WeatherAccumulatedTemperature)

    def get_accumulated_precipitation_data(
        self,
        location: LocationSpecifier,
        start: Timestamp,
        end: Timestamp,
        threshold: int,
        settings: Optional[Settings] = None,
    ) -> WeatherAccumulatedPrecipitation:
        extra = [("type", HISTORY_TYPE)] + self._range_params(start, end)
        extra.append(("threshold", f"{threshold}"))
        params = self.location_params(location, settings, extra)
        return self._get("accumulated_precipitation", params, WeatherAccumulatedPrecipitation)

    def get_current_uv_index(
        self, location: LocationSpecifier, settings: Optional[Settings] = None
    ) -> UvIndex:
        params = self.location_params(location, settings)
        return self._get("uvi", params, UvIndex)

    def get_forecast_uv_index(
        self,
        location: LocationSpecifier,
        days: int,
        settings: Optional[Settings] = None,
    ) -> ForecastUvIndex:
        validate_day_count(days, UV_FORECAST_MAX_DAYS)
        params = self.location_params(location, settings, [("cnt", f"{days}")])
        return self._get("uvi_forecast", params, ForecastUvIndex)

    def get_historical_uv_index(
        self,
        location: LocationSpecifier,
        start: Timestamp,
        end: Timestamp,
        settings: Optional[Settings] = None,
    ) -> HistoricalUvIndex:
        params = self.location_params(location, settings, self._range_params(start, end))
        return self._get("uvi_history", params, HistoricalUvIndex)


# One call per function, each with its own client
def get_current_weather(
    location: LocationSpecifier,
    key: str,
    settings: Optional[Settings] = None,
    *,
    http_client: Optional[HTTPClient] = None,
) -> WeatherReportCurrent:
    with OpenWeatherClient(api_key=key, http_client=http_client) as client:
        return client.get_current_weather(location, settings)


def get_5_day_forecast(
    location: LocationSpecifier,
    key: str,
    settings: Optional[Settings] = None,
    *,
    http_client: Optional[HTTPClient] = None,
) -> WeatherReport5Day:
    with OpenWeatherClient(api_key=key, http_client=http_client) as client:
        return client.get_5_day_forecast(location, settings)


def get_16_day_forecast(
    location: LocationSpecifier,
    key: str,
    days: int,
    settings: Optional[Settings] = None,
    *,
    http_client: Optional[HTTPClient] = None,
) -> WeatherReport16Day:
    validate_day_count(days, DAILY_FORECAST_MAX_DAYS)
    with OpenWeatherClient(api_key=key, http_client=http_client) as client:
        return client.get_16_day_forecast(location, days, settings)


def get_one_call_current(
    coordinates: CoordinatesLike,
    key: str,
    settings: Optional[Settings] = None,
    *,
    http_client: Optional[HTTPClient] = None,
) -> WeatherReportOneCall:
    with OpenWeatherClient(api_key=key, http_client=http_client) as client:
        return client.get_one_call_current(coordinates, settings)


def get_one_call_historical(
    coordinates: CoordinatesLike,
    timestamp: Timestamp,
    key: str,
    settings: Optional[Settings] = None,
    *,
    http_client: Optional[HTTPClient] = None,
) -> WeatherReportOneCallHistorical:
    with OpenWeatherClient(api_key=key, http_client=http_client) as client:
        return client.get_one_call_historical(coordinates, timestamp, settings)


def get_historical_data(
    location: LocationSpecifier,
    key: str,
    start: Timestamp,
    end: Timestamp,
    settings: Optional[Settings] = None,
    *,
    http_client: Optional[HTTPClient] = None,
) -> WeatherReportHistorical:
    with OpenWeatherClient(api_key=key, http_client=http_client) as client:
        return client.get_historical_data(location, start, end, settings)


def get_accumulated_temperature_data(
    location: LocationSpecifier,
    key: str,
    start: Timestamp,
    end: Timestamp,
    threshold: int,
    settings: Optional[Settings] = None,
    *,
    http_client: Optional[HTTPClient] = None,
) -> WeatherAccumulatedTemperature:
    with OpenWeatherClient(api_key=key, http_client=http_client) as client:
        return client.get_accumulated_temperature_data(location, start, end, threshold, settings)


def get_accumulated_precipitation_data(
    location: LocationSpecifier,
    key: str,
    start: Timestamp,
    end: Timestamp,
    threshold: int,
    settings: Optional[Settings] = None,
    *,
    http_client: Optional[HTTPClient] = None,
) -> WeatherAccumulatedPrecipitation:
    with OpenWeatherClient(api_key=key, http_client=http_client) as client:
        return client.get_accumulated_precipitation_data(
            location, start, end, threshold, settings
        )


def get_current_uv_index(
    location: LocationSpecifier,
    key: str,
    settings: Optional[Settings] = None,
    *,
    http_client: Optional[HTTPClient] = None,
) -> UvIndex:
    with OpenWeatherClient(api_key=key, http_client=http_client) as client:
        return client.get_current_uv_index(location, settings)


def get_forecast_uv_index(
    location: LocationSpecifier,
    key: str,
    days: int,
    settings: Optional[Settings] = None,
    *,
    http_client: Optional[HTTPClient] = None,
) -> ForecastUvIndex:
    validate_day_count(days, UV_FORECAST_MAX_DAYS)
    with OpenWeatherClient(api_key=key, http_client=http_client) as client:
        return client.get_forecast_uv_index(location, days, settings)


def get_historical_uv_index(
    location: LocationSpecifier,
    key: str,
    start: Timestamp,
    end: Timestamp,
    settings: Optional[Settings] = None,
    *,
    http_client: Optional[HTTPClient] = None,
) -> HistoricalUvIndex:
    with OpenWeatherClient(api_key=key, http_client=http_client) as client:
        return client.get_historical_uv_index(location, start, end, settings)


__all__ = [
    # Main client class
    "OpenWeatherClient",
    # HTTP client protocol and implementation
    "HTTPClient",
    "HTTPResponse",
    "RequestsHTTPClient",
    # Request building and decoding
    "build_url",
    "fetch",
    "redact_api_key",
    "validate_day_count",
    "to_epoch_seconds",
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
]
