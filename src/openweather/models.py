"""Pydantic models mirroring the OpenWeather 2.5 JSON responses.

Each endpoint has its own top-level model. The fields that identify a
payload (``list``/``city`` for forecasts, ``coord``/``main`` for current
weather, ...) are required so that an error body never validates as a
success payload.
"""
from __future__ import annotations
from typing import Any, Iterator, List, Optional, Union
from pydantic import BaseModel, Field, RootModel, field_validator

from .constants import API_BASE


class Coordinates(BaseModel):
    """Geographic coordinates in decimal degrees. No range validation.

    Attributes:
        lat: Latitude.
        lon: Longitude.
    """

    lat: float
    lon: float


class Weather(BaseModel):
    """Weather condition entry.

    Attributes:
        id: Condition code (e.g. 800 for clear sky).
        main: Group of parameters (Rain, Snow, Clouds, ...).
        description: Condition text in the requested language.
        icon: Icon identifier.
    """

    id: int
    main: str
    description: str
    icon: Optional[str] = None


class Main(BaseModel):
    temp: float
    feels_like: Optional[float] = None
    temp_min: Optional[float] = None
    temp_max: Optional[float] = None
    pressure: Optional[float] = None
    humidity: Optional[float] = None
    sea_level: Optional[float] = None
    grnd_level: Optional[float] = None
    temp_kf: Optional[float] = None


class Wind(BaseModel):
    speed: float
    deg: Optional[float] = None
    gust: Optional[float] = None


class Clouds(BaseModel):
    all: int


class Precipitation(BaseModel):
    """Rain or snow volume in mm for the last 1 or 3 hours."""

    one_hour: Optional[float] = Field(None, alias="1h")
    three_hour: Optional[float] = Field(None, alias="3h")

    model_config = {"populate_by_name": True}


class Sys(BaseModel):
    type: Optional[int] = None
    id: Optional[int] = None
    message: Optional[float] = None
    country: Optional[str] = None
    sunrise: Optional[int] = None
    sunset: Optional[int] = None
    pod: Optional[str] = None


class City(BaseModel):
    id: int
    name: str
    coord: Optional[Coordinates] = None
    country: Optional[str] = None
    population: Optional[int] = None
    timezone: Optional[int] = None
    sunrise: Optional[int] = None
    sunset: Optional[int] = None


# ─────────────────────────────────────────────────────────────────────────────
# Current weather
# ─────────────────────────────────────────────────────────────────────────────

class WeatherReportCurrent(BaseModel):
    """Response of the ``weather`` endpoint."""

    coord: Coordinates
    weather: List[Weather]
    base: Optional[str] = None
    main: Main
    visibility: Optional[int] = None
    wind: Optional[Wind] = None
    clouds: Optional[Clouds] = None
    rain: Optional[Precipitation] = None
    snow: Optional[Precipitation] = None
    dt: int
    sys: Optional[Sys] = None
    timezone: Optional[int] = None
    id: int
    name: str
    cod: Optional[Union[int, str]] = None

    model_config = {"extra": "allow"}


# ─────────────────────────────────────────────────────────────────────────────
# Forecasts
# ─────────────────────────────────────────────────────────────────────────────

class ForecastEntry(BaseModel):
    """A single 3-hour step of the 5-day forecast (also used by city history)."""

    dt: int
    main: Main
    weather: List[Weather] = Field(default_factory=list)
    clouds: Optional[Clouds] = None
    wind: Optional[Wind] = None
    visibility: Optional[int] = None
    pop: Optional[float] = None
    rain: Optional[Precipitation] = None
    snow: Optional[Precipitation] = None
    sys: Optional[Sys] = None
    dt_txt: Optional[str] = None


class WeatherReport5Day(BaseModel):
    """Response of the ``forecast`` endpoint (3-hour steps over 5 days)."""

    cod: Optional[Union[int, str]] = None
    message: Optional[float] = None
    cnt: int
    entries: List[ForecastEntry] = Field(alias="list")
    city: City

    model_config = {"populate_by_name": True, "extra": "allow"}


class DailyTemperature(BaseModel):
    day: float
    min: Optional[float] = None
    max: Optional[float] = None
    night: Optional[float] = None
    eve: Optional[float] = None
    morn: Optional[float] = None


class DailyFeelsLike(BaseModel):
    day: float
    night: Optional[float] = None
    eve: Optional[float] = None
    morn: Optional[float] = None


class DailyForecastEntry(BaseModel):
    """A single day of the 16-day forecast."""

    dt: int
    sunrise: Optional[int] = None
    sunset: Optional[int] = None
    temp: DailyTemperature
    feels_like: Optional[DailyFeelsLike] = None
    pressure: Optional[float] = None
    humidity: Optional[float] = None
    weather: List[Weather] = Field(default_factory=list)
    speed: Optional[float] = None
    deg: Optional[float] = None
    gust: Optional[float] = None
    clouds: Optional[int] = None
    pop: Optional[float] = None
    rain: Optional[float] = None
    snow: Optional[float] = None


class WeatherReport16Day(BaseModel):
    """Response of the ``forecast/daily`` endpoint."""

    city: City
    cod: Optional[Union[int, str]] = None
    message: Optional[float] = None
    cnt: int
    entries: List[DailyForecastEntry] = Field(alias="list")

    model_config = {"populate_by_name": True, "extra": "allow"}


# ─────────────────────────────────────────────────────────────────────────────
# One call
# ─────────────────────────────────────────────────────────────────────────────

class OneCallWeather(BaseModel):
    """Current or hourly conditions in the one-call payloads."""

    dt: int
    sunrise: Optional[int] = None
    sunset: Optional[int] = None
    temp: float
    feels_like: Optional[float] = None
    pressure: Optional[float] = None
    humidity: Optional[float] = None
    dew_point: Optional[float] = None
    uvi: Optional[float] = None
    clouds: Optional[int] = None
    visibility: Optional[int] = None
    wind_speed: Optional[float] = None
    wind_deg: Optional[float] = None
    wind_gust: Optional[float] = None
    weather: List[Weather] = Field(default_factory=list)
    pop: Optional[float] = None
    rain: Optional[Precipitation] = None
    snow: Optional[Precipitation] = None


class OneCallDaily(BaseModel):
    dt: int
    sunrise: Optional[int] = None
    sunset: Optional[int] = None
    moonrise: Optional[int] = None
    moonset: Optional[int] = None
    moon_phase: Optional[float] = None
    temp: DailyTemperature
    feels_like: Optional[DailyFeelsLike] = None
    pressure: Optional[float] = None
    humidity: Optional[float] = None
    dew_point: Optional[float] = None
    wind_speed: Optional[float] = None
    wind_deg: Optional[float] = None
    wind_gust: Optional[float] = None
    weather: List[Weather] = Field(default_factory=list)
    clouds: Optional[int] = None
    pop: Optional[float] = None
    rain: Optional[float] = None
    snow: Optional[float] = None
    uvi: Optional[float] = None


class Alert(BaseModel):
    sender_name: Optional[str] = None
    event: str
    start: int
    end: int
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class WeatherReportOneCall(BaseModel):
    """Response of the ``onecall`` endpoint with minutely/hourly excluded."""

    lat: float
    lon: float
    timezone: str
    timezone_offset: Optional[int] = None
    current: OneCallWeather
    hourly: Optional[List[OneCallWeather]] = None
    daily: List[OneCallDaily] = Field(default_factory=list)
    alerts: Optional[List[Alert]] = None

    model_config = {"extra": "allow"}


class WeatherReportOneCallHistorical(BaseModel):
    """Response of the ``onecall/timemachine`` endpoint."""

    lat: float
    lon: float
    timezone: str
    timezone_offset: Optional[int] = None
    current: OneCallWeather
    hourly: List[OneCallWeather] = Field(default_factory=list)

    model_config = {"extra": "allow"}


# ─────────────────────────────────────────────────────────────────────────────
# History
# ─────────────────────────────────────────────────────────────────────────────

class WeatherReportHistorical(BaseModel):
    """Response of the ``history/city`` endpoint (hourly history)."""

    message: Optional[str] = None
    cod: Optional[Union[int, str]] = None
    city_id: int
    calctime: Optional[float] = None
    cnt: Optional[int] = None
    entries: List[ForecastEntry] = Field(alias="list")

    model_config = {"populate_by_name": True, "extra": "allow"}


class AccumulatedTemperature(BaseModel):
    """Accumulated temperature above the threshold for one day."""

    date: str
    temp: float
    count: int


class AccumulatedPrecipitation(BaseModel):
    """Accumulated precipitation above the threshold for one day."""

    date: str
    rain: float
    count: int


class _ListModel(RootModel):
    """Sequence behaviour for array-shaped payloads."""

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.root)

    def __getitem__(self, item: int) -> Any:
        return self.root[item]

    def __len__(self) -> int:
        return len(self.root)


class WeatherAccumulatedTemperature(_ListModel):
    """Response of the ``history/accumulated_temperature`` endpoint."""

    root: List[AccumulatedTemperature]


class WeatherAccumulatedPrecipitation(_ListModel):
    """Response of the ``history/accumulated_precipitation`` endpoint."""

    root: List[AccumulatedPrecipitation]


# ─────────────────────────────────────────────────────────────────────────────
# UV index
# ─────────────────────────────────────────────────────────────────────────────

class UvIndex(BaseModel):
    """Response of the ``uvi`` endpoint and entry of the UV lists."""

    lat: float
    lon: float
    date_iso: Optional[str] = None
    date: int
    value: float


class ForecastUvIndex(_ListModel):
    """Response of the ``uvi/forecast`` endpoint."""

    root: List[UvIndex]


class HistoricalUvIndex(_ListModel):
    """Response of the ``uvi/history`` endpoint."""

    root: List[UvIndex]


# ─────────────────────────────────────────────────────────────────────────────
# Errors and configuration
# ─────────────────────────────────────────────────────────────────────────────

class ErrorReport(BaseModel):
    """Error body returned by the API, e.g. ``{"cod": 401, "message": "Invalid API key"}``.

    Attributes:
        code: Error code as sent by the API (numeric codes are kept as strings).
        message: Human-readable error message.
    """

    code: str = Field(alias="cod")
    message: str

    model_config = {"populate_by_name": True}

    @field_validator("code", mode="before")
    @classmethod
    def coerce_code(cls, v: Any) -> Any:
        """The API sends ``cod`` either as a number or as a string."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ClientConfig(BaseModel):
    """Configuration settings for the OpenWeather client.

    Attributes:
        base_url: API base URL; endpoint paths are appended to it.
    """

    base_url: str = API_BASE

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure the base starts with http(s):// and ends with a slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/") + "/"


__all__ = [
    # Shared blocks
    "Coordinates",
    "Weather",
    "Main",
    "Wind",
    "Clouds",
    "Precipitation",
    "Sys",
    "City",
    # Current weather
    "WeatherReportCurrent",
    # Forecasts
    "ForecastEntry",
    "WeatherReport5Day",
    "DailyTemperature",
    "DailyFeelsLike",
    "DailyForecastEntry",
    "WeatherReport16Day",
    # One call
    "OneCallWeather",
    "OneCallDaily",
    "Alert",
    "WeatherReportOneCall",
    "WeatherReportOneCallHistorical",
    # History
    "WeatherReportHistorical",
    "AccumulatedTemperature",
    "AccumulatedPrecipitation",
    "WeatherAccumulatedTemperature",
    "WeatherAccumulatedPrecipitation",
    # UV index
    "UvIndex",
    "ForecastUvIndex",
    "HistoricalUvIndex",
    # Errors and config
    "ErrorReport",
    "ClientConfig",
]
