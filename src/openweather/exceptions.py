"""Exceptions raised by the OpenWeather client."""
from __future__ import annotations
from typing import TYPE_CHECKING

from pydantic import ValidationError

if TYPE_CHECKING:
    from .models import ErrorReport


class OpenWeatherError(Exception):
    """Base exception for all OpenWeather client errors."""
    pass


class OpenWeatherAPIError(OpenWeatherError):
    """The API answered with an error report instead of the expected payload."""

    def __init__(self, report: "ErrorReport") -> None:
        super().__init__(f"Openweather API error: {report}")
        self.report = report

    @property
    def code(self) -> str:
        return self.report.code

    @property
    def message(self) -> str:
        return self.report.message


class OpenWeatherParseError(OpenWeatherError):
    """The response body matched neither the expected model nor an error report."""

    def __init__(
        self,
        success_error: ValidationError,
        report_error: ValidationError,
        *,
        expected: str = "response",
    ) -> None:
        message = (
            f"Error parsing to json. Parsing as {expected}: {success_error}"
            f" - Parsing as ErrorReport: {report_error}"
        )
        super().__init__(message)
        self.success_error = success_error
        self.report_error = report_error
        self.expected = expected


class OpenWeatherConnectionError(OpenWeatherError):
    """The HTTP request could not be completed."""
    pass


class OpenWeatherInputError(OpenWeatherError, ValueError):
    """A request argument was rejected before contacting the API."""
    pass


class OpenWeatherURLError(OpenWeatherError):
    """The request URL could not be built from the given parameters."""
    pass


class OpenWeatherConfigError(OpenWeatherError):
    """Missing or invalid client configuration (API key, base URL)."""
    pass


__all__ = [
    "OpenWeatherError",
    "OpenWeatherAPIError",
    "OpenWeatherParseError",
    "OpenWeatherConnectionError",
    "OpenWeatherInputError",
    "OpenWeatherURLError",
    "OpenWeatherConfigError",
]
