"""Location specifiers accepted by the OpenWeather API.

Each variant serializes to the subset of query parameters the API uses to
identify a place. Exactly one specifier is sent per request.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Tuple, Union


def format_coordinate(value: float) -> str:
    """Positional notation with the shortest round-tripping digits (no exponent)."""
    return format(Decimal(repr(float(value))), "f")


class LocationSpecifier(ABC):
    """Abstract base class for the ways a location can be identified."""

    @abstractmethod
    def format(self) -> List[Tuple[str, str]]:
        """
        Serialize the location into query parameters.

        Returns:
            Ordered list of (key, value) pairs.
        """
        pass


@dataclass(frozen=True)
class CityName(LocationSpecifier):
    """City name alone, e.g. "London"."""
    city: str

    def format(self) -> List[Tuple[str, str]]:
        return [("q", self.city)]


@dataclass(frozen=True)
class CityAndCountryName(LocationSpecifier):
    """City name with a country name or ISO 3166 code."""
    city: str
    country: str

    def format(self) -> List[Tuple[str, str]]:
        return [("q", f"{self.city},{self.country}")]


@dataclass(frozen=True)
class GeoCoordinates(LocationSpecifier):
    """Latitude/longitude pair. No range validation is performed."""
    lat: float
    lon: float

    def format(self) -> List[Tuple[str, str]]:
        return [("lat", format_coordinate(self.lat)), ("lon", format_coordinate(self.lon))]


@dataclass(frozen=True)
class CityId(LocationSpecifier):
    """OpenWeather city identifier."""
    id: Union[int, str]

    def format(self) -> List[Tuple[str, str]]:
        return [("id", f"{self.id}")]


@dataclass(frozen=True)
class ZipCode(LocationSpecifier):
    """Postal code with country code."""
    zip: str
    country: str

    def format(self) -> List[Tuple[str, str]]:
        return [("zip", f"{self.zip},{self.country}")]


__all__ = [
    "format_coordinate",
    "LocationSpecifier",
    "CityName",
    "CityAndCountryName",
    "GeoCoordinates",
    "CityId",
    "ZipCode",
]
