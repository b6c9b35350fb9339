"""Core abstractions for the country and weather domain."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Protocol, Union


Number = Union[int, float]


class Widget(str, Enum):
    """The four independently refreshable weather metrics."""

    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    PRESSURE = "pressure"
    WIND_SPEED = "wind_speed"


@dataclass(frozen=True, slots=True)
class Country:
    """A country that has a capital to query weather for."""

    name: str
    capital: str
    code: str


@dataclass(frozen=True, slots=True)
class Temperature:
    min: Number
    max: Number


@dataclass(frozen=True, slots=True)
class WeatherSnapshot:
    """Normalized current conditions in metric units."""

    temperature: Temperature
    humidity: Number
    pressure: Number
    wind_speed: Number

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def metric(self, widget: Widget) -> Any:
        return self.as_dict()[widget.value]


class CountryDirectory(Protocol):
    """A data source returning the raw country directory."""

    def fetch_all(self) -> Any:
        """Return the decoded JSON body of the directory listing."""
        ...


class WeatherProvider(Protocol):
    """A data source returning raw current conditions for a city."""

    name: str

    def fetch_current(self, city: str) -> Any:
        """Return the decoded JSON body for the city's current weather."""
        ...


__all__ = [
    "Number",
    "Widget",
    "Country",
    "Temperature",
    "WeatherSnapshot",
    "CountryDirectory",
    "WeatherProvider",
]
