"""Schemas for the upstream country and weather payloads."""
from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, ValidationError as SchemaError

from .abstractions import Country, Temperature, WeatherSnapshot
from .errors import PayloadError

__all__ = ["RawCountry", "RawWeather", "parse_country", "parse_weather"]

# Strict members keep the upstream int/float type and refuse numeric strings.
Numeric = Union[StrictInt, StrictFloat]


class _Upstream(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class RawCountryName(_Upstream):
    common: Optional[str] = None


class RawCountry(_Upstream):
    name: Optional[RawCountryName] = None
    capital: Optional[List[str]] = None
    cca2: Optional[str] = None

    def to_country(self) -> Optional[Country]:
        name = self.name.common if self.name and self.name.common else ""
        capital = self.capital[0] if self.capital else ""
        code = self.cca2 or ""
        if name and capital and code:
            return Country(name=name, capital=capital, code=code)
        return None


class RawMain(_Upstream):
    temp_min: Numeric
    temp_max: Numeric
    humidity: Numeric
    pressure: Numeric


class RawWind(_Upstream):
    speed: Numeric


class RawWeather(_Upstream):
    main: RawMain
    wind: RawWind

    def to_snapshot(self) -> WeatherSnapshot:
        return WeatherSnapshot(
            temperature=Temperature(min=self.main.temp_min, max=self.main.temp_max),
            humidity=self.main.humidity,
            pressure=self.main.pressure,
            wind_speed=self.wind.speed,
        )


def parse_country(record: Any) -> Optional[Country]:
    """Return a complete country or ``None`` when the record is unusable."""

    try:
        raw = RawCountry.model_validate(record)
    except SchemaError:
        return None
    return raw.to_country()


def parse_weather(payload: Any) -> WeatherSnapshot:
    try:
        raw = RawWeather.model_validate(payload)
    except SchemaError as exc:
        raise PayloadError("Missing required fields in weather data") from exc
    return raw.to_snapshot()
