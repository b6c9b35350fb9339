"""Dashboard page state for one page load.

Each page load mounts a fresh :class:`DashboardController`: it loads the
country list, resolves the selected country and fetches its weather.
Nothing is kept between requests.  Per-widget refreshes and dismissing the
error banner happen in the browser (``static/dashboard/dashboard.js``)
against the stateless ``/api/weather`` endpoint, so overlapping refreshes
never share server-side state.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

import logging

from weatherboard.core.abstractions import Country, WeatherSnapshot
from weatherboard.core.errors import WeatherboardError
from weatherboard.core.services import CountryLookupService, WeatherLookupService


logger = logging.getLogger(__name__)

DEFAULT_COUNTRY_CODE = "DE"

COUNTRIES_ERROR = "Failed to load countries. Please try again later."
WEATHER_ERROR = "Failed to load weather data. Please refresh or try again later."


@dataclass
class DashboardState:
    selected_code: str = DEFAULT_COUNTRY_CODE
    countries: List[Country] = field(default_factory=list)
    snapshot: Optional[WeatherSnapshot] = None
    loading: bool = False
    error_message: Optional[str] = None

    def find(self, code: str) -> Optional[Country]:
        for country in self.countries:
            if country.code == code:
                return country
        return None

    def selected_country(self) -> Optional[Country]:
        return self.find(self.selected_code)


class DashboardBackend(Protocol):
    """Where the dashboard gets its data from."""

    def list_countries(self) -> List[Country]:
        ...

    def fetch_weather(self, capital: str) -> WeatherSnapshot:
        ...


class ServiceBackend:
    """Backend calling the lookup services in-process."""

    def __init__(self, countries: CountryLookupService, weather: WeatherLookupService) -> None:
        self._countries = countries
        self._weather = weather

    def list_countries(self) -> List[Country]:
        return self._countries.list_countries()

    def fetch_weather(self, capital: str) -> WeatherSnapshot:
        return self._weather.get_weather(capital)  # type: ignore[return-value]


class DashboardController:
    def __init__(self, backend: DashboardBackend, state: Optional[DashboardState] = None) -> None:
        self.backend = backend
        self.state = state or DashboardState()

    def mount(self, requested_code: Optional[str] = None) -> None:
        """Load the country list, then weather for the requested or default country."""
        self.load_countries()
        if requested_code and self.select_country(requested_code):
            return
        self.load_weather()

    def load_countries(self) -> bool:
        try:
            countries = self.backend.list_countries()
        except WeatherboardError as exc:
            logger.error("Error fetching countries: %s", exc)
            self.state.countries = []
            self.state.error_message = COUNTRIES_ERROR
            return False
        self.state.countries = list(countries)
        return True

    def select_country(self, code: str) -> bool:
        """Switch to ``code`` and load its weather; unknown codes are ignored."""
        if self.state.find(code) is None:
            logger.warning("Ignoring unknown country code %r", code)
            return False
        self.state.selected_code = code
        self.load_weather()
        return True

    def load_weather(self) -> None:
        country = self.state.selected_country()
        if country is None:
            self.state.snapshot = None
            return

        state = self.state
        state.loading = True
        state.error_message = None
        try:
            snapshot = self.backend.fetch_weather(country.capital)
        except WeatherboardError as exc:
            logger.error("Error fetching weather for %s: %s", country.capital, exc)
            state.snapshot = None
            state.error_message = WEATHER_ERROR
        else:
            state.snapshot = snapshot
        finally:
            state.loading = False


__all__ = [
    "DEFAULT_COUNTRY_CODE",
    "DashboardState",
    "DashboardBackend",
    "ServiceBackend",
    "DashboardController",
]
