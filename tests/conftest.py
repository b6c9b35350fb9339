from __future__ import annotations

import copy

import pytest

from django.conf import settings
from django.core.cache import cache
from requests_mock import Mocker

from weatherboard.api.views import get_country_service, get_weather_service

BERLIN_WEATHER = {
    "coord": {"lon": 13.41, "lat": 52.52},
    "main": {"temp": 12.3, "temp_min": 10, "temp_max": 15, "humidity": 60, "pressure": 1012},
    "wind": {"speed": 3.5, "deg": 240},
    "name": "Berlin",
}

RAW_COUNTRIES = [
    {"name": {"common": "Germany", "official": "Federal Republic of Germany"}, "capital": ["Berlin"], "cca2": "DE"},
    {"name": {"common": "France"}, "capital": ["Paris"], "cca2": "FR"},
    {"name": {"common": "Antarctica"}, "cca2": "AQ"},
]


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture(autouse=True)
def _reset_services():
    cache.clear()
    get_country_service.cache_clear()
    get_weather_service.cache_clear()
    yield
    cache.clear()
    get_country_service.cache_clear()
    get_weather_service.cache_clear()


@pytest.fixture
def countries_url() -> str:
    return settings.COUNTRIES_API_URL


@pytest.fixture
def weather_url() -> str:
    return settings.OPENWEATHER_API_URL


@pytest.fixture
def raw_countries() -> list:
    return copy.deepcopy(RAW_COUNTRIES)


@pytest.fixture
def berlin_weather() -> dict:
    return copy.deepcopy(BERLIN_WEATHER)
