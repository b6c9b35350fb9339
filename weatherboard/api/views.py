"""REST API views for countries and capital weather."""
from __future__ import annotations

from dataclasses import asdict
from functools import lru_cache
from typing import Callable

import logging

from django.conf import settings
from django.core.cache import caches
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from weatherboard.core.abstractions import WeatherSnapshot
from weatherboard.core.errors import UnknownError, WeatherboardError, GENERIC_ERROR_MESSAGE
from weatherboard.core.providers import OpenWeatherClient, RequestConfig, RestCountriesClient
from weatherboard.core.services import CountryLookupService, WeatherLookupService


logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_country_service() -> CountryLookupService:
    directory = RestCountriesClient(
        base_url=settings.COUNTRIES_API_URL,
        request_config=RequestConfig(timeout=settings.UPSTREAM_TIMEOUT),
    )
    return CountryLookupService(directory, cache=caches[settings.COUNTRIES_CACHE_ALIAS], ttl=None)


@lru_cache(maxsize=1)
def get_weather_service() -> WeatherLookupService:
    provider = None
    if settings.OPENWEATHER_API_KEY:
        provider = OpenWeatherClient(
            api_key=settings.OPENWEATHER_API_KEY,
            base_url=settings.OPENWEATHER_API_URL,
            request_config=RequestConfig(timeout=settings.UPSTREAM_TIMEOUT),
        )
    return WeatherLookupService(provider)


def error_response(exc: WeatherboardError) -> Response:
    return Response({"error": exc.public_message}, status=exc.status_code)


def guarded(handler: Callable[[], Response], route: str) -> Response:
    """Run ``handler`` and turn every failure into an ``{"error": ...}`` envelope."""
    try:
        return handler()
    except WeatherboardError as exc:
        if exc.status_code >= 500:
            logger.error("Error in GET %s: %s", route, exc.message)
        return error_response(exc)
    except Exception:  # noqa: BLE001 - nothing may leak past the API boundary
        logger.exception("Unexpected error in GET %s", route)
        return error_response(UnknownError(GENERIC_ERROR_MESSAGE))


class CountriesView(APIView):
    """List every country that has a capital and a two-letter code."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        def handler() -> Response:
            countries = get_country_service().list_countries()
            return Response([asdict(country) for country in countries])

        return guarded(handler, "/api/countries")


class WeatherView(APIView):
    """Current weather for a capital, or a single widget of it."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        capital = request.query_params.get("capital")
        widget = request.query_params.get("widget")

        def handler() -> Response:
            result = get_weather_service().get_weather(capital, widget)
            if isinstance(result, WeatherSnapshot):
                return Response(
                    result.as_dict(),
                    headers={"Cache-Control": f"public, max-age={settings.WEATHER_CACHE_MAX_AGE}"},
                )
            return Response(result)

        return guarded(handler, "/api/weather")
