"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from weatherboard.api.views import CountriesView, WeatherView

urlpatterns = [
    path("countries", CountriesView.as_view(), name="countries"),
    path("weather", WeatherView.as_view(), name="weather"),
]
