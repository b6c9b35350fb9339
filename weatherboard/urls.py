"""Root URL configuration."""
from __future__ import annotations

from django.urls import include, path

urlpatterns = [
    path("api/", include("weatherboard.api.urls")),
    path("", include("weatherboard.dashboard.urls")),
]
