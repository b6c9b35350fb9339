"""Dashboard page URL configuration."""
from __future__ import annotations

from django.urls import path

from weatherboard.dashboard.views import DashboardView

app_name = "dashboard"

urlpatterns = [
    path("", DashboardView.as_view(), name="index"),
]
