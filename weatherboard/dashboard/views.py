"""Weather dashboard page."""
from __future__ import annotations

from typing import Any, Dict, List

from django.conf import settings
from django.shortcuts import render
from django.urls import reverse
from django.views import View

from weatherboard.api.views import get_country_service, get_weather_service
from weatherboard.core.abstractions import Number, WeatherSnapshot, Widget
from weatherboard.dashboard.state import DashboardController, DashboardState, ServiceBackend


WIDGET_LABELS = (
    (Widget.TEMPERATURE, "Temp (Min/Max)"),
    (Widget.WIND_SPEED, "Wind Speed (m/s)"),
    (Widget.HUMIDITY, "Humidity"),
    (Widget.PRESSURE, "Pressure (hPa)"),
)


def format_metric(snapshot: WeatherSnapshot, widget: Widget) -> str:
    if widget is Widget.TEMPERATURE:
        return f"{snapshot.temperature.min}°C / {snapshot.temperature.max}°C"
    value: Number = snapshot.metric(widget)
    if widget is Widget.WIND_SPEED:
        return f"{value} m/s"
    if widget is Widget.HUMIDITY:
        return f"{value}%"
    return f"{value} hPa"


def widget_cards(state: DashboardState) -> List[Dict[str, Any]]:
    # Refreshing needs a resolved capital to query.
    if state.snapshot is None or state.selected_country() is None:
        return []
    return [
        {"name": widget.value, "label": label, "value": format_metric(state.snapshot, widget)}
        for widget, label in WIDGET_LABELS
    ]


class DashboardView(View):
    template_name = "dashboard/index.html"

    def get(self, request, *args, **kwargs):
        backend = ServiceBackend(get_country_service(), get_weather_service())
        controller = DashboardController(
            backend, DashboardState(selected_code=settings.DASHBOARD_DEFAULT_COUNTRY)
        )
        controller.mount(request.GET.get("country"))

        state = controller.state
        country = state.selected_country()
        context = {
            "state": state,
            "countries": state.countries,
            "widgets": widget_cards(state),
            "page_config": {
                "capital": country.capital if country else None,
                "weatherUrl": reverse("weather"),
            },
        }
        return render(request, self.template_name, context)
