"""Current weather lookup for a capital city."""
from __future__ import annotations

from typing import Any, Dict, Optional, Union

import logging

from weatherboard.core.abstractions import WeatherProvider, WeatherSnapshot, Widget
from weatherboard.core.errors import ConfigError, UpstreamError, ValidationError
from weatherboard.core.schemas import parse_weather


logger = logging.getLogger(__name__)


class WeatherLookupService:
    """Validate a lookup, fetch upstream conditions and reshape them.

    ``provider`` may be ``None`` when no API credential is configured; the
    lookup then fails with :class:`ConfigError` once the request itself has
    been validated.
    """

    def __init__(self, provider: Optional[WeatherProvider]) -> None:
        self._provider = provider

    def get_weather(
        self, capital: Optional[str], widget: Optional[str] = None
    ) -> Union[WeatherSnapshot, Dict[str, Any]]:
        """Return the full snapshot, or ``{widget: value}`` when a widget is named."""
        if not capital:
            logger.error("No capital provided")
            raise ValidationError("No capital provided in query parameters")

        if self._provider is None:
            logger.error("Missing OpenWeather API key")
            raise ConfigError("Missing OPENWEATHER_API_KEY in environment variables")

        snapshot = self._fetch_snapshot(self._provider, capital)
        if not widget:
            return snapshot
        return {widget: self.select_widget(snapshot, widget)}

    @staticmethod
    def _fetch_snapshot(provider: WeatherProvider, capital: str) -> WeatherSnapshot:
        try:
            payload = provider.fetch_current(capital)
        except UpstreamError as exc:
            raise UpstreamError(
                f'Failed to fetch weather data for "{capital}"', expose=False
            ) from exc
        return parse_weather(payload)

    @staticmethod
    def select_widget(snapshot: WeatherSnapshot, widget: str) -> Any:
        try:
            selected = Widget(widget)
        except ValueError:
            logger.error('Invalid widget "%s"', widget)
            raise ValidationError(f'Invalid widget: "{widget}"') from None
        return snapshot.metric(selected)
