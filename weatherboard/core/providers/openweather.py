"""OpenWeather current conditions client."""
from __future__ import annotations

from typing import Any, Optional

from .base import UpstreamClient


class OpenWeatherClient(UpstreamClient):
    """Integration with the OpenWeather current weather endpoint."""

    name = "OpenWeather"
    base_url = "https://api.openweathermap.org/data/2.5/weather"

    def __init__(self, *, api_key: str, base_url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = base_url or self.base_url

    def failure_message(self, reason: str) -> str:
        return f"Failed to fetch weather data ({reason})"

    def fetch_current(self, city: str) -> Any:
        params = {"q": city, "appid": self.api_key, "units": "metric"}
        response = self._request("GET", self.base_url, params=params)
        return self._json(response)


__all__ = ["OpenWeatherClient"]
