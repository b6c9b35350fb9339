"""Client for the REST Countries directory."""
from __future__ import annotations

from typing import Any, Optional

from .base import UpstreamClient


class RestCountriesClient(UpstreamClient):
    name = "REST Countries"
    base_url = "https://restcountries.com/v3.1/all"

    def __init__(self, base_url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url

    def failure_message(self, reason: str) -> str:
        return f"Failed to fetch countries: {reason}"

    def fetch_all(self) -> Any:
        response = self._request("GET", self.base_url)
        return self._json(response)


__all__ = ["RestCountriesClient"]
