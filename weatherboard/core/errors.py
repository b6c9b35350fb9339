"""Error taxonomy shared by the services, the API and the dashboard."""
from __future__ import annotations

from typing import Optional


GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


class WeatherboardError(Exception):
    """Base error carrying the HTTP status and the message safe for clients."""

    status_code = 500
    expose_message = True

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        expose: Optional[bool] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if expose is not None:
            self.expose_message = expose

    @property
    def public_message(self) -> str:
        if self.expose_message:
            return self.message
        return GENERIC_ERROR_MESSAGE


class ValidationError(WeatherboardError):
    """Bad or missing client input."""

    status_code = 400


class PayloadError(ValidationError):
    """Upstream payload failed schema validation."""

    status_code = 500
    expose_message = False


class ConfigError(WeatherboardError):
    """Required server configuration is missing."""


class UpstreamError(WeatherboardError):
    """A third-party API call did not succeed."""


class UnknownError(WeatherboardError):
    """Catch-all for failures nothing else claimed."""

    expose_message = False


__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "WeatherboardError",
    "ValidationError",
    "PayloadError",
    "ConfigError",
    "UpstreamError",
    "UnknownError",
]
