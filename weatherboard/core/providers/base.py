from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests
from requests import Response

from ..errors import UpstreamError


@dataclass
class RequestConfig:
    timeout: Optional[float] = 10.0


class UpstreamClient:
    """Base class for third-party JSON APIs.

    Transport failures, non-2xx responses and undecodable bodies all surface
    as :class:`UpstreamError`. The upstream status and body are logged here
    and kept out of the exception message.
    """

    name = "upstream"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def failure_message(self, reason: str) -> str:
        return f"{self.name} request failed: {reason}"

    def _handle_response(self, response: Response) -> Response:
        if not 200 <= response.status_code < 300:
            self._log.error(
                "%s API error (status %s): %s", self.name, response.status_code, response.text
            )
            reason = response.reason or f"HTTP {response.status_code}"
            raise UpstreamError(self.failure_message(reason))
        return response

    def _request(self, method: str, url: str, **kwargs: Any) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request to %s timed out", self.name, exc_info=exc)
            raise UpstreamError(self.failure_message("timeout")) from exc
        except requests.RequestException as exc:
            self._log.error("Request to %s failed", self.name, exc_info=exc)
            raise UpstreamError(self.failure_message("request failed")) from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            self._log.error("Failed to decode %s JSON", self.name, exc_info=exc)
            raise UpstreamError(self.failure_message("invalid JSON")) from exc


__all__ = ["RequestConfig", "UpstreamClient"]
