from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests
from pydantic import TypeAdapter, ValidationError
from requests import Response

from ..abstractions import WeatherRecord


COMMUNICATION_ERROR = "Error communicating to backend"
DECODE_ERROR = "Unable to decode response from backend"


class ProviderError(RuntimeError):
    """Base provider error."""


class BackendCommunicationError(ProviderError):
    """Raised when a backend is unreachable or answers with a non-2xx status."""

    def __init__(self, message: str = COMMUNICATION_ERROR) -> None:
        super().__init__(message)


class BackendDecodeError(ProviderError):
    """Raised when a backend answers with a payload we cannot use."""

    def __init__(self, message: str = DECODE_ERROR) -> None:
        super().__init__(message)


@dataclass
class RequestConfig:
    timeout: float = 5.0


class WeatherProvider:
    """Base class for HTTP backends.

    Subclasses implement :meth:`_fetch` as a sequence of steps built on
    :meth:`_request` and :meth:`_decode`.  Any :class:`ProviderError` raised
    along the way is turned into an error record by :meth:`get_weather`, so
    callers never see an exception for a failing backend.
    """

    name = ""
    base_url = ""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = (base_url or self.base_url).rstrip("/")
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def get_weather(self, city: str) -> WeatherRecord:
        try:
            return self._fetch(city)
        except ProviderError as exc:
            self._log.warning("Backend %s failed for city %r: %s", self.name, city, exc)
            return WeatherRecord.failure(str(exc), source=self.name)

    def _fetch(self, city: str) -> WeatherRecord:
        raise NotImplementedError

    # helpers ------------------------------------------------------------
    def _request(self, method: str, url: str, *, step: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("%s request timed out", step, exc_info=exc)
            raise BackendCommunicationError() from exc
        except requests.RequestException as exc:
            self._log.error("%s request failed", step, exc_info=exc)
            raise BackendCommunicationError() from exc
        return self._handle_response(response, step)

    def _handle_response(self, response: Response, step: str) -> Response:
        if not 200 <= response.status_code < 300:
            self._log.error(
                "%s encountered status code error for %s: %s",
                self.name,
                step,
                response.status_code,
            )
            raise BackendCommunicationError()
        return response

    def _decode(self, response: Response, adapter: TypeAdapter, *, step: str, message: str = DECODE_ERROR) -> Any:
        try:
            return adapter.validate_python(response.json())
        except (ValueError, ValidationError) as exc:
            self._log.error("%s encountered error decoding response for %s: %s", self.name, step, exc)
            raise BackendDecodeError(message) from exc


__all__ = [
    "BackendCommunicationError",
    "BackendDecodeError",
    "COMMUNICATION_ERROR",
    "DECODE_ERROR",
    "ProviderError",
    "RequestConfig",
    "WeatherProvider",
]
