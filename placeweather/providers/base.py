from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Optional

import requests
from requests import Response


logger = logging.getLogger(__name__)


class ProviderError(RuntimeError):
    """Base provider error."""


class TransportFailure(ProviderError):
    """Raised when the request could not be completed or decoded."""


class QuotaExceeded(ProviderError):
    """Raised when a provider reports a quota/usage limit issue."""


@dataclass
class RequestConfig:
    timeout: float = 10.0


class HttpProvider:
    """Base class that owns the HTTP session and error mapping for providers."""

    name = "http"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
        testing_mode: bool = False,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._testing_mode = testing_mode
        self._log = logging.getLogger(self.__class__.__name__)

    def _handle_response(self, response: Response) -> Response:
        if response.status_code == 429:
            self._log.warning("Quota exceeded: %s", response.text)
            raise QuotaExceeded("quota exceeded")
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text)
            raise ProviderError(f"HTTP {response.status_code}")
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out: %s", redact(str(exc)))
            raise TransportFailure("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed: %s", redact(str(exc)))
            raise TransportFailure("request failed") from exc
        self._log_response(response)
        return self._handle_response(response)

    def _get_json(self, url: str, params: dict) -> Any:
        response = self._request("GET", url, params=params)
        try:
            return response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise TransportFailure("invalid json") from exc

    def _log_response(self, response: Response) -> None:
        if not self._testing_mode:
            return
        logger.info(
            "%s response",
            self.name,
            extra={"url": redact(response.url), "status": response.status_code, "body": response.text[:500]},
        )


_APPID = re.compile(r"(appid=)[^&\s'\")]+")


def redact(text: Optional[str]) -> Optional[str]:
    """Mask every ``appid`` query value in a URL or exception message."""
    if not text:
        return text
    return _APPID.sub(r"\1***", text)


def is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def number_or_none(value: object) -> Optional[float]:
    if is_number(value):
        return value  # type: ignore[return-value]
    return None


def mapping(value: object) -> dict:
    if isinstance(value, dict):
        return value
    return {}


def first_item(value: object) -> dict:
    if isinstance(value, list) and value and isinstance(value[0], dict):
        return value[0]
    return {}


def epoch_or_none(value: object) -> Optional[int]:
    if is_number(value):
        return int(value)  # type: ignore[arg-type]
    return None


__all__ = [
    "HttpProvider",
    "ProviderError",
    "QuotaExceeded",
    "RequestConfig",
    "TransportFailure",
    "epoch_or_none",
    "first_item",
    "is_number",
    "mapping",
    "number_or_none",
    "redact",
]
