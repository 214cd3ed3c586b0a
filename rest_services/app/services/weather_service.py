"""
Client for the upstream weather API.

``WeatherService.query_weather`` performs one blocking ``GET`` against
the configured endpoint (OpenWeatherMap's current weather API by
default) with the city and API key as query parameters, then decodes
the JSON body into ``WeatherData``.  The request is not retried.

A non-2xx status is not an error by itself: its JSON body is decoded
like any other, so e.g. "city not found" yields empty fields.
Transport failures and undecodable bodies are raised as
``WeatherLookupError``; its message is safe to show to clients because
the API key is masked out of it.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from rest_services.app.schemas.weather import WeatherData


logger = logging.getLogger(__name__)


class WeatherLookupError(Exception):
    """Raised when the upstream weather API cannot be queried or decoded."""


class WeatherService:
    """Thin wrapper around a ``requests`` session for weather lookups."""

    def __init__(
        self,
        *,
        api_url: str,
        api_key: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the client.

        Args:
            api_url: Full URL of the upstream "current weather" endpoint.
            api_key: Key sent as the ``APPID`` query parameter.
            timeout: Seconds to wait for the upstream; ``None`` waits forever.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def _mask(self, message: str) -> str:
        if self.api_key:
            return message.replace(self.api_key, "***")
        return message

    def query_weather(self, city: str) -> WeatherData:
        """Fetch and trim the current weather for ``city``."""
        params = {"APPID": self.api_key, "q": city}
        logger.info("Querying upstream weather for %r", city)
        try:
            response = self.session.get(self.api_url, params=params, timeout=self.timeout)
            if response.status_code >= 400:
                # The body is still decoded; fields it lacks stay empty.
                logger.warning("Upstream weather API answered %s for %r", response.status_code, city)
            payload = response.json()
        except requests.RequestException as e:
            message = self._mask(str(e))
            logger.warning("Upstream weather request for %r failed: %s", city, message)
            raise WeatherLookupError(message) from e
        except ValueError as e:
            logger.warning("Upstream weather response for %r is not JSON: %s", city, e)
            raise WeatherLookupError(f"invalid JSON from weather API: {e}") from e

        try:
            return WeatherData.model_validate({} if payload is None else payload)
        except ValidationError as e:
            logger.warning("Upstream weather response for %r has unexpected shape", city)
            raise WeatherLookupError(f"unexpected weather API response: {e}") from e
