"""
open-meteo http client
"""

import logging
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import quote, quote_plus

import requests
from pydantic import ValidationError

import config
from models import Options, WeatherData

from .errors import DecodeError, RequestBuildError, ServerError, TransportError
from .urls import DEFAULT_HOST, DEFAULT_SCHEME, build_url

logger = logging.getLogger(__name__)


class OpenMeteoClient:
    """
    client for the open-meteo forecast, archive, seasonal and marine apis

    the api key and user agent are fixed at construction, the session can be
    replaced (e.g. with one that carries timeouts or test adapters)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        user_agent: str = config.DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
        scheme: str = DEFAULT_SCHEME,
        host: str = DEFAULT_HOST,
    ) -> None:
        self._api_key = api_key or None
        self._user_agent = user_agent
        self._scheme = scheme
        self._host = host
        self.session = session or requests.Session()

    @classmethod
    def from_env(cls, session: Optional[requests.Session] = None) -> "OpenMeteoClient":
        """build a client from OPEN_METEO_* environment variables"""
        settings = config.client_settings()
        return cls(
            api_key=settings["api_key"],
            user_agent=settings["user_agent"],
            session=session,
            host=settings["host"],
        )

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key

    @property
    def user_agent(self) -> str:
        return self._user_agent

    def url(self, options: Options, now: Optional[datetime] = None) -> str:
        """
        build the request url for options

        args:
            options: request options
            now: time used for the archive cut-over, defaults to the current time

        returns:
            absolute request url
        """
        if now is None:
            now = datetime.now(timezone.utc)
        return build_url(
            options,
            now,
            api_key=self._api_key,
            scheme=self._scheme,
            base_host=self._host,
        )

    def _redact(self, text: str) -> str:
        """mask the api key in text, both raw and form-encoded"""
        if not self._api_key:
            return text
        for secret in (quote_plus(self._api_key), quote(self._api_key, safe=""), self._api_key):
            text = text.replace(secret, "***")
        return text

    def get(self, options: Options) -> WeatherData:
        """
        fetch and decode weather data for options

        args:
            options: request options

        returns:
            decoded weather data

        raises:
            RequestBuildError: if no request can be built from the options
            TransportError: if the request fails before a response arrives
            ServerError: if the api answers with a non-2xx status
            DecodeError: if the body is not valid json or does not match the schema
        """
        url = self.url(options)
        logger.debug("GET %s", self._redact(url))

        try:
            request = self.session.prepare_request(
                requests.Request("GET", url, headers={"User-Agent": self._user_agent})
            )
            # an unusable scheme or host only surfaces when picking an adapter
            self.session.get_adapter(request.url)
            settings = self.session.merge_environment_settings(request.url, {}, None, None, None)
        except (requests.RequestException, ValueError) as exc:
            message = self._redact(f"creating request: {exc}")
            logger.error("Failed to build request for %s: %s", self._redact(url), message)
            raise RequestBuildError(message) from exc

        try:
            response = self.session.send(request, **settings)
        except requests.RequestException as exc:
            message = self._redact(f"sending request: {exc}")
            logger.error("Request failed: %s", message)
            raise TransportError(message) from exc

        if not 200 <= response.status_code < 300:
            logger.error("Open-Meteo returned %s: %s", response.status_code, response.text)
            raise ServerError(response.status_code, response.reason)

        try:
            return WeatherData.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.error("Failed to decode response", exc_info=exc)
            raise DecodeError(f"decoding response: {exc}") from exc


__all__ = ["OpenMeteoClient"]
