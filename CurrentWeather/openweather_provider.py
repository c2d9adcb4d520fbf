"""OpenWeather Current Weather API request building and fetching."""
import asyncio
import logging
from urllib.parse import urlencode, urlsplit, urlunsplit

import requests

from weather_provider import ConfigurationError, TransportError, WeatherProviderBase

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather?"
DEFAULT_TIMEOUT = 10  # seconds


def build_request_url(base_url: str, location: str, api_key: str) -> str:
    """
    Build the request URL for a location query.

    Appends ``q=<location>`` then ``APPID=<key>`` after any query items
    already present on the base URL.

    Raises:
        ConfigurationError: If base_url is not an absolute http(s) URL
    """
    try:
        parts = urlsplit(base_url)
    except ValueError as e:
        raise ConfigurationError(f"Invalid base URL {base_url!r}: {e}") from e

    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigurationError(f"Invalid base URL {base_url!r}")

    query = urlencode([("q", location), ("APPID", api_key)], safe=",")
    if parts.query:
        query = f"{parts.query}&{query}"
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def redact_url(url: str) -> str:
    """Return url with the APPID value masked, for logging."""
    parts = urlsplit(url)
    items = [
        item if not item.startswith("APPID=") else "APPID=***"
        for item in parts.query.split("&")
    ]
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "&".join(items), parts.fragment))


class OpenWeatherProvider(WeatherProviderBase):
    """
    Weather provider fetching from the OpenWeather Current Weather API.

    Uses the free Current Weather API: https://openweathermap.org/current
    The blocking ``requests`` call runs in the event loop's default
    executor, so awaiting ``fetch`` does not block other tasks.
    """

    def __init__(self, timeout: int = DEFAULT_TIMEOUT):
        """
        Initialize OpenWeather provider.

        Args:
            timeout: HTTP request timeout in seconds
        """
        self.timeout = timeout

    async def fetch(self, url: str) -> bytes:
        """
        Issue a single GET request for url.

        Returns:
            bytes: Raw response body; status code and headers are not checked

        Raises:
            TransportError: On DNS, connection or timeout failures
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._get, url)

    def _get(self, url: str) -> bytes:
        try:
            logging.info(f"Making OpenWeather API request: {redact_url(url)}")
            response = requests.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise TransportError(f"Network error: {str(e)}") from e

        logging.info(f"API response status: {response.status_code}")
        logging.debug(f"Response headers: {response.headers}")
        body = response.content
        logging.debug(f"API response body (truncated): {body[:500]!r}")
        return body
