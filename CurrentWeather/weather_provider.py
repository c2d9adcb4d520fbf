"""Weather provider abstraction - allows swapping the HTTP transport."""
from abc import ABC, abstractmethod


class WeatherProviderBase(ABC):
    """Abstract base class for fetching raw weather payloads."""

    @abstractmethod
    async def fetch(self, url: str) -> bytes:
        """
        Fetch the raw response body for a request URL.

        Completes exactly once, either with the body bytes or by raising.

        Args:
            url: Fully built request URL

        Returns:
            bytes: Raw response body

        Raises:
            TransportError: If no response body could be obtained
        """
        pass


class WeatherProviderError(Exception):
    """Base exception for every weather fetch/decode failure."""
    pass


class ConfigurationError(WeatherProviderError):
    """Raised when the configured endpoint cannot form a request URL."""
    pass


class TransportError(WeatherProviderError):
    """Raised when the HTTP request produced no response body."""
    pass


class DecodeError(WeatherProviderError):
    """Raised when a payload is not JSON or a field has the wrong type."""
    pass
