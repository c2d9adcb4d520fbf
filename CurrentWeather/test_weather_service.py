"""Tests for weather service."""
import asyncio

import pytest

from weather_data import WeatherSnapshot
from weather_provider import DecodeError, TransportError, WeatherProviderBase
from weather_service import WeatherService

URL = "https://api.example.com/weather?q=London,uk&APPID=abc"


class MockProvider(WeatherProviderBase):
    """Mock weather provider for testing."""

    def __init__(self, return_data=None, raise_error=None):
        self.return_data = return_data
        self.raise_error = raise_error
        self.call_count = 0
        self.urls = []

    async def fetch(self, url):
        self.call_count += 1
        self.urls.append(url)
        if self.raise_error:
            raise self.raise_error
        return self.return_data


def test_weather_service_refresh(sample_payload):
    """Test that refresh fetches, decodes and stores the snapshot."""
    provider = MockProvider(return_data=sample_payload)
    service = WeatherService(provider, URL)

    assert service.current is None

    snapshot = asyncio.run(service.refresh())

    assert provider.urls == [URL]
    assert snapshot.city_name == "London"
    assert service.current is snapshot
    assert service.error_message == ""


def test_weather_service_replaces_snapshot():
    provider = MockProvider(return_data=b'{"name": "London"}')
    service = WeatherService(provider, URL)
    asyncio.run(service.refresh())

    provider.return_data = b'{"cod": 200}'
    asyncio.run(service.refresh())

    assert service.current == WeatherSnapshot(status_code=200)


def test_weather_service_decode_error_clears_snapshot():
    """Test that a failed decode leaves no snapshot and records the error."""
    provider = MockProvider(return_data=b'{"name": "London"}')
    service = WeatherService(provider, URL)
    asyncio.run(service.refresh())

    provider.return_data = b"not json"
    with pytest.raises(DecodeError):
        asyncio.run(service.refresh())

    assert service.current is None
    assert service.error_message.startswith("Decoder error: payload is not valid JSON")


def test_weather_service_accumulates_error_messages():
    provider = MockProvider(return_data=b'{"main": {"temp": "hot"}}')
    service = WeatherService(provider, URL)

    for _ in range(2):
        with pytest.raises(DecodeError):
            asyncio.run(service.refresh())

    expected = "Decoder error: main.temp: expected number, got str"
    assert service.error_message == expected * 2


def test_weather_service_no_retry_on_transport_error():
    """Test that a transport failure is raised once and keeps the old snapshot."""
    provider = MockProvider(return_data=b'{"name": "London"}')
    service = WeatherService(provider, URL)
    previous = asyncio.run(service.refresh())

    provider.raise_error = TransportError("Network error: timed out")
    with pytest.raises(TransportError):
        asyncio.run(service.refresh())

    assert provider.call_count == 2
    assert service.current is previous
    assert service.error_message == ""
