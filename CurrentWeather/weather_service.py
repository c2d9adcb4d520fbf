"""Weather service holding the most recent snapshot."""
import logging
from typing import Optional

from weather_data import WeatherSnapshot
from weather_decoder import decode_snapshot
from weather_provider import DecodeError, WeatherProviderBase


class WeatherService:
    """
    Runs fetch -> decode for one request URL and keeps the result.

    At most one snapshot is held. A refresh that fetches a body clears the
    slot before decoding, so a failed decode leaves it empty. There is no
    retry and no caching.
    """

    def __init__(self, provider: WeatherProviderBase, url: str):
        """
        Initialize weather service.

        Args:
            provider: Provider used to fetch the raw payload
            url: Fully built request URL
        """
        self.provider = provider
        self.url = url

        self.current: Optional[WeatherSnapshot] = None
        self.error_message = ""

    async def refresh(self) -> WeatherSnapshot:
        """
        Fetch and decode a new snapshot, replacing the current one.

        Returns:
            WeatherSnapshot: The newly decoded snapshot

        Raises:
            TransportError: If the fetch failed (current snapshot untouched)
            DecodeError: If the body could not be decoded (slot left empty)
        """
        logging.info("Fetching weather data from provider...")
        raw = await self.provider.fetch(self.url)
        logging.debug(f"Received {len(raw)} bytes")

        self.current = None
        try:
            snapshot = decode_snapshot(raw)
        except DecodeError as e:
            self.error_message += f"Decoder error: {e}"
            logging.error(self.error_message)
            raise

        logging.info(f"Status: {snapshot.status_code or 0}")
        self.current = snapshot
        return snapshot
