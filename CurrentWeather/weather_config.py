"""Configuration for the current weather report."""
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from openweather_provider import DEFAULT_BASE_URL

DEFAULT_LOCATION = "London,uk"


@dataclass(frozen=True)
class WeatherConfig:
    """Explicit request configuration; an empty api_key means 'not supplied'."""
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    location: str = DEFAULT_LOCATION

    @property
    def has_api_key(self) -> bool:
        return self.api_key != ""


def load_config(
    env_file: Optional[str] = None,
    base_url: Optional[str] = None,
    location: Optional[str] = None
) -> WeatherConfig:
    """
    Load configuration from the environment (and a .env file, if present).

    Explicit arguments take precedence over environment variables.
    """
    load_dotenv(env_file)
    config = WeatherConfig(
        api_key=os.getenv("OPENWEATHER_API_KEY", ""),
        base_url=base_url or os.getenv("OPENWEATHER_BASE_URL") or DEFAULT_BASE_URL,
        location=location or os.getenv("OPENWEATHER_LOCATION") or DEFAULT_LOCATION,
    )
    logging.info(
        "Configuration loaded: location=%s base_url=%s api_key=%s",
        config.location,
        config.base_url,
        "set" if config.has_api_key else "missing",
    )
    return config
