"""Print the current weather for a location."""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from openweather_provider import OpenWeatherProvider, build_request_url
from weather_config import WeatherConfig, load_config
from weather_provider import ConfigurationError, DecodeError, TransportError
from weather_report import format_report
from weather_service import WeatherService


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("Current weather report")
    parser.add_argument("--location", help="Location query, e.g. 'London,uk'")
    parser.add_argument("--base-url", help="Current weather endpoint")
    parser.add_argument("--env-file", help="Path to a .env file")
    parser.add_argument("--log-file")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def build_weather_service(config: WeatherConfig) -> WeatherService:
    try:
        url = build_request_url(config.base_url, config.location, config.api_key)
    except ConfigurationError as exc:
        raise SystemExit(str(exc)) from exc

    service = WeatherService(provider=OpenWeatherProvider(), url=url)
    logging.info("Weather service ready (location=%s)", config.location)
    return service


def run(config: WeatherConfig) -> int:
    """Fetch once, print the report and return the exit status."""
    service = build_weather_service(config)
    if not config.has_api_key:
        logging.warning("OPENWEATHER_API_KEY is not set, skipping request")
        for line in format_report(None, config.api_key):
            print(line)
        return 0

    try:
        asyncio.run(service.refresh())
    except TransportError as err:
        logging.error("Weather fetch failed: %s", err)
        print(err)
        return 1
    except DecodeError:
        print(service.error_message)
        return 1

    for line in format_report(service.current, config.api_key):
        print(line)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    config = load_config(args.env_file, base_url=args.base_url, location=args.location)
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
