"""Report formatting for weather snapshots - pure functions for testability."""
from datetime import datetime
from typing import List, Optional

from weather_data import MainMeasurements, SystemInfo, WeatherSnapshot

MISSING_API_KEY_MESSAGE = "Not so fast, get your API Key first"
UNKNOWN_CITY = "City not found"
UNKNOWN_SKY = "no info"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %z"


def _or_default(value, default):
    """Substitute default only for absent (None) values."""
    return value if value is not None else default


def format_temperature(value: float) -> str:
    return f"{value:.2f}"


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


def format_report(snapshot: Optional[WeatherSnapshot], api_key: str) -> List[str]:
    """
    Render a snapshot as ordered report lines.

    Missing values are shown as defaults (0, placeholder text or the
    placeholder date) instead of dropping the line.

    Args:
        snapshot: Decoded snapshot, or None if nothing was decoded
        api_key: Configured API key; empty means it was never supplied

    Returns:
        List of lines; just the diagnostic line if api_key is empty
    """
    if api_key == "":
        return [MISSING_API_KEY_MESSAGE]
    if snapshot is None:
        return []

    main = _or_default(snapshot.main, MainMeasurements())
    sys_info = _or_default(snapshot.sys, SystemInfo())

    lines = [f"City: {_or_default(snapshot.city_name, UNKNOWN_CITY)}"]
    for condition in snapshot.weather or ():
        lines.append(f"Sky: {_or_default(condition.description, UNKNOWN_SKY)}")

    lines.extend([
        f"Temperature Celsius: {format_temperature(main.temp_celsius)}",
        f"Temperature Kelvin: {format_temperature(_or_default(main.temp_kelvin, 0.0))}",
        f"Temperature Fahrenheit: {format_temperature(main.temp_fahrenheit)}",
        f"Humidity: {_or_default(main.humidity, 0)}%",
        f"Min Temperature: {format_temperature(main.temp_min_celsius)}",
        f"Max Temperature: {format_temperature(main.temp_max_celsius)}",
        f"Date of Data Refresh: {format_timestamp(snapshot.observation_time)}",
        f"Sunrise: {format_timestamp(sys_info.sunrise_time)}",
        f"Sunset: {format_timestamp(sys_info.sunset_time)}",
    ])
    return lines
