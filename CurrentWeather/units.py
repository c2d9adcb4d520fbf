"""Unit conversions - pure functions over optional inputs."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

KELVIN_OFFSET = 273.15

EPOCH_ORIGIN = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Shown when the API omits an epoch field. Kept as a fixed, recognisable
# date rather than "now" so reports stay reproducible.
PLACEHOLDER_TIMESTAMP = datetime(2018, 7, 26, tzinfo=timezone.utc)


def celsius(kelvin: Optional[float]) -> float:
    """Convert Kelvin to Celsius; an absent value converts to 0."""
    if kelvin is None:
        return 0.0
    return kelvin - KELVIN_OFFSET


def fahrenheit(kelvin: Optional[float]) -> float:
    """Convert Kelvin to Fahrenheit; an absent value converts to 0."""
    if kelvin is None:
        return 0.0
    return (kelvin - KELVIN_OFFSET) * 1.8 + 32


def epoch_to_datetime(
    seconds: Optional[float],
    default: datetime = PLACEHOLDER_TIMESTAMP
) -> datetime:
    """
    Convert epoch seconds to an aware UTC datetime.

    Args:
        seconds: Seconds since 1970-01-01 UTC, or None
        default: Returned unchanged when seconds is None or outside the
            range datetime can represent

    Returns:
        datetime: EPOCH_ORIGIN + seconds
    """
    if seconds is None:
        return default
    try:
        return EPOCH_ORIGIN + timedelta(seconds=seconds)
    except (OverflowError, ValueError):
        logging.warning(f"Epoch value {seconds} out of range, using {default.isoformat()}")
        return default
