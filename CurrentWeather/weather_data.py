"""Weather snapshot model - immutable mirror of the current weather payload."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from units import celsius, epoch_to_datetime, fahrenheit


@dataclass(frozen=True)
class WeatherCondition:
    """One entry of the API's 'weather' array."""
    id: Optional[int] = None
    main: Optional[str] = None  # e.g., "Clouds", "Rain", "Clear"
    description: Optional[str] = None  # e.g., "broken clouds"
    icon: Optional[str] = None


@dataclass(frozen=True)
class Coordinates:
    lon: Optional[float] = None
    lat: Optional[float] = None


@dataclass(frozen=True)
class MainMeasurements:
    """The 'main' block. Temperatures are in Kelvin (API default units)."""
    temp_kelvin: Optional[float] = None
    pressure: Optional[int] = None  # hPa
    humidity: Optional[int] = None  # percentage
    temp_min_kelvin: Optional[float] = None
    temp_max_kelvin: Optional[float] = None

    @property
    def temp_celsius(self) -> float:
        return celsius(self.temp_kelvin)

    @property
    def temp_fahrenheit(self) -> float:
        return fahrenheit(self.temp_kelvin)

    @property
    def temp_min_celsius(self) -> float:
        return celsius(self.temp_min_kelvin)

    @property
    def temp_min_fahrenheit(self) -> float:
        return fahrenheit(self.temp_min_kelvin)

    @property
    def temp_max_celsius(self) -> float:
        return celsius(self.temp_max_kelvin)

    @property
    def temp_max_fahrenheit(self) -> float:
        return fahrenheit(self.temp_max_kelvin)


@dataclass(frozen=True)
class Wind:
    speed: Optional[float] = None
    deg: Optional[int] = None


@dataclass(frozen=True)
class Clouds:
    all: Optional[int] = None  # percentage


@dataclass(frozen=True)
class SystemInfo:
    """The 'sys' block. Sunrise/sunset are epoch seconds (UTC)."""
    type: Optional[int] = None
    id: Optional[int] = None
    message: Optional[float] = None
    country: Optional[str] = None
    sunrise: Optional[float] = None
    sunset: Optional[float] = None

    @property
    def sunrise_time(self) -> datetime:
        return epoch_to_datetime(self.sunrise)

    @property
    def sunset_time(self) -> datetime:
        return epoch_to_datetime(self.sunset)


@dataclass(frozen=True)
class WeatherSnapshot:
    """
    Current weather for one location at one point in time.

    Every field is optional because the API may omit any of them. Absence
    is kept as None here; defaults are only substituted when rendering.
    """
    weather: Optional[Tuple[WeatherCondition, ...]] = None
    coord: Optional[Coordinates] = None
    base: Optional[str] = None  # internal station info
    main: Optional[MainMeasurements] = None
    visibility: Optional[int] = None
    wind: Optional[Wind] = None
    clouds: Optional[Clouds] = None
    dt: Optional[float] = None  # observation time, epoch seconds
    sys: Optional[SystemInfo] = None
    city_id: Optional[int] = None
    city_name: Optional[str] = None
    status_code: Optional[int] = None  # 'cod'

    @property
    def observation_time(self) -> datetime:
        return epoch_to_datetime(self.dt)
