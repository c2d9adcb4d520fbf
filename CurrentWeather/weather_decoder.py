"""Decode raw current-weather JSON into a WeatherSnapshot."""
import json
import logging
import math
from typing import Any, Dict, Optional, Union

from weather_data import (
    Clouds,
    Coordinates,
    MainMeasurements,
    SystemInfo,
    WeatherCondition,
    WeatherSnapshot,
    Wind,
)
from weather_provider import DecodeError


def _reject_constant(token: str):
    raise DecodeError(f"payload is not valid JSON: unexpected token {token}")


def _parse_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise DecodeError(f"payload is not valid JSON: number {text} out of range")
    return value


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def _number(obj: Dict[str, Any], key: str, path: str) -> Optional[float]:
    value = obj.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"{path}{key}: expected number, got {_type_name(value)}")
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    if not math.isfinite(number):
        raise DecodeError(f"{path}{key}: expected number, got non-finite")
    return number


def _integer(obj: Dict[str, Any], key: str, path: str) -> Optional[int]:
    value = obj.get(key)
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"{path}{key}: expected integer, got {_type_name(value)}")
    return value


def _string(obj: Dict[str, Any], key: str, path: str) -> Optional[str]:
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DecodeError(f"{path}{key}: expected string, got {_type_name(value)}")
    return value


def _object(obj: Dict[str, Any], key: str, path: str) -> Optional[Dict[str, Any]]:
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise DecodeError(f"{path}{key}: expected object, got {_type_name(value)}")
    return value


def _decode_conditions(data: Dict[str, Any]):
    items = data.get("weather")
    if items is None:
        return None
    if not isinstance(items, list):
        raise DecodeError(f"weather: expected array, got {_type_name(items)}")

    conditions = []
    for index, item in enumerate(items):
        path = f"weather[{index}]."
        if not isinstance(item, dict):
            raise DecodeError(f"weather[{index}]: expected object, got {_type_name(item)}")
        conditions.append(WeatherCondition(
            id=_integer(item, "id", path),
            main=_string(item, "main", path),
            description=_string(item, "description", path),
            icon=_string(item, "icon", path),
        ))
    return tuple(conditions)


def decode_snapshot(raw: Union[bytes, str]) -> WeatherSnapshot:
    """
    Map a raw current-weather payload onto a WeatherSnapshot.

    Missing keys and null values decode to None. Keys are matched exactly;
    unknown keys are ignored.

    Args:
        raw: Response body, UTF-8 bytes or text

    Returns:
        WeatherSnapshot: Decoded snapshot

    Raises:
        DecodeError: If the payload is not a JSON object or a field has an
            incompatible type
    """
    try:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        data = json.loads(raw, parse_constant=_reject_constant, parse_float=_parse_float)
    except (UnicodeDecodeError, ValueError) as e:
        raise DecodeError(f"payload is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(f"expected a JSON object, got {_type_name(data)}")

    logging.debug(f"Decoding payload keys: {list(data.keys())}")

    coord = _object(data, "coord", "")
    main = _object(data, "main", "")
    wind = _object(data, "wind", "")
    clouds = _object(data, "clouds", "")
    sys_info = _object(data, "sys", "")

    return WeatherSnapshot(
        weather=_decode_conditions(data),
        coord=Coordinates(
            lon=_number(coord, "lon", "coord."),
            lat=_number(coord, "lat", "coord."),
        ) if coord is not None else None,
        base=_string(data, "base", ""),
        main=MainMeasurements(
            temp_kelvin=_number(main, "temp", "main."),
            pressure=_integer(main, "pressure", "main."),
            humidity=_integer(main, "humidity", "main."),
            temp_min_kelvin=_number(main, "temp_min", "main."),
            temp_max_kelvin=_number(main, "temp_max", "main."),
        ) if main is not None else None,
        visibility=_integer(data, "visibility", ""),
        wind=Wind(
            speed=_number(wind, "speed", "wind."),
            deg=_integer(wind, "deg", "wind."),
        ) if wind is not None else None,
        clouds=Clouds(
            all=_integer(clouds, "all", "clouds."),
        ) if clouds is not None else None,
        dt=_number(data, "dt", ""),
        sys=SystemInfo(
            type=_integer(sys_info, "type", "sys."),
            id=_integer(sys_info, "id", "sys."),
            message=_number(sys_info, "message", "sys."),
            country=_string(sys_info, "country", "sys."),
            sunrise=_number(sys_info, "sunrise", "sys."),
            sunset=_number(sys_info, "sunset", "sys."),
        ) if sys_info is not None else None,
        city_id=_integer(data, "id", ""),
        city_name=_string(data, "name", ""),
        status_code=_integer(data, "cod", ""),
    )
