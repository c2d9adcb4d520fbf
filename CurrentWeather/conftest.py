"""Shared fixtures for current weather tests."""
import json

import pytest


@pytest.fixture
def sample_openweather_response():
    """Sample OpenWeather Current Weather API response (standard units)."""
    return {
        "coord": {"lon": -0.13, "lat": 51.51},
        "weather": [
            {
                "id": 803,
                "main": "Clouds",
                "description": "broken clouds",
                "icon": "04d"
            },
            {
                "id": 701,
                "main": "Mist",
                "description": "mist",
                "icon": "50d"
            }
        ],
        "base": "stations",
        "main": {
            "temp": 292.55,
            "pressure": 1014,
            "humidity": 89,
            "temp_min": 291.15,
            "temp_max": 294.15
        },
        "visibility": 10000,
        "wind": {"speed": 3.13, "deg": 93},
        "clouds": {"all": 53},
        "dt": 0,
        "sys": {
            "type": 1,
            "id": 5091,
            "message": 0.0103,
            "country": "GB",
            "sunrise": 3600,
            "sunset": 7200
        },
        "id": 2643743,
        "name": "London",
        "cod": 200
    }


@pytest.fixture
def sample_payload(sample_openweather_response):
    """Sample response as raw body bytes."""
    return json.dumps(sample_openweather_response).encode("utf-8")
