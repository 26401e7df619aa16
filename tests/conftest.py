"""Pytest configuration and fixtures."""

import copy

import pytest

LONDON_WEATHER = {
    "coord": {"lon": -0.13, "lat": 51.5},
    "weather": [{"id": 300, "main": "Drizzle", "description": "light intensity drizzle"}],
    "base": "stations",
    "main": {
        "temp": 280.5,
        "pressure": 1012,
        "humidity": 81,
        "temp_min": 278,
        "temp_max": 282,
    },
    "visibility": 10000,
    "wind": {"speed": 4.1, "deg": 80},
    "dt": 1609470000,
    "sys": {
        "type": 1,
        "id": 5091,
        "country": "GB",
        "sunrise": 1609459200,
        "sunset": 1609488000,
    },
    "id": 2643743,
    "name": "London",
    "cod": 200,
}

LONDON_CITY = {
    "id": 2643743,
    "name": "London",
    "coord": {"lat": 51.5, "lon": -0.13},
    "country": "GB",
    "population": 1000000,
    "timezone": 0,
}


@pytest.fixture
def weather_payload():
    """Complete current-weather object for London."""
    return copy.deepcopy(LONDON_WEATHER)


@pytest.fixture
def city_payload():
    """Forecast city object for London."""
    return copy.deepcopy(LONDON_CITY)


@pytest.fixture
def forecast_payload():
    """Forecast object with two fully populated entries."""
    second = copy.deepcopy(LONDON_WEATHER)
    second["dt"] = 1609480800
    second["main"]["temp"] = 281.9
    return {
        "cod": "200",
        "message": 0,
        "cnt": 2,
        "list": [copy.deepcopy(LONDON_WEATHER), second],
        "city": copy.deepcopy(LONDON_CITY),
    }
