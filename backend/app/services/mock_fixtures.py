# backend/app/services/mock_fixtures.py
"""
Demo dataset for the mock resolver.

To add a city, append a dict to MOCK_WEATHER_ENTRIES with every
WeatherReading field. The table key is derived from "city" (lower-cased),
so keys never need to be written by hand and must be unique.
"""
from types import MappingProxyType
from typing import Mapping

from backend.app.models.weather_reading import WeatherReading

MOCK_WEATHER_ENTRIES = (
    {
        "city": "London",
        "country": "UK",
        "temp": 18,
        "description": "partly cloudy",
        "icon": "02d",
        "feels_like": 20,
        "humidity": 65,
        "wind_speed": 3.5,
        "rain": None,
    },
    {
        "city": "Paris",
        "country": "FR",
        "temp": 22,
        "description": "clear sky",
        "icon": "01d",
        "feels_like": 24,
        "humidity": 45,
        "wind_speed": 2.1,
        "rain": None,
    },
    {
        "city": "Tokyo",
        "country": "JP",
        "temp": 28,
        "description": "light rain",
        "icon": "10d",
        "feels_like": 31,
        "humidity": 78,
        "wind_speed": 4.2,
        "rain": 2.5,
    },
)


def normalize_city(city: str) -> str:
    return city.lower()


def build_fixture_table(entries) -> Mapping[str, WeatherReading]:
    table = {}
    for entry in entries:
        reading = WeatherReading(**entry)
        key = normalize_city(reading.city)
        if key in table:
            raise ValueError(f"Duplicate mock weather entry for '{reading.city}'")
        table[key] = reading
    return MappingProxyType(table)


MOCK_WEATHER_TABLE = build_fixture_table(MOCK_WEATHER_ENTRIES)
