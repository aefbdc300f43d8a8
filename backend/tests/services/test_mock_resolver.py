# backend/tests/services/test_mock_resolver.py
import asyncio
import random

import pytest

from backend.app.models.weather_reading import WeatherReading
from backend.app.services.mock_fixtures import MOCK_WEATHER_TABLE, build_fixture_table
from backend.app.services.mock_resolver import MockWeatherResolver, resolve_mock_weather, suggestions


def test_known_city_is_case_insensitive():
    reading = resolve_mock_weather("LONDON")

    assert reading.city == "London"
    assert reading.country == "UK"
    assert reading.temp == 18
    assert reading.description == "partly cloudy"
    assert reading.rain is None


def test_known_city_is_idempotent():
    assert resolve_mock_weather("paris") == resolve_mock_weather("paris")
    assert resolve_mock_weather("paris") == MOCK_WEATHER_TABLE["paris"]


def test_tokyo_fixture_has_rain():
    reading = resolve_mock_weather("Tokyo")
    assert reading.rain == pytest.approx(2.5)
    assert reading.condition == "rainy"


def test_unknown_city_is_synthesized():
    reading = resolve_mock_weather("Narnia")

    assert reading.city == "Narnia" # As typed, not lower-cased
    assert reading.country == "Unknown"
    assert reading.rain is None
    assert reading.description == "clear sky"
    assert reading.icon == "01d"
    assert 0 <= reading.temp < 35
    assert 2 <= reading.feels_like < 37
    assert 0 <= reading.humidity < 100
    assert 0 <= reading.wind_speed < 10
    assert all(isinstance(v, int) for v in (reading.temp, reading.feels_like, reading.humidity, reading.wind_speed))


def test_unknown_city_values_vary_between_calls():
    rng = random.Random(1234)
    readings = [resolve_mock_weather("Narnia", rng=rng) for _ in range(20)]
    assert len({(r.temp, r.feels_like, r.humidity, r.wind_speed) for r in readings}) > 1


def test_fixture_table_is_read_only():
    with pytest.raises(TypeError):
        MOCK_WEATHER_TABLE["narnia"] = resolve_mock_weather("Narnia")


def test_fixture_table_rejects_duplicate_cities():
    entry = {
        "city": "Oslo", "country": "NO", "temp": 3, "feels_like": 0, "humidity": 80,
        "description": "light snow", "icon": "13d", "wind_speed": 5.0, "rain": None,
    }
    with pytest.raises(ValueError):
        build_fixture_table([entry, dict(entry, city="OSLO")])


def test_suggestions_lists_known_cities():
    assert suggestions() == ["London", "Paris", "Tokyo"]


def test_lookup_applies_result_after_delay():
    async def scenario():
        resolver = MockWeatherResolver(delay_seconds=0.01)
        task = asyncio.ensure_future(resolver.lookup("paris"))
        await asyncio.sleep(0)
        assert resolver.loading is True
        assert resolver.reading is None
        reading = await task
        return resolver, reading

    resolver, reading = asyncio.run(scenario())

    assert isinstance(reading, WeatherReading)
    assert reading.city == "Paris"
    assert resolver.reading == reading
    assert resolver.loading is False


def test_blank_lookup_is_a_no_op():
    async def scenario():
        resolver = MockWeatherResolver(delay_seconds=0)
        result = await resolver.lookup("")
        return resolver, result

    resolver, result = asyncio.run(scenario())

    assert result is None
    assert resolver.reading is None
    assert resolver.loading is False
    assert resolver.latest_sequence == 0


def test_most_recent_lookup_wins():
    async def scenario():
        resolver = MockWeatherResolver(delay_seconds=0.05)
        first = asyncio.ensure_future(resolver.lookup("London"))
        await asyncio.sleep(0)
        second = asyncio.ensure_future(resolver.lookup("Tokyo"))
        return resolver, await first, await second

    resolver, first, second = asyncio.run(scenario())

    assert first is None # Superseded before it resolved
    assert second.city == "Tokyo"
    assert resolver.reading.city == "Tokyo"
    assert resolver.loading is False
    assert resolver.latest_sequence == 2


def test_sequential_lookups_each_apply():
    async def scenario():
        resolver = MockWeatherResolver(delay_seconds=0)
        first = await resolver.lookup("London")
        second = await resolver.lookup("Paris")
        return resolver, first, second

    resolver, first, second = asyncio.run(scenario())

    assert first.city == "London"
    assert second.city == "Paris"
    assert resolver.reading.city == "Paris"


def test_new_lookup_cancels_pending_one():
    async def scenario():
        resolver = MockWeatherResolver(delay_seconds=0.05)
        first = asyncio.ensure_future(resolver.lookup("London"))
        await asyncio.sleep(0)
        first_pending = resolver._pending
        second = asyncio.ensure_future(resolver.lookup("Tokyo"))
        await asyncio.sleep(0)
        second_pending = resolver._pending
        return first_pending, second_pending, await first, await second

    first_pending, second_pending, first, second = asyncio.run(scenario())

    assert first_pending is not None
    assert first_pending is not second_pending
    assert first_pending.cancelled()
    assert not second_pending.cancelled()
    assert first is None
    assert second.city == "Tokyo"


def test_lookup_cancelled_by_caller_clears_loading():
    async def scenario():
        resolver = MockWeatherResolver(delay_seconds=5)
        task = asyncio.ensure_future(resolver.lookup("Paris"))
        await asyncio.sleep(0)
        assert resolver.loading is True
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        return resolver

    resolver = asyncio.run(scenario())

    assert resolver.loading is False
    assert resolver.reading is None
    assert resolver._pending.cancelled()
