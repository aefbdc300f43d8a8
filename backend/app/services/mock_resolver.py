# backend/app/services/mock_resolver.py
import asyncio
import logging
import random

from backend.app.core.config import MOCK_LOOKUP_DELAY_SECONDS
from backend.app.models.weather_reading import WeatherReading
from backend.app.services.mock_fixtures import MOCK_WEATHER_TABLE, normalize_city

logger = logging.getLogger(__name__)

UNKNOWN_COUNTRY = "Unknown"
FALLBACK_DESCRIPTION = "clear sky"
FALLBACK_ICON = "01d"


def resolve_mock_weather(city: str, rng=None) -> WeatherReading:
    """
    Returns the fixture reading for a known city (case-insensitive), or a
    synthesized one for anything else. Never fails and never touches the
    network. Synthesized readings differ from call to call.
    """
    known = MOCK_WEATHER_TABLE.get(normalize_city(city))
    if known is not None:
        return known

    rng = rng or random
    return WeatherReading(
        city=city, # As typed
        country=UNKNOWN_COUNTRY,
        temp=rng.randrange(0, 35),
        feels_like=rng.randrange(2, 37),
        humidity=rng.randrange(0, 100),
        description=FALLBACK_DESCRIPTION,
        icon=FALLBACK_ICON,
        wind_speed=rng.randrange(0, 10),
        rain=None,
    )


def suggestions() -> list[str]:
    """Display names of the cities the mock resolver knows."""
    return [reading.city for reading in MOCK_WEATHER_TABLE.values()]


class MockWeatherResolver:
    """
    Simulates a slow weather lookup for the demo UI.

    Each lookup waits `delay_seconds` before resolving. Lookups are numbered;
    starting a new one cancels the pending one, and only the most recently
    issued lookup may update `reading` and `loading`.
    """

    def __init__(self, delay_seconds: float = MOCK_LOOKUP_DELAY_SECONDS, rng=None):
        self.delay_seconds = delay_seconds
        self._rng = rng
        self._sequence = 0
        self._pending: asyncio.Task | None = None

        self.reading: WeatherReading | None = None
        self.loading = False

    @property
    def latest_sequence(self) -> int:
        return self._sequence

    async def _resolve_after_delay(self, city: str) -> WeatherReading:
        await asyncio.sleep(self.delay_seconds)
        return resolve_mock_weather(city, rng=self._rng)

    async def lookup(self, city: str | None) -> WeatherReading | None:
        """
        Resolves a city after the artificial delay.

        Returns the reading, or None when the city is blank or the lookup was
        superseded by a newer one before it resolved.
        """
        if not city:
            return None

        self._sequence += 1
        sequence = self._sequence

        if self._pending is not None and not self._pending.done():
            logger.debug("Cancelling superseded mock lookup (now #%d)", sequence)
            self._pending.cancel()

        self.loading = True
        self.reading = None

        task = asyncio.ensure_future(self._resolve_after_delay(city))
        self._pending = task
        try:
            reading = await task
        except asyncio.CancelledError:
            if sequence != self._sequence:
                return None
            # Cancelled by our own caller, not by a newer lookup
            self.loading = False
            raise

        if sequence != self._sequence:
            logger.debug("Discarding stale mock lookup #%d for %r", sequence, city)
            return None

        self.reading = reading
        self.loading = False
        logger.info("Mock lookup #%d resolved %r", sequence, reading.city)
        return reading
