# backend/app/api/weather.py
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from backend.app.core.config import MOCK_LOOKUP_DELAY_SECONDS
from backend.app.core.errors import CityRequiredError, WeatherLookupError
from backend.app.models.weather_reading import DERIVED_FIELDS
from backend.app.services.mock_resolver import MockWeatherResolver
from backend.app.services.weather_proxy import fetch_weather

router = APIRouter()


async def weather_lookup_error_handler(request: Request, exc: WeatherLookupError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@router.get("/weather")
def get_weather(city: str | None = None):
    reading = fetch_weather(city)
    return reading.model_dump(exclude=DERIVED_FIELDS, exclude_none=True)


@router.get("/weather/mock")
async def get_mock_weather(city: str | None = None):
    if not city:
        raise CityRequiredError()
    resolver = MockWeatherResolver(delay_seconds=MOCK_LOOKUP_DELAY_SECONDS)
    reading = await resolver.lookup(city)
    return reading.model_dump()
