# backend/app/services/weather_proxy.py
import logging

import requests
from pydantic import ValidationError

from backend.app.core.config import (
    OPENWEATHER_API_URL,
    OPENWEATHER_UNITS,
    WEATHER_API_TIMEOUT,
    get_weather_api_key,
)
from backend.app.core.errors import ApiKeyMissingError, CityRequiredError, UpstreamError
from backend.app.models.weather_reading import WeatherReading
from backend.app.schemas.openweather import OpenWeatherCurrent, OpenWeatherErrorPayload

logger = logging.getLogger(__name__)


def fetch_raw_weather_data(city: str, api_key: str) -> requests.Response:
    """
    Issues the single outbound GET to OpenWeatherMap for a city.
    No retries: a failure is reported to the caller as-is.
    """
    params = {
        "q": city, # requests URL-escapes query params
        "appid": api_key,
        "units": OPENWEATHER_UNITS,
    }
    logger.info("Fetching current weather for %r from %s", city, OPENWEATHER_API_URL)
    response = requests.get(OPENWEATHER_API_URL, params=params, timeout=WEATHER_API_TIMEOUT)
    logger.info("Provider responded with HTTP %s for %r", response.status_code, city)
    return response


def fetch_weather(city: str | None) -> WeatherReading:
    """
    Looks up the current weather for a city through the provider and
    returns it as a WeatherReading.

    Raises:
        CityRequiredError: city is missing or empty
        ApiKeyMissingError: WEATHER_API_KEY is not configured
        UpstreamError: the provider rejected the query, or the call or its
            payload could not be processed
    """
    if not city:
        raise CityRequiredError()

    api_key = get_weather_api_key()
    if not api_key:
        raise ApiKeyMissingError()

    try:
        response = fetch_raw_weather_data(city, api_key)
    except requests.exceptions.RequestException as e:
        # Exception text carries the request URL, appid included
        logger.error("Network error fetching weather for %r: %s", city, type(e).__name__)
        raise UpstreamError() from e

    try:
        data = response.json()
    except ValueError as e:
        # Includes requests.exceptions.JSONDecodeError
        logger.error("Provider response for %r was not valid JSON: %s", city, type(e).__name__)
        raise UpstreamError() from e

    if not response.ok:
        raise _provider_error(city, response.status_code, data)

    try:
        return OpenWeatherCurrent.model_validate(data).to_reading()
    except ValidationError as e:
        logger.error("Provider payload for %r failed validation: %s", city, e)
        raise UpstreamError() from e


def _provider_error(city: str, http_status: int, data) -> UpstreamError:
    try:
        payload = OpenWeatherErrorPayload.model_validate(data)
    except ValidationError:
        payload = OpenWeatherErrorPayload()

    status_code = payload.status_code(http_status)
    message = payload.message or "API error"
    logger.warning("Provider error for %r: %s %s", city, status_code, message)
    return UpstreamError(message=message, status_code=status_code)
