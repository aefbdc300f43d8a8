# backend/app/schemas/openweather.py
from pydantic import BaseModel, ConfigDict, Field

from backend.app.models.weather_reading import WeatherReading

# --- Pydantic Models for the OpenWeatherMap current-weather payload ---
# Only the fields the proxy reads are declared; everything else is ignored.
# Blocks the provider may omit (sys, wind, rain) are optional; the rest are required.


class _ProviderModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class OpenWeatherMain(_ProviderModel):
    temp: float
    feels_like: float
    humidity: float


class OpenWeatherCondition(_ProviderModel):
    description: str
    icon: str


class OpenWeatherSys(_ProviderModel):
    country: str | None = None


class OpenWeatherWind(_ProviderModel):
    speed: float | None = None


class OpenWeatherRain(_ProviderModel):
    one_hour: float | None = Field(None, alias="1h")


class OpenWeatherCurrent(_ProviderModel):
    name: str
    main: OpenWeatherMain
    weather: list[OpenWeatherCondition] = Field(..., min_length=1)
    sys: OpenWeatherSys | None = None
    wind: OpenWeatherWind | None = None
    rain: OpenWeatherRain | None = None

    def to_reading(self) -> WeatherReading:
        condition = self.weather[0]

        country = self.sys.country if self.sys is not None else None
        wind_speed = self.wind.speed if self.wind is not None else None

        # A missing or zero 1h volume both mean "no precipitation"
        rain = 0
        if self.rain is not None and self.rain.one_hour:
            rain = self.rain.one_hour

        return WeatherReading(
            city=self.name,
            country=country,
            temp=self.main.temp,
            feels_like=self.main.feels_like,
            humidity=self.main.humidity,
            description=condition.description,
            icon=condition.icon,
            wind_speed=wind_speed,
            rain=rain,
        )


class OpenWeatherErrorPayload(_ProviderModel):
    """Body the provider sends with non-2xx responses, e.g. {"cod": "404", "message": "city not found"}."""
    cod: int | str | None = None
    message: str | None = None

    def status_code(self, http_status: int) -> int:
        """
        The provider's own code when it is a usable error status, else the
        HTTP status of the response, else 500.
        """
        for candidate in (self.cod, http_status):
            try:
                code = int(candidate)
            except (TypeError, ValueError):
                continue
            if 400 <= code <= 599:
                return code
        return 500
