# backend/app/models/weather_reading.py
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field

from backend.app.core.config import OPENWEATHER_ICON_URL

# Ints stay ints (fixture and synthesized values), provider floats stay floats
Number = int | float
Percent = Annotated[int, Field(ge=0, le=100)] | Annotated[float, Field(ge=0, le=100)]

# Derived from other fields; not part of the provider-facing reading
DERIVED_FIELDS = {"condition", "icon_url"}

# Ordered: the first keyword found in the description wins
CONDITION_KEYWORDS = (
    ("rain", "rainy"),
    ("cloud", "cloudy"),
    ("clear", "sunny"),
    ("snow", "snowy"),
)
DEFAULT_CONDITION = "default"


class WeatherReading(BaseModel):
    """
    Normalized weather record returned by both the proxy endpoint and the
    mock resolver. Created per lookup and never stored.
    """
    model_config = ConfigDict(frozen=True)

    city: str
    country: str | None = None # ISO code, "Unknown" for synthesized readings
    temp: Number # °C
    feels_like: Number # °C
    humidity: Percent
    description: str
    icon: str
    wind_speed: Number | None = None # m/s
    rain: Number | None = None # mm over the last hour; None/0 means dry

    @computed_field
    @property
    def condition(self) -> str:
        return classify_condition(self.description)

    @computed_field
    @property
    def icon_url(self) -> str:
        return OPENWEATHER_ICON_URL.format(icon=self.icon)


def classify_condition(description: str) -> str:
    """Maps a free-text description to rainy/cloudy/sunny/snowy/default."""
    desc = description.lower()
    for keyword, condition in CONDITION_KEYWORDS:
        if keyword in desc:
            return condition
    return DEFAULT_CONDITION
