# backend/app/core/config.py
import os
from dotenv import load_dotenv

# Load environment variables from .env.local in the project root
load_dotenv(dotenv_path=os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..', '..', '.env.local')))


OPENWEATHER_API_URL = "https://api.openweathermap.org/data/2.5/weather"
OPENWEATHER_ICON_URL = "https://openweathermap.org/img/wn/{icon}@4x.png"
OPENWEATHER_UNITS = "metric" # For Celsius and m/s

# Transport timeout for the single outbound provider call (seconds)
WEATHER_API_TIMEOUT = float(os.getenv("WEATHER_API_TIMEOUT", 10))

# Artificial latency of the mock resolver (seconds)
MOCK_LOOKUP_DELAY_SECONDS = float(os.getenv("MOCK_LOOKUP_DELAY_SECONDS", 1.0))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Where uvicorn serves the app when started through run()
APP_HOST = os.getenv("APP_HOST", "127.0.0.1")
APP_PORT = int(os.getenv("APP_PORT", 8000))


def get_weather_api_key() -> str | None:
    """
    Returns the provider credential. Read on every call so a key set after
    startup (or removed) is picked up by the next request.
    """
    return os.getenv("WEATHER_API_KEY") or None
