import logging

import uvicorn
from fastapi import FastAPI

from backend.app.api.weather import router as weather_router, weather_lookup_error_handler
from backend.app.core.config import APP_HOST, APP_PORT, LOG_LEVEL
from backend.app.core.errors import WeatherLookupError

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(title="Nimbus Weather Lookup API")
app.include_router(weather_router)
app.add_exception_handler(WeatherLookupError, weather_lookup_error_handler)

@app.get("/")
async def root():
    return {"message": "Welcome to Nimbus Weather API"}

@app.get("/health")
async def health_check():
    return {"status": "ok", "message": "Nimbus Weather API is up and running!"}


def run():
    """Serves the API with uvicorn (the `nimbus-weather` console script)."""
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
