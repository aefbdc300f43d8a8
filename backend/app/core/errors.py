# backend/app/core/errors.py


class WeatherLookupError(Exception):
    """Base error for a weather lookup. Carries the HTTP status to report."""
    status_code = 500
    message = "Failed to fetch weather"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class CityRequiredError(WeatherLookupError):
    status_code = 400
    message = "City is required"


class ApiKeyMissingError(WeatherLookupError):
    status_code = 500
    message = "API key not set"


class UpstreamError(WeatherLookupError):
    """The provider reported a failure, or the call to it failed."""
    status_code = 500
    message = "Failed to fetch weather"
