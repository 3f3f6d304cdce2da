from typing import Optional

from weather_search.exceptions.weather.weather_service_error import WeatherServiceError


class BackendRequestError(WeatherServiceError):
    """The weather backend answered with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
