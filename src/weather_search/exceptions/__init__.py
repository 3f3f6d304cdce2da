from weather_search.exceptions.base import WeatherSearchError
from weather_search.exceptions.view import ProxyResponseError, WeatherViewError
from weather_search.exceptions.weather import (
    BackendRequestError,
    BackendUnavailableError,
    WeatherServiceError,
)
