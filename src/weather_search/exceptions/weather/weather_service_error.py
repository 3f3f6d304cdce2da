from weather_search.exceptions.base import WeatherSearchError


class WeatherServiceError(WeatherSearchError):
    """Base exception for errors talking to the weather backend."""

    pass
