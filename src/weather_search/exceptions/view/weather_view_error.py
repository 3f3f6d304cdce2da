from weather_search.exceptions.base import WeatherSearchError


class WeatherViewError(WeatherSearchError):
    """Base exception for the search view."""

    pass
