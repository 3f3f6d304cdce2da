class WeatherSearchError(Exception):
    """Base exception for the weather search application."""

    pass
