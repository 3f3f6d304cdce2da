from weather_search.exceptions.weather.weather_service_error import WeatherServiceError


class BackendUnavailableError(WeatherServiceError):
    """The weather backend could not be reached."""

    pass
