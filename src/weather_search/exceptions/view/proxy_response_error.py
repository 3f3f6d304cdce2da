from weather_search.exceptions.view.weather_view_error import WeatherViewError


class ProxyResponseError(WeatherViewError):
    """The proxy reported a failure or returned an unusable envelope."""

    pass
