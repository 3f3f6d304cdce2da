from weather_search.exceptions.view.proxy_response_error import ProxyResponseError
from weather_search.exceptions.view.weather_view_error import WeatherViewError
