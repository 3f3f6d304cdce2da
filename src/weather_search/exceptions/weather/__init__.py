from weather_search.exceptions.weather.backend_request_error import BackendRequestError
from weather_search.exceptions.weather.backend_unavailable_error import BackendUnavailableError
from weather_search.exceptions.weather.weather_service_error import WeatherServiceError
