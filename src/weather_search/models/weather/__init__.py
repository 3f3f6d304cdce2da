from weather_search.models.weather.weather import (
    WeatherFailureEnvelope,
    WeatherQuery,
    WeatherResult,
    WeatherSuccessEnvelope,
)
