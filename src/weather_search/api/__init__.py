from weather_search.api.health import health_router
from weather_search.api.pages import pages_router
from weather_search.api.weather import weather_router
