from weather_search.api.weather.weather_routes import router as weather_router
