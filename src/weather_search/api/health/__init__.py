from weather_search.api.health.health_route import router as health_router
