from weather_search.api.pages.search_page import router as pages_router
