from weather_search.models.view.search_state import SearchState
