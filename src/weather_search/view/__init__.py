from weather_search.view.search_view import WeatherSearchView
