from weather_search.config.config import Config, config
