from typing import Optional

from pydantic import BaseModel, Field

from weather_search.models.weather.weather import WeatherResult


class SearchState(BaseModel):
    """Render state of the search view. At most one of loading/error/result is active."""

    city: str = Field(default="", description="Current contents of the search box")
    loading: bool = Field(default=False, description="A submission is in flight")
    error: Optional[str] = Field(default=None, description="Message of the last failed lookup")
    result: Optional[WeatherResult] = Field(default=None, description="Last successful lookup")
