from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class WeatherQuery(BaseModel):
    """City lookup submitted from the search form."""

    city: str = Field(default="", description="City name, forwarded as-is")


class WeatherResult(BaseModel):
    """Current weather for a city as reported by the weather backend."""

    model_config = ConfigDict(extra="allow")

    city: str = Field(..., description="City name")
    temperature: Union[int, float] = Field(..., description="Temperature in Celsius")
    condition: str = Field(..., description="Main weather condition (e.g. Clear, Rain)")


class WeatherSuccessEnvelope(BaseModel):
    """Proxy response when the backend lookup succeeded."""

    success: Literal[True] = True
    data: Any = Field(..., description="Backend body, unmodified")


class WeatherFailureEnvelope(BaseModel):
    """Proxy response for every kind of failure."""

    success: Literal[False] = False
    message: str = Field(..., description="Generic user-facing failure message")
