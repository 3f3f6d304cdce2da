import json
from typing import Any, Optional
from urllib.parse import quote

import httpx
import structlog

from weather_search.config.config import config
from weather_search.config.messages import BACKEND_FAILURE_MESSAGE
from weather_search.exceptions.weather import BackendRequestError, BackendUnavailableError
from weather_search.utils.singleton import Singleton

logger = structlog.get_logger(__name__)

# Characters encodeURIComponent leaves untouched besides alphanumerics
URI_COMPONENT_SAFE = "-_.!~*'()"


def reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_json(response: httpx.Response) -> Any:
    """Decode a response body as strict JSON; NaN and Infinity are rejected."""
    return json.loads(response.text, parse_constant=reject_constant)


def city_path(city: str) -> str:
    """Build the backend path for a city lookup with the city fully escaped."""
    return f"/api/v1/weather/cities/{quote(city, safe=URI_COMPONENT_SAFE)}"


class WeatherService(Singleton):
    """
    Client for the external weather backend.

    Issues exactly one GET per lookup. There is no retry, no rate limiting
    and no timeout override; httpx defaults apply.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the weather service.

        Args:
            transport: httpx transport for backend calls; the default network
                transport when omitted. Only honored on first construction.
        """
        super().__init__()

        if hasattr(self, "_weather_initialized"):
            return

        self.base_url = config.backend_base_url
        self._transport = transport

        self._weather_initialized = True

    def city_url(self, city: str) -> str:
        return f"{self.base_url}{city_path(city)}"

    async def get_city_weather(self, city: str) -> Any:
        """
        Fetch current weather for a city from the backend.

        Args:
            city: City name, forwarded as-is (an empty string is allowed)

        Returns:
            The backend's JSON body, unmodified

        Raises:
            BackendRequestError: If the backend answers with a non-2xx status
            BackendUnavailableError: If the backend cannot be reached
            ValueError: If a response body is not strict JSON
        """
        url = self.city_url(city)
        logger.info("Requesting weather from backend", city=city, url=url)

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(url, headers={"Content-Type": "application/json"})
        except httpx.RequestError as e:
            logger.warning("Weather backend unreachable", city=city, url=url, error=str(e))
            raise BackendUnavailableError(f"Weather backend unreachable: {str(e)}") from e

        if not response.is_success:
            error_data = parse_json(response)
            message = BACKEND_FAILURE_MESSAGE
            if isinstance(error_data, dict) and error_data.get("error"):
                message = str(error_data["error"])

            logger.warning(
                "Weather backend request failed",
                city=city,
                status_code=response.status_code,
                backend_message=message,
            )
            raise BackendRequestError(message, status_code=response.status_code)

        data = parse_json(response)
        logger.info("Received weather from backend", city=city, status_code=response.status_code)
        return data


def get_weather_service() -> WeatherService:
    """FastAPI dependency returning the shared weather service."""
    return WeatherService()
