import itertools
from typing import Optional

import httpx
import structlog
from jinja2 import Environment, PackageLoader, select_autoescape
from pydantic import ValidationError

from weather_search.config import messages
from weather_search.exceptions.view import ProxyResponseError, WeatherViewError
from weather_search.models.view import SearchState
from weather_search.models.weather import WeatherResult

logger = structlog.get_logger(__name__)

PROXY_ENDPOINT = "/api/weather"

templates = Environment(
    loader=PackageLoader("weather_search", "templates"),
    autoescape=select_autoescape(["html"]),
)


class WeatherSearchView:
    """
    Search form state driven through the weather proxy.

    Each submission clears the previous error and result and raises the
    loading flag before the proxy is called. Submissions are numbered; only
    the response to the most recent one is committed to the state, so a slow
    earlier response can never overwrite a newer one.
    """

    def __init__(self, client: httpx.AsyncClient, endpoint: str = PROXY_ENDPOINT):
        """
        Args:
            client: HTTP client whose base URL is the proxy's origin. The view
                does not close it.
            endpoint: Path of the proxy endpoint
        """
        self.client = client
        self.endpoint = endpoint
        self.state = SearchState()

        self._sequence = itertools.count(1)
        self._latest = 0

    def set_city(self, city: str):
        self.state.city = city

    def is_latest(self, sequence: int) -> bool:
        return sequence == self._latest

    def _begin(self, city: str) -> int:
        sequence = next(self._sequence)
        self._latest = sequence
        self.state = SearchState(city=city, loading=True)
        return sequence

    async def _fetch(self, city: str) -> WeatherResult:
        """
        Call the proxy and parse its envelope.

        Raises:
            ProxyResponseError: If the envelope reports failure, is not JSON,
                or carries data that is not a weather result
        """
        response = await self.client.post(self.endpoint, json={"city": city})

        try:
            envelope = response.json()
        except ValueError as e:
            raise ProxyResponseError(messages.VIEW_FALLBACK_ERROR) from e

        if not isinstance(envelope, dict) or envelope.get("success") is not True:
            message = envelope.get("message") if isinstance(envelope, dict) else None
            raise ProxyResponseError(message or messages.VIEW_FALLBACK_ERROR)

        try:
            return WeatherResult.model_validate(envelope.get("data"))
        except ValidationError as e:
            logger.warning("Proxy returned malformed weather data", city=city, error=str(e))
            raise ProxyResponseError(messages.VIEW_FALLBACK_ERROR) from e

    async def submit(self, city: Optional[str] = None) -> SearchState:
        """
        Submit a lookup for ``city`` (defaults to the current search box value).

        Returns:
            The view state after the submission settled
        """
        city = self.state.city if city is None else city
        sequence = self._begin(city)

        try:
            result = await self._fetch(city)
            if self.is_latest(sequence):
                self.state.result = result
            else:
                logger.info("Discarding stale weather response", city=city, sequence=sequence)

        except Exception as e:
            message = str(e) if isinstance(e, WeatherViewError) and str(e) else messages.VIEW_FALLBACK_ERROR
            logger.warning(
                "Weather search failed",
                city=city,
                sequence=sequence,
                error=str(e),
                error_type=type(e).__name__,
            )
            if self.is_latest(sequence):
                self.state.error = message

        finally:
            if self.is_latest(sequence):
                self.state.loading = False

        return self.state

    def render(self) -> str:
        """Render the search page for the current state."""
        template = templates.get_template("weather_search.html")
        return template.render(state=self.state, messages=messages)
