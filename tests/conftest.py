import os

# Keep test runs from writing log files
os.environ.setdefault("LOG_TO_FILE", "false")

import httpx
import pytest
import pytest_asyncio

from weather_search.services.weather_service import WeatherService


@pytest.fixture
def sample_weather_data():
    """Weather body as returned by the backend."""
    return {"city": "Istanbul", "temperature": 18, "condition": "Clear"}


@pytest.fixture
def weather_service():
    """Fresh weather service on the default transport."""
    WeatherService.reset_instance()
    service = WeatherService()
    yield service
    WeatherService.reset_instance()


@pytest.fixture
def backend():
    """
    Rebuild the weather service against a fake backend.

    Call with an ``httpx.Request -> httpx.Response`` handler; returns the list
    of requests the backend received.
    """
    received = []

    def install(handler):
        def record(request: httpx.Request):
            received.append(request)
            return handler(request)

        WeatherService.reset_instance()
        WeatherService(transport=httpx.MockTransport(record))
        return received

    yield install
    WeatherService.reset_instance()


@pytest.fixture
def app():
    from weather_search.main import create_app

    return create_app()


@pytest_asyncio.fixture
async def api_client(app):
    """HTTP client talking to the application in-process."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
