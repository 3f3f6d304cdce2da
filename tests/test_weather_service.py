from unittest.mock import patch

import httpx
import pytest

from weather_search.exceptions.weather import (
    BackendRequestError,
    BackendUnavailableError,
    WeatherServiceError,
)
from weather_search.services.weather_service import WeatherService, city_path


class TestCityPath:
    """Test cases for backend path building."""

    def test_plain_city(self):
        assert city_path("Istanbul") == "/api/v1/weather/cities/Istanbul"

    def test_escapes_like_uri_component(self):
        """Reserved characters, spaces and non-ASCII letters are escaped."""
        assert city_path("São Paulo/x?y=1&z") == (
            "/api/v1/weather/cities/S%C3%A3o%20Paulo%2Fx%3Fy%3D1%26z"
        )

    def test_keeps_unreserved_marks(self):
        assert city_path("a-b_c.d!e~f*g'h(i)") == "/api/v1/weather/cities/a-b_c.d!e~f*g'h(i)"

    def test_empty_city(self):
        assert city_path("") == "/api/v1/weather/cities/"


class TestWeatherService:
    """Test cases for the WeatherService class."""

    def test_singleton(self, weather_service):
        assert WeatherService() is weather_service

    def test_base_url_from_config(self):
        WeatherService.reset_instance()

        with patch("weather_search.services.weather_service.config") as mock_config:
            mock_config.backend_base_url = "http://weather:9090"
            service = WeatherService()

        try:
            assert service.city_url("Ankara") == "http://weather:9090/api/v1/weather/cities/Ankara"
        finally:
            WeatherService.reset_instance()

    @pytest.mark.asyncio
    async def test_get_city_weather_success(self, backend, sample_weather_data):
        """Test the backend body is returned unmodified."""
        body = {**sample_weather_data, "humidity": 41}
        received = backend(lambda request: httpx.Response(200, json=body))

        result = await WeatherService().get_city_weather("Istanbul")

        assert result == body
        assert len(received) == 1
        assert received[0].method == "GET"
        assert str(received[0].url) == "http://localhost:8080/api/v1/weather/cities/Istanbul"

    @pytest.mark.asyncio
    async def test_city_with_space_is_escaped(self, backend, sample_weather_data):
        received = backend(lambda request: httpx.Response(200, json=sample_weather_data))

        await WeatherService().get_city_weather("New York")

        assert received[0].url.raw_path == b"/api/v1/weather/cities/New%20York"

    @pytest.mark.asyncio
    async def test_backend_error_message(self, backend):
        """Test a non-2xx status raises with the backend's error field."""
        backend(lambda request: httpx.Response(404, json={"error": "City not found"}))

        with pytest.raises(BackendRequestError, match="City not found") as exc_info:
            await WeatherService().get_city_weather("Atlantis")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_backend_error_default_message(self, backend):
        backend(lambda request: httpx.Response(503, json={}))

        with pytest.raises(BackendRequestError, match="Backend request failed"):
            await WeatherService().get_city_weather("Istanbul")

    @pytest.mark.asyncio
    async def test_backend_error_without_json_body(self, backend):
        backend(lambda request: httpx.Response(502, text="Bad Gateway"))

        with pytest.raises(ValueError):
            await WeatherService().get_city_weather("Istanbul")

    @pytest.mark.asyncio
    async def test_invalid_json_on_success(self, backend):
        backend(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(ValueError):
            await WeatherService().get_city_weather("Istanbul")

    @pytest.mark.asyncio
    async def test_backend_unreachable(self, backend):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        backend(refuse)

        with pytest.raises(BackendUnavailableError, match="Connection refused") as exc_info:
            await WeatherService().get_city_weather("Istanbul")

        assert isinstance(exc_info.value, WeatherServiceError)

    @pytest.mark.asyncio
    async def test_no_retry_on_failure(self, backend):
        """Exactly one outbound request is made even when it fails."""
        received = backend(lambda request: httpx.Response(500, json={"error": "boom"}))

        with pytest.raises(BackendRequestError):
            await WeatherService().get_city_weather("Istanbul")

        assert len(received) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    async def test_non_standard_json_constant_rejected(self, backend, constant):
        """Bodies a strict JSON parser refuses are errors, not silently altered data."""
        body = '{"city": "Istanbul", "temperature": %s, "condition": "Clear"}' % constant
        backend(lambda request: httpx.Response(200, text=body))

        with pytest.raises(ValueError, match="Non-standard JSON constant"):
            await WeatherService().get_city_weather("Istanbul")

    @pytest.mark.asyncio
    async def test_non_standard_json_in_error_body_rejected(self, backend):
        backend(lambda request: httpx.Response(404, text='{"error": NaN}'))

        with pytest.raises(ValueError, match="Non-standard JSON constant"):
            await WeatherService().get_city_weather("Istanbul")

    @pytest.mark.asyncio
    async def test_transport_only_set_on_first_construction(self, backend, sample_weather_data):
        received = backend(lambda request: httpx.Response(200, json=sample_weather_data))
        service = WeatherService()

        other = httpx.MockTransport(lambda request: httpx.Response(200, json={"city": "Other"}))
        assert WeatherService(transport=other) is service

        assert await service.get_city_weather("Istanbul") == sample_weather_data
        assert len(received) == 1
