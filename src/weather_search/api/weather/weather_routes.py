import structlog
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from weather_search.config.messages import PROXY_FAILURE_MESSAGE
from weather_search.models.weather import (
    WeatherFailureEnvelope,
    WeatherQuery,
    WeatherSuccessEnvelope,
)
from weather_search.services.weather_service import WeatherService, get_weather_service

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(prefix="/api/weather", tags=["Weather"])


def parse_query(payload) -> WeatherQuery:
    """
    Read the city from a request payload without validating it.

    A missing city becomes an empty string and non-string values are
    stringified; the backend decides whether the lookup makes sense.
    """
    if not isinstance(payload, dict):
        raise ValueError("Request body must be a JSON object")

    city = payload.get("city")
    return WeatherQuery(city="" if city is None else str(city))


@router.post(
    "",
    summary="Look Up City Weather",
    response_model=WeatherSuccessEnvelope,
    responses={500: {"model": WeatherFailureEnvelope}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": WeatherQuery.model_json_schema()}},
        }
    },
)
async def lookup_city_weather(
    request: Request,
    service: WeatherService = Depends(get_weather_service),
):
    """
    Relay a city lookup to the weather backend.

    Every failure (unreadable body, unreachable backend, non-2xx backend
    status, invalid backend JSON) collapses into the same generic envelope
    with status 500. The cause is logged, never returned.

    Returns:
        ``{"success": true, "data": <backend body>}`` on success.
    """
    city = None
    try:
        query = parse_query(await request.json())
        city = query.city

        logger.info("API request: Look up city weather", city=city)
        data = await service.get_city_weather(city)

        return {"success": True, "data": data}

    except Exception as e:
        logger.error(
            "Failed to look up city weather",
            city=city,
            error=str(e),
            error_type=type(e).__name__,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=WeatherFailureEnvelope(message=PROXY_FAILURE_MESSAGE).model_dump(),
        )
