from typing import Optional

import httpx
import structlog
from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse

from weather_search.view import WeatherSearchView

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Pages"])


@router.get("/", response_class=HTMLResponse, summary="Weather Search Page")
async def search_page(
    request: Request,
    city: Optional[str] = Query(default=None, description="City to look up"),
):
    """
    Render the search form, looking up ``city`` first when one was submitted.

    The view reaches the proxy endpoint through this same application
    in-process, so the lookup follows exactly the path a browser takes.
    """
    transport = httpx.ASGITransport(app=request.app)
    async with httpx.AsyncClient(transport=transport, base_url=str(request.base_url)) as client:
        view = WeatherSearchView(client)

        if city is not None:
            logger.info("Search page submission", city=city)
            await view.submit(city)

        return HTMLResponse(view.render())
