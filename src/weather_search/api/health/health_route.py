from datetime import datetime, timezone

from fastapi import APIRouter

from weather_search import __version__

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", summary="API Health Check")
async def get_health():
    """Basic health check endpoint."""

    return {
        "message": "Weather Search is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
    }
