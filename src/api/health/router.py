"""Health check endpoints for monitoring."""

from fastapi import APIRouter

from src.utils.settings.app import AppSettings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/liveness")
async def liveness_check():
    """Simple liveness check - indicates if service is running."""
    return {
        "status": "alive",
        "service": "sky-forecast-proxy",
        "version": AppSettings().API_VERSION,
    }
