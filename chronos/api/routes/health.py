"""Health endpoint."""

from fastapi import APIRouter

from chronos.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    from chronos.main import get_uptime

    return {
        "status": "healthy",
        "version": settings.app_version,
        "uptime_seconds": get_uptime(),
    }
