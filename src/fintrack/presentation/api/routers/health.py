"""Health check router."""

from fastapi import APIRouter

from fintrack import __version__
from fintrack.presentation.api.dependencies import AppSettings

router = APIRouter()


@router.get("", summary="Service health")
async def health_check(settings: AppSettings) -> dict:
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": __version__,
    }
