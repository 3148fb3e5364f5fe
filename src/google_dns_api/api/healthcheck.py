"""Health check API endpoint."""

from fastapi import APIRouter, Depends

from google_dns_api.api.models import HealthResponse
from google_dns_api.core.config import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get("/healthcheck", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Health check endpoint (no auth required).

    Reports configuration only; upstream is not contacted.
    """
    return HealthResponse(
        status="ok",
        endpoint=settings.endpoint,
        timeout=settings.timeout,
        auto_padding=settings.auto_padding,
    )
