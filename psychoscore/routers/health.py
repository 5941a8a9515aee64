"""Health check routes for the PsychoScore API."""

import time
from typing import Dict

from fastapi import APIRouter

from psychoscore.core.config import get_settings
from psychoscore.schemas.base import HealthCheckResponse
from psychoscore.services.scorers import registry

router = APIRouter()
settings = get_settings()

_started_at = time.monotonic()


@router.get("", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Basic health check endpoint.

    Returns:
        HealthCheckResponse: Application health status and the scorable test kinds
    """
    return HealthCheckResponse(
        status="healthy",
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        uptime_seconds=round(time.monotonic() - _started_at, 3),
        supported_test_kinds=[kind.value for kind in registry.kinds],
    )


@router.get("/live")
async def liveness_probe() -> Dict[str, str]:
    """Kubernetes liveness probe endpoint."""
    return {"status": "ok"}
