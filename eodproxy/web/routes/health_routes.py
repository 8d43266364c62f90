"""
Health check route
"""

import time

from fastapi import APIRouter

from eodproxy.web.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness check; never requires authentication."""
    return HealthResponse(ts=int(time.time() * 1000))
