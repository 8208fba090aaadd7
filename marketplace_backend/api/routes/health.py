"""Health check endpoint."""
from datetime import datetime
from fastapi import APIRouter, Depends

from marketplace_backend.api.schemas import HealthResponse
from marketplace_backend.api.dependencies import get_analytics_service
from marketplace_backend.services.analytics_service import AnalyticsService

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    service: AnalyticsService = Depends(get_analytics_service)
) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat(),
        cached_series=service.cached_count,
        platforms=len(service.list_platforms()),
    )
