"""Product analytics endpoints."""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
import logging

from marketplace_backend.api.schemas import (
    AggregateResponse, AnalyticsResponse, DailyRecordResponse,
)
from marketplace_backend.api.dependencies import get_analytics_service
from marketplace_backend.api.routes.catalog import to_product_response
from marketplace_backend.domain.entities import WindowSelector
from marketplace_backend.domain.errors import (
    EmptySeriesError, InvalidSeedError, UnknownPlatformError, UnknownProductError,
)
from marketplace_backend.services.analytics_service import AnalyticsService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["analytics"])


@router.get("/platforms/{platform_id}/analytics", response_model=AnalyticsResponse)
def get_analytics(
    platform_id: str,
    window: WindowSelector = WindowSelector.MONTH,
    product_id: Optional[str] = None,
    service: AnalyticsService = Depends(get_analytics_service)
) -> AnalyticsResponse:
    """Get windowed history and summary statistics for a product."""
    try:
        result = service.get_product_analytics(platform_id, window, product_id)
        return AnalyticsResponse(
            platform_id=result.platform_id,
            product=to_product_response(result.product),
            window=result.window.value,
            days=result.window.days,
            records=[
                DailyRecordResponse(
                    date=r.date.isoformat(),
                    price=r.price,
                    units_sold=r.units_sold,
                    active_sellers=r.active_sellers,
                    revenue=r.revenue,
                )
                for r in result.records
            ],
            aggregates=AggregateResponse(
                average_price=result.aggregates.average_price,
                total_units_sold=result.aggregates.total_units_sold,
                peak_active_sellers=result.aggregates.peak_active_sellers,
            ),
            count=len(result.records),
        )
    except (UnknownPlatformError, UnknownProductError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidSeedError as e:
        logger.warning(f"Invalid seed for {product_id or platform_id}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except EmptySeriesError as e:
        raise HTTPException(status_code=404, detail=f"No data: {e}")
    except Exception as e:
        logger.error(f"Error getting analytics for {platform_id}/{product_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
