"""Catalog endpoints."""
from typing import List
from fastapi import APIRouter, Depends, HTTPException
import logging

from marketplace_backend.api.schemas import (
    PlatformListResponse, PlatformResponse, ProductListResponse, ProductResponse, WindowResponse,
)
from marketplace_backend.api.dependencies import get_analytics_service
from marketplace_backend.domain.entities import Product, WindowSelector
from marketplace_backend.domain.errors import UnknownPlatformError
from marketplace_backend.services.analytics_service import AnalyticsService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["catalog"])


def to_product_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        category=product.category,
        price=product.price,
        trend=product.trend,
    )


@router.get("/platforms", response_model=PlatformListResponse)
def get_platforms(
    service: AnalyticsService = Depends(get_analytics_service)
) -> PlatformListResponse:
    """List marketplace platforms."""
    platforms = service.list_platforms()
    return PlatformListResponse(
        platforms=[PlatformResponse(id=p.id, name=p.name) for p in platforms],
        count=len(platforms),
    )


@router.get("/platforms/{platform_id}/products", response_model=ProductListResponse)
def get_products(
    platform_id: str,
    service: AnalyticsService = Depends(get_analytics_service)
) -> ProductListResponse:
    """List products on a platform."""
    try:
        products = service.list_products(platform_id)
        return ProductListResponse(
            platform_id=platform_id,
            products=[to_product_response(p) for p in products],
            count=len(products),
        )
    except UnknownPlatformError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error listing products for {platform_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/windows", response_model=List[WindowResponse])
async def get_windows() -> List[WindowResponse]:
    """List window selector options."""
    return [WindowResponse(value=w.value, days=w.days) for w in WindowSelector]
