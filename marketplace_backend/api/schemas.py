"""API request/response schemas (DTOs)."""
from typing import List
from pydantic import BaseModel


# Response models
class PlatformResponse(BaseModel):
    """Response for a single platform."""
    id: str
    name: str


class PlatformListResponse(BaseModel):
    """Response for platform list."""
    platforms: List[PlatformResponse]
    count: int


class ProductResponse(BaseModel):
    """Response for a catalog product (display fields only)."""
    id: str
    name: str
    category: str
    price: float
    trend: float


class ProductListResponse(BaseModel):
    """Response for a platform's product list."""
    platform_id: str
    products: List[ProductResponse]
    count: int


class DailyRecordResponse(BaseModel):
    """Response for one day of history."""
    date: str
    price: int
    units_sold: int
    active_sellers: int
    revenue: int


class AggregateResponse(BaseModel):
    """Summary statistics for the selected window."""
    average_price: int
    total_units_sold: int
    peak_active_sellers: int


class AnalyticsResponse(BaseModel):
    """Windowed history and aggregates for a product."""
    platform_id: str
    product: ProductResponse
    window: str
    days: int
    records: List[DailyRecordResponse]
    aggregates: AggregateResponse
    count: int


class WindowResponse(BaseModel):
    """Window selector option."""
    value: str
    days: int


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    cached_series: int
    platforms: int
