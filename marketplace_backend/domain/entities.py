"""Domain entities - core business objects."""
from datetime import date
from enum import Enum
from typing import Tuple
from pydantic import BaseModel


class WindowSelector(str, Enum):
    """Trailing window choices offered to the user."""
    WEEK = "week"
    MONTH = "month"
    HALF_YEAR = "half-year"
    YEAR = "year"

    @property
    def days(self) -> int:
        return WINDOW_DAYS[self]

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            value = value.strip().lower()
            if value == "half":
                return cls.HALF_YEAR
            for member in cls:
                if member.value == value:
                    return member
        return None


WINDOW_DAYS = {
    WindowSelector.WEEK: 7,
    WindowSelector.MONTH: 30,
    WindowSelector.HALF_YEAR: 180,
    WindowSelector.YEAR: 365,
}


class SeedParameters(BaseModel):
    """Seed scalars for a product's synthetic price walk."""
    base_price: float
    volatility: float
    trend: float

    class Config:
        frozen = True


class DailyRecord(BaseModel):
    """One simulated day of marketplace metrics."""
    date: date
    price: int
    units_sold: int
    active_sellers: int
    revenue: int

    class Config:
        frozen = True


# Ordered oldest-first, never mutated once generated.
TimeSeries = Tuple[DailyRecord, ...]


class AggregateResult(BaseModel):
    """Summary statistics over a trailing window."""
    average_price: int
    total_units_sold: int
    peak_active_sellers: int

    class Config:
        frozen = True


class Platform(BaseModel):
    """Marketplace platform entity."""
    id: str
    name: str


class Product(BaseModel):
    """Catalog product entity.

    ``price`` and ``trend`` are display values owned by the catalog; only
    ``seed`` feeds history generation.
    """
    id: str
    name: str
    category: str
    price: float
    trend: float = 0.0
    seed: SeedParameters


class ProductAnalytics(BaseModel):
    """Windowed history and aggregates for one product."""
    platform_id: str
    product: Product
    window: WindowSelector
    records: TimeSeries
    aggregates: AggregateResult
