"""Domain exceptions."""
from typing import Optional


class MarketplaceAnalyticsError(Exception):
    """Base class for analytics errors."""


class InvalidSeedError(MarketplaceAnalyticsError, ValueError):
    """Seed parameters cannot produce a history (non-finite values, non-positive price, negative volatility)."""


class EmptySeriesError(MarketplaceAnalyticsError, ValueError):
    """Aggregation was requested over a series with no records."""


class UnknownPlatformError(MarketplaceAnalyticsError, LookupError):
    """Platform id is not in the catalog."""

    def __init__(self, platform_id: str):
        super().__init__(f"Unknown platform: {platform_id}")
        self.platform_id = platform_id


class UnknownProductError(MarketplaceAnalyticsError, LookupError):
    """Product id is not listed on the requested platform."""

    def __init__(self, product_id: str, platform_id: Optional[str] = None):
        where = f" on platform {platform_id}" if platform_id else ""
        super().__init__(f"Unknown product: {product_id}{where}")
        self.product_id = product_id
        self.platform_id = platform_id
