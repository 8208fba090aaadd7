"""FastAPI dependency injection setup."""
from typing import Optional
import random

from marketplace_backend.domain.interfaces import CatalogRepository
from marketplace_backend.repository.catalog_repository import InMemoryCatalogRepository
from marketplace_backend.services.analytics_service import AnalyticsService
from marketplace_backend.services.history_synthesizer import HistorySynthesizer
from marketplace_backend.services.window_aggregator import WindowAggregator


# Application state (set during lifespan)
_analytics_service: Optional[AnalyticsService] = None


def init_services(
    repository: Optional[CatalogRepository] = None,
    random_seed: Optional[int] = None,
) -> AnalyticsService:
    """Initialize all services with the catalog repository."""
    global _analytics_service

    catalog = repository or InMemoryCatalogRepository()
    synthesizer = HistorySynthesizer(rng=random.Random(random_seed))

    _analytics_service = AnalyticsService(
        repository=catalog,
        synthesizer=synthesizer,
        aggregator=WindowAggregator(),
        random_seed=random_seed,
    )
    return _analytics_service


def get_analytics_service() -> AnalyticsService:
    """Get analytics service dependency."""
    if _analytics_service is None:
        raise RuntimeError("Services not initialized")
    return _analytics_service
