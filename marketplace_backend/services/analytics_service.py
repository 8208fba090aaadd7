"""Product analytics business logic."""
from datetime import date
from typing import Callable, Dict, List, Optional, Tuple
import logging
import random
import threading

from marketplace_backend.domain.interfaces import CatalogRepository
from marketplace_backend.domain.entities import (
    Platform, Product, ProductAnalytics, SeedParameters, TimeSeries, WindowSelector,
)
from marketplace_backend.domain.errors import (
    InvalidSeedError, UnknownPlatformError, UnknownProductError,
)
from marketplace_backend.services.history_synthesizer import HistorySynthesizer
from marketplace_backend.services.window_aggregator import WindowAggregator

logger = logging.getLogger(__name__)

SeriesCache = Dict[str, Tuple[SeedParameters, TimeSeries]]


class AnalyticsService:
    """Caches one generated series per product and serves windowed views of it.

    A cached series is rebuilt only when the product's seed changes or the
    cache is refreshed; window changes reuse it. With ``random_seed`` set,
    every product draws from its own generator seeded by
    ``(random_seed, product id)``, so a product's history does not depend on
    which products were generated before it.
    """

    def __init__(
        self,
        repository: CatalogRepository,
        synthesizer: Optional[HistorySynthesizer] = None,
        aggregator: Optional[WindowAggregator] = None,
        today: Callable[[], date] = date.today,
        random_seed: Optional[int] = None,
    ):
        self._repository = repository
        self._synthesizer = synthesizer or HistorySynthesizer()
        self._aggregator = aggregator or WindowAggregator()
        self._today = today
        self._random_seed = random_seed
        self._cache: SeriesCache = {}
        self._lock = threading.Lock()

    @property
    def cached_count(self) -> int:
        return len(self._cache)

    def list_platforms(self) -> List[Platform]:
        """Get platforms in display order."""
        return self._repository.get_platforms()

    def list_products(self, platform_id: str) -> List[Product]:
        """Get the product list for a platform."""
        return self._repository.get_products(platform_id)

    def warm_up(self) -> int:
        """Generate series for every catalog product; returns how many are cached."""
        with self._lock:
            self._populate(self._cache, self._today())
        logger.info(f"Warmed up {self.cached_count} product series")
        return self.cached_count

    def refresh(self) -> int:
        """Regenerate every series up to the current date and swap the cache in one step."""
        fresh: SeriesCache = {}
        with self._lock:
            self._populate(fresh, self._today())
            self._cache = fresh
        logger.info(f"Refreshed {len(fresh)} product series")
        return len(fresh)

    def get_series(self, product_id: str) -> TimeSeries:
        """Get the full cached history for a product, generating it if needed."""
        product = self._repository.get_product(product_id)
        if product is None:
            raise UnknownProductError(product_id)
        return self._series_for(product, self._today())

    def get_product_analytics(
        self,
        platform_id: str,
        window: WindowSelector,
        product_id: Optional[str] = None,
    ) -> ProductAnalytics:
        """Windowed records and aggregates for a product on a platform.

        Without ``product_id`` the platform's first product is used.
        """
        products = self._repository.get_products(platform_id)
        if not products:
            raise UnknownProductError(product_id or "<default>", platform_id)

        if product_id is None:
            product = products[0]
        else:
            product = next((p for p in products if p.id == product_id), None)
            if product is None:
                raise UnknownProductError(product_id, platform_id)

        series = self._series_for(product, self._today())
        records, aggregates = self._aggregator.aggregate(series, window)
        return ProductAnalytics(
            platform_id=platform_id,
            product=product,
            window=window,
            records=records,
            aggregates=aggregates,
        )

    def _catalog_products(self) -> List[Product]:
        products = []
        for platform in self._repository.get_platforms():
            try:
                products.extend(self._repository.get_products(platform.id))
            except UnknownPlatformError:
                logger.warning(f"Platform {platform.id} has no product list, skipping")
        return products

    def _populate(self, cache: SeriesCache, reference: date) -> None:
        # Caller holds the lock.
        for product in self._catalog_products():
            cached = cache.get(product.id)
            if cached is not None and cached[0] == product.seed:
                continue
            try:
                cache[product.id] = (product.seed, self._generate(product, reference))
            except InvalidSeedError as e:
                logger.warning(f"Skipping history for {product.id}: {e}")

    def _generate(self, product: Product, reference: date) -> TimeSeries:
        rng = None
        if self._random_seed is not None:
            rng = random.Random(f"{self._random_seed}:{product.id}")
        return self._synthesizer.generate(product.seed, reference, rng=rng)

    def _series_for(self, product: Product, reference: date) -> TimeSeries:
        with self._lock:
            cached = self._cache.get(product.id)
            if cached is not None and cached[0] == product.seed:
                return cached[1]
            if cached is not None:
                logger.info(f"Seed changed for {product.id}, regenerating history")
            series = self._generate(product, reference)
            self._cache[product.id] = (product.seed, series)
            return series
