"""In-memory implementation of the catalog repository."""
from typing import Dict, List, Optional, Tuple
import logging

from marketplace_backend.domain.interfaces import CatalogRepository
from marketplace_backend.domain.entities import Platform, Product, SeedParameters
from marketplace_backend.domain.errors import UnknownPlatformError

logger = logging.getLogger(__name__)


def _product(
    product_id: str,
    name: str,
    category: str,
    price: float,
    trend: float,
    seed: Tuple[float, float, float],
) -> Product:
    base_price, volatility, seed_trend = seed
    return Product(
        id=product_id,
        name=name,
        category=category,
        price=price,
        trend=trend,
        seed=SeedParameters(base_price=base_price, volatility=volatility, trend=seed_trend),
    )


DEFAULT_PLATFORMS: List[Platform] = [
    Platform(id="wb", name="Wildberries"),
    Platform(id="ozon", name="Ozon"),
    Platform(id="ali", name="AliExpress"),
]

# Seeds are (base_price, volatility, daily drift).
DEFAULT_CATALOG: Dict[str, List[Product]] = {
    "wb": [
        _product("wb-1", "iPhone 15 Pro Max 256GB", "Smartphones", 135000, 12, (130000, 500, 5)),
        _product("wb-2", "Xiaomi Robot Vacuum S10", "Home Appliances", 18900, -2, (19000, 100, -1)),
        _product("wb-3", "AirPods Pro 2", "Headphones", 24000, 5, (23000, 200, 2)),
        _product("wb-4", "Dyson Supersonic HD07", "Beauty & Health", 45000, 8, (42000, 300, 3)),
        _product("wb-5", "Samsung Galaxy Watch 6", "Smart Watches", 22000, 0, (25000, 150, -2)),
    ],
    "ozon": [
        _product("oz-1", "ASUS TUF Gaming F15", "Laptops", 85000, 15, (80000, 400, 10)),
        _product("oz-2", "Sony WH-1000XM5", "Headphones", 34000, 3, (32000, 200, 1)),
        _product("oz-3", "Yandex Station Max", "Smart Home", 29990, 25, (27000, 50, 5)),
        _product("oz-4", "Samsung Monitor Odyssey", "Monitors", 41000, -5, (45000, 300, -3)),
        _product("oz-5", "Logitech MX Master 3S", "Peripherals", 9500, 1, (9000, 20, 0.5)),
    ],
    "ali": [
        _product("ali-1", "Lenovo Legion Y700", "Tablets", 32000, 45, (28000, 200, 8)),
        _product("ali-2", "Anker Soundcore Q45", "Headphones", 7500, 10, (6000, 50, 3)),
        _product("ali-3", "Baseus Power Bank 65W", "Accessories", 4200, 8, (3500, 20, 2)),
        _product("ali-4", "Creality Ender 3 V3", "3D Printers", 19000, -1, (21000, 150, -4)),
        _product("ali-5", "Zeblaze Stratos 3", "Smart Watches", 5500, 4, (5000, 30, 1)),
    ],
}


class InMemoryCatalogRepository(CatalogRepository):
    """Catalog held in memory, keyed by platform id."""

    def __init__(
        self,
        platforms: Optional[List[Platform]] = None,
        catalog: Optional[Dict[str, List[Product]]] = None,
    ):
        self._platforms = list(platforms if platforms is not None else DEFAULT_PLATFORMS)
        source = catalog if catalog is not None else DEFAULT_CATALOG
        self._catalog = {pid: list(products) for pid, products in source.items()}
        self._index = {
            product.id: product
            for products in self._catalog.values()
            for product in products
        }
        logger.debug(
            f"Catalog loaded: {len(self._platforms)} platforms, {len(self._index)} products"
        )

    def get_platforms(self) -> List[Platform]:
        """Get all platforms in display order."""
        return [p.model_copy() for p in self._platforms]

    def get_products(self, platform_id: str) -> List[Product]:
        """Get products listed on a platform, in catalog order."""
        if platform_id not in self._catalog:
            raise UnknownPlatformError(platform_id)
        return [p.model_copy() for p in self._catalog[platform_id]]

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by id from any platform."""
        product = self._index.get(product_id)
        return product.model_copy() if product else None
