"""Repository interfaces (Ports) - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import List, Optional

from marketplace_backend.domain.entities import Platform, Product


class CatalogRepository(ABC):
    """Interface for read-only product catalog access."""

    @abstractmethod
    def get_platforms(self) -> List[Platform]:
        """Get all platforms in display order."""
        pass

    @abstractmethod
    def get_products(self, platform_id: str) -> List[Product]:
        """Get products listed on a platform, in catalog order."""
        pass

    @abstractmethod
    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by id from any platform."""
        pass
