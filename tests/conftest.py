"""Pytest configuration and fixtures."""
import random
from datetime import date

import pytest

from marketplace_backend.domain.entities import Platform, Product, SeedParameters
from marketplace_backend.repository.catalog_repository import InMemoryCatalogRepository


class MidpointRandom:
    """Random source that always returns the middle of the requested range."""

    def __init__(self):
        self.calls = []

    def uniform(self, a, b):
        self.calls.append((a, b))
        return (a + b) / 2


@pytest.fixture
def reference_date():
    return date(2024, 6, 30)


@pytest.fixture
def seeded_rng():
    """Seeded random source for reproducible series."""
    return random.Random(1234)


@pytest.fixture
def midpoint_rng():
    return MidpointRandom()


@pytest.fixture
def sample_seed():
    return SeedParameters(base_price=23000, volatility=200, trend=2)


@pytest.fixture
def fake_catalog_repository():
    """Small two-platform catalog, one product with an invalid seed."""
    platforms = [Platform(id="alpha", name="Alpha"), Platform(id="beta", name="Beta")]
    catalog = {
        "alpha": [
            Product(
                id="a-1", name="Widget", category="Gadgets", price=1000, trend=3,
                seed=SeedParameters(base_price=1000, volatility=20, trend=1),
            ),
            Product(
                id="a-2", name="Gizmo", category="Gadgets", price=500, trend=-1,
                seed=SeedParameters(base_price=500, volatility=10, trend=-0.5),
            ),
        ],
        "beta": [
            Product(
                id="b-1", name="Broken", category="Misc", price=0, trend=0,
                seed=SeedParameters(base_price=0, volatility=5, trend=0),
            ),
        ],
    }
    return InMemoryCatalogRepository(platforms=platforms, catalog=catalog)
