"""Tests for the built-in catalog."""
import pytest

from marketplace_backend.domain.errors import UnknownPlatformError
from marketplace_backend.repository.catalog_repository import InMemoryCatalogRepository


def test_default_platforms_in_order():
    repository = InMemoryCatalogRepository()
    assert [p.id for p in repository.get_platforms()] == ["wb", "ozon", "ali"]


def test_each_platform_lists_five_products():
    repository = InMemoryCatalogRepository()
    for platform in repository.get_platforms():
        products = repository.get_products(platform.id)
        assert len(products) == 5
        assert all(p.seed.base_price > 0 for p in products)


def test_get_product_by_id():
    product = InMemoryCatalogRepository().get_product("wb-1")

    assert product.name == "iPhone 15 Pro Max 256GB"
    assert product.seed.base_price == 130000
    assert product.seed.volatility == 500
    assert product.seed.trend == 5


def test_get_missing_product_returns_none():
    assert InMemoryCatalogRepository().get_product("nope") is None


def test_unknown_platform_raises():
    with pytest.raises(UnknownPlatformError):
        InMemoryCatalogRepository().get_products("ebay")


def test_returned_lists_are_copies():
    repository = InMemoryCatalogRepository()
    repository.get_products("ozon").clear()
    assert len(repository.get_products("ozon")) == 5
