"""Tests for the HTTP API."""
import inspect
import random

import pytest
from fastapi.testclient import TestClient

from marketplace_backend.api.dependencies import get_analytics_service
from marketplace_backend.api.routes import analytics, catalog
from marketplace_backend.main import app
from marketplace_backend.services.analytics_service import AnalyticsService
from marketplace_backend.services.history_synthesizer import HistorySynthesizer


@pytest.fixture
def client(fake_catalog_repository, reference_date):
    service = AnalyticsService(
        repository=fake_catalog_repository,
        synthesizer=HistorySynthesizer(rng=random.Random(11)),
        today=lambda: reference_date,
    )
    app.dependency_overrides[get_analytics_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["platforms"] == 2


def test_platforms(client):
    response = client.get("/api/v1/platforms")

    assert response.status_code == 200
    assert response.json()["count"] == 2
    assert response.json()["platforms"][0] == {"id": "alpha", "name": "Alpha"}


def test_products(client):
    response = client.get("/api/v1/platforms/alpha/products")

    assert response.status_code == 200
    products = response.json()["products"]
    assert [p["id"] for p in products] == ["a-1", "a-2"]
    assert "seed" not in products[0]


def test_products_unknown_platform(client):
    assert client.get("/api/v1/platforms/gamma/products").status_code == 404


def test_windows(client):
    response = client.get("/api/v1/windows")

    assert response.status_code == 200
    assert response.json() == [
        {"value": "week", "days": 7},
        {"value": "month", "days": 30},
        {"value": "half-year", "days": 180},
        {"value": "year", "days": 365},
    ]


def test_analytics_month(client, reference_date):
    response = client.get(
        "/api/v1/platforms/alpha/analytics",
        params={"window": "month", "product_id": "a-2"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["product"]["id"] == "a-2"
    assert body["window"] == "month"
    assert body["days"] == 30
    assert body["count"] == 30
    assert body["records"][-1]["date"] == reference_date.isoformat()

    records = body["records"]
    aggregates = body["aggregates"]
    assert aggregates["total_units_sold"] == sum(r["units_sold"] for r in records)
    assert aggregates["peak_active_sellers"] == max(r["active_sellers"] for r in records)


def test_analytics_defaults(client):
    response = client.get("/api/v1/platforms/alpha/analytics")

    assert response.status_code == 200
    assert response.json()["product"]["id"] == "a-1"
    assert response.json()["count"] == 30


def test_analytics_is_stable_across_calls(client):
    url = "/api/v1/platforms/alpha/analytics"
    first = client.get(url, params={"window": "week"}).json()
    second = client.get(url, params={"window": "week"}).json()
    assert first == second


def test_analytics_invalid_window(client):
    response = client.get("/api/v1/platforms/alpha/analytics", params={"window": "decade"})
    assert response.status_code == 422


def test_analytics_unknown_product(client):
    response = client.get(
        "/api/v1/platforms/alpha/analytics", params={"product_id": "zzz"}
    )
    assert response.status_code == 404


def test_analytics_invalid_seed(client):
    response = client.get("/api/v1/platforms/beta/analytics")
    assert response.status_code == 422
    assert "base_price" in response.json()["detail"]


@pytest.mark.parametrize(
    "endpoint",
    [analytics.get_analytics, catalog.get_products, catalog.get_platforms],
)
def test_locking_routes_run_in_threadpool(endpoint):
    # Sync endpoints are dispatched to the threadpool instead of the event loop.
    assert not inspect.iscoroutinefunction(endpoint)
