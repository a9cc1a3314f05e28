"""Shared fixtures for API tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog_api.catalog.store import CatalogStore
from catalog_api.infrastructure.config import Settings
from catalog_api.main import create_app

API_PREFIX = "/api/v1"


@pytest.fixture
def api_settings() -> Settings:
    """Settings with the values the API tests assume."""
    return Settings(
        api_prefix=API_PREFIX,
        app_name="catalog-api",
        api_version="0.1.0",
        environment="test",
        product_cache_max_age=300,
        seed_catalog=False,
    )


@pytest.fixture
def app(api_settings: Settings, store: CatalogStore) -> FastAPI:
    """Application serving the sample store."""
    return create_app(api_settings, store=store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def products_url() -> str:
    return f"{API_PREFIX}/products"


@pytest.fixture
def new_product_body() -> dict:
    """Valid creation body."""
    return {
        "name": "Desk Lamp",
        "description": "Adjustable LED desk lamp",
        "price": 49.99,
        "stock": 12,
        "category": "Home",
        "isActive": True,
    }
