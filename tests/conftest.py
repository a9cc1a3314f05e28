"""Shared fixtures for catalog tests."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from catalog_api.catalog.models import Product
from catalog_api.catalog.service import CatalogService
from catalog_api.catalog.store import CatalogStore

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)
CLOCK_START = datetime(2025, 1, 1, tzinfo=timezone.utc)


class StepClock:
    """Clock that advances one second per reading."""

    def __init__(self, start: datetime = CLOCK_START) -> None:
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


def make_product(
    id: int,
    name: str = "Widget",
    price: str = "10.00",
    stock: int = 1,
    category: str = "Misc",
    is_active: bool = True,
    description: str | None = None,
    day: int = 1,
) -> Product:
    """Build a stored product with sensible defaults."""
    created = BASE_TIME + timedelta(days=day)
    return Product(
        id=id,
        name=name,
        description=description,
        price=Decimal(price),
        stock=stock,
        category=category,
        is_active=is_active,
        created_at=created,
        updated_at=created,
    )


@pytest.fixture
def clock() -> StepClock:
    """Deterministic clock for store timestamps."""
    return StepClock()


@pytest.fixture
def product_factory():
    """Factory building stored products."""
    return make_product


@pytest.fixture
def sample_products() -> list[Product]:
    """Three products priced 100/200/300, two of them Electronics."""
    return [
        make_product(
            1,
            name="Camera",
            price="100",
            stock=5,
            category="Electronics",
            description="Compact digital camera",
            day=1,
        ),
        make_product(
            2,
            name="Headphones",
            price="200",
            stock=3,
            category="Electronics",
            description="Noise cancelling over-ear headphones",
            day=2,
        ),
        make_product(
            3,
            name="Ultrabook",
            price="300",
            stock=7,
            category="Laptop",
            description=None,
            day=3,
        ),
    ]


@pytest.fixture
def store(sample_products: list[Product], clock: StepClock) -> CatalogStore:
    """Fresh store holding the sample products."""
    return CatalogStore(sample_products, clock=clock)


@pytest.fixture
def service(store: CatalogStore) -> CatalogService:
    """Catalog service over the sample store."""
    return CatalogService(store)
