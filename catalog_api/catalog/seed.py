"""Demonstration catalog loaded on startup.

Four electronics products, one of them inactive and out of stock, so
every list filter and the active-only category listing have something
to show.
"""

from datetime import datetime, timezone
from decimal import Decimal

from catalog_api.catalog.models import Product


def _day(day: int) -> datetime:
    return datetime(2024, 1, day, tzinfo=timezone.utc)


SEED_PRODUCTS: tuple[Product, ...] = (
    Product(
        id=1,
        name="MacBook Pro 16-inch",
        description=(
            "High-performance laptop with M2 Pro chip, "
            "perfect for professionals and creatives"
        ),
        price=Decimal("2499.99"),
        stock=15,
        category="Electronics",
        is_active=True,
        created_at=_day(1),
        updated_at=_day(1),
    ),
    Product(
        id=2,
        name="iPhone 15 Pro",
        description="Latest iPhone with titanium design and advanced camera system",
        price=Decimal("999.99"),
        stock=25,
        category="Electronics",
        is_active=True,
        created_at=_day(2),
        updated_at=_day(2),
    ),
    Product(
        id=3,
        name="Samsung Galaxy S24",
        description="Android flagship with AI-powered features and stunning display",
        price=Decimal("899.99"),
        stock=0,
        category="Electronics",
        is_active=False,
        created_at=_day(3),
        updated_at=_day(3),
    ),
    Product(
        id=4,
        name="Dell XPS 13",
        description=(
            "Ultra-portable laptop with premium build quality "
            "and long battery life"
        ),
        price=Decimal("1299.99"),
        stock=8,
        category="Electronics",
        is_active=True,
        created_at=_day(4),
        updated_at=_day(4),
    ),
)
