"""In-memory catalog store.

The single authoritative collection of products. Every read-then-write
runs under one lock, and records are immutable, so nothing handed out
by the store can be used to change it.
"""

import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import asdict, replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, NoReturn

import structlog

from catalog_api.catalog.models import (
    MAX_PRICE,
    MAX_STOCK,
    MIN_PRICE,
    UPDATABLE_FIELDS,
    Product,
    ProductData,
)
from catalog_api.domain.exceptions import ProductNotFoundError, ValidationError

logger = structlog.get_logger()

Clock = Callable[[], datetime]

# Client-facing spelling for fields named in error messages.
CLIENT_FIELD_NAMES = {"is_active": "isActive"}


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def _reject(field: str, message: str, value: Any) -> NoReturn:
    name = CLIENT_FIELD_NAMES.get(field, field)
    raise ValidationError(name, message.format(field=name), value=value)


def validate_fields(fields: Mapping[str, Any]) -> None:
    """Check product field values before they reach the store.

    Only the keys present in ``fields`` are checked, so the same function
    serves full creates and partial updates.

    Args:
        fields: Field name to proposed value.

    Raises:
        ValidationError: On the first value that breaks a product invariant.
    """
    for field in ("name", "category"):
        if field in fields:
            value = fields[field]
            if not isinstance(value, str) or not value.strip():
                _reject(field, "{field} must be a non-empty string", value)

    if "price" in fields:
        price = fields["price"]
        if not isinstance(price, (int, Decimal)) or isinstance(price, bool):
            _reject("price", "{field} must be a decimal number", price)
        if price <= 0:
            _reject("price", "{field} must be a positive number", price)
        if price < MIN_PRICE:
            _reject("price", f"{{field}} must be at least {MIN_PRICE}", price)
        if price > MAX_PRICE:
            _reject("price", f"{{field}} cannot exceed {MAX_PRICE}", price)

    if "stock" in fields:
        stock = fields["stock"]
        if not isinstance(stock, int) or isinstance(stock, bool):
            _reject("stock", "{field} must be an integer", stock)
        if stock < 0:
            _reject("stock", "{field} cannot be negative", stock)
        if stock > MAX_STOCK:
            _reject("stock", f"{{field}} cannot exceed {MAX_STOCK}", stock)

    if "is_active" in fields and not isinstance(fields["is_active"], bool):
        _reject("is_active", "{field} must be a boolean value", fields["is_active"])


class CatalogStore:
    """Thread-safe in-memory product collection with CRUD operations.

    Ids come from a counter that only moves forward, so an id is never
    handed out twice, even after its product is deleted.
    """

    def __init__(
        self,
        products: Iterable[Product] = (),
        clock: Clock = utc_now,
    ) -> None:
        """Initialize the store.

        Args:
            products: Existing records to load, e.g. a seed catalog.
            clock: Source of timestamps.
        """
        self._lock = threading.RLock()
        self._clock = clock
        self._products: list[Product] = []
        self._next_id = 1

        for product in products:
            if any(p.id == product.id for p in self._products):
                raise ValueError(f"Duplicate product id {product.id} in initial data")
            self._products.append(product)
            self._next_id = max(self._next_id, product.id + 1)

    def _index_of(self, product_id: int) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        raise ProductNotFoundError(product_id)

    def count(self) -> int:
        """Number of products currently held."""
        with self._lock:
            return len(self._products)

    def find_all(self) -> list[Product]:
        """All products in insertion order."""
        with self._lock:
            return list(self._products)

    def find_by_id(self, product_id: int) -> Product:
        """Get a product by id.

        Raises:
            ProductNotFoundError: If no product has this id.
        """
        with self._lock:
            return self._products[self._index_of(product_id)]

    def find_by_category(self, category: str, active_only: bool = True) -> list[Product]:
        """Products whose category equals ``category``, ignoring case.

        Args:
            category: Category name to match exactly.
            active_only: Also require ``is_active``.

        Returns:
            Matching products in insertion order.
        """
        wanted = category.strip().lower()
        with self._lock:
            return [
                p
                for p in self._products
                if p.category.lower() == wanted and (p.is_active or not active_only)
            ]

    def create(self, data: ProductData) -> Product:
        """Add a product and assign its id and timestamps.

        Args:
            data: Client-supplied product fields.

        Returns:
            The stored product.

        Raises:
            ValidationError: If a field breaks a product invariant.
        """
        validate_fields(asdict(data))

        with self._lock:
            now = self._clock()
            product = Product(
                id=self._next_id,
                name=data.name,
                description=data.description,
                price=data.price,
                stock=data.stock,
                category=data.category,
                is_active=data.is_active,
                created_at=now,
                updated_at=now,
            )
            self._next_id += 1
            self._products.append(product)

        logger.info("Product created", product_id=product.id, name=product.name)
        return product

    def update(self, product_id: int, changes: Mapping[str, Any]) -> Product:
        """Merge ``changes`` into an existing product.

        Fields absent from ``changes`` keep their values. ``updated_at``
        is refreshed and never moves backwards.

        Args:
            product_id: Product to update.
            changes: Field name to new value; keys must be updatable fields.

        Returns:
            The updated product.

        Raises:
            ProductNotFoundError: If no product has this id.
            ValidationError: If a field is unknown or a value is invalid.
                The store is left unchanged.
        """
        unknown = sorted(set(changes) - UPDATABLE_FIELDS)
        if unknown:
            _reject(unknown[0], "property {field} cannot be updated", changes[unknown[0]])

        with self._lock:
            index = self._index_of(product_id)
            validate_fields(changes)

            current = self._products[index]
            updated = replace(
                current,
                **changes,
                updated_at=max(self._clock(), current.updated_at),
            )
            self._products[index] = updated

        logger.info(
            "Product updated", product_id=product_id, fields=sorted(changes)
        )
        return updated

    def delete(self, product_id: int) -> Product:
        """Remove a product and return it.

        Raises:
            ProductNotFoundError: If no product has this id.
        """
        with self._lock:
            removed = self._products.pop(self._index_of(product_id))

        logger.info("Product deleted", product_id=product_id, name=removed.name)
        return removed
