"""Catalog data model.

Products are frozen dataclasses: the store replaces a record on every
mutation and callers only ever hold immutable values.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


# ============================================================================
# Limits
# ============================================================================

MIN_PRICE = Decimal("0.01")
MAX_PRICE = Decimal("999999.99")
MAX_STOCK = 999_999

NAME_LENGTH = (1, 100)
DESCRIPTION_LENGTH = (10, 500)
CATEGORY_LENGTH = (1, 50)


# ============================================================================
# Enumerations
# ============================================================================


class SortField(str, Enum):
    """Fields the list endpoint can order by."""

    NAME = "name"
    PRICE = "price"
    CREATED_AT = "createdAt"
    STOCK = "stock"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "ASC"
    DESC = "DESC"


# ============================================================================
# Product
# ============================================================================


@dataclass(frozen=True)
class ProductData:
    """Client-supplied fields of a product, before the store assigns identity.

    Attributes:
        name: Display name.
        price: Unit price in base currency.
        stock: Units available.
        category: Category label, compared case-insensitively.
        is_active: Whether the product shows up in category listings.
        description: Optional long description.
    """

    name: str
    price: Decimal
    stock: int
    category: str
    is_active: bool = True
    description: str | None = None


@dataclass(frozen=True)
class Product:
    """A catalog item owned by the store."""

    id: int
    name: str
    price: Decimal
    stock: int
    category: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
    description: str | None = None


# Fields a partial update may touch; identity and timestamps are store-owned.
UPDATABLE_FIELDS = frozenset(
    {"name", "description", "price", "stock", "category", "is_active"}
)
