"""Domain layer for the product catalog.

Holds the exception hierarchy shared by the catalog core and the API.
"""

from catalog_api.domain.exceptions import (
    DomainError,
    NotFoundError,
    PageOutOfRangeError,
    ProductNotFoundError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "NotFoundError",
    "PageOutOfRangeError",
    "ProductNotFoundError",
    "ValidationError",
]
