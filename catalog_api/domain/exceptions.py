"""Domain exceptions.

All catalog-level errors that represent rejected input or missing records.
The HTTP layer maps each family to a status code; nothing here knows
about HTTP.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the API layer.
    """

    error_code = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Validation Errors
# ============================================================================


class ValidationError(DomainError):
    """Raised when input is malformed or outside its allowed range."""

    error_code = "VALIDATION_ERROR"

    def __init__(self, field: str, message: str, value: Any = None) -> None:
        """Initialize validation error.

        Args:
            field: Name of the offending field, as the client spelled it.
            message: Explanation naming the field.
            value: The rejected value, if any.
        """
        super().__init__(message, details={"field": field, "value": value})
        self.field = field


class PageOutOfRangeError(ValidationError):
    """Raised when a requested page lies outside the result set."""

    error_code = "PAGE_OUT_OF_RANGE"

    def __init__(self, page: int, total_pages: int) -> None:
        super().__init__(
            "page",
            f"page {page} is out of range, must be between 1 and {total_pages}",
            value=page,
        )
        self.details["total_pages"] = total_pages
        self.page = page
        self.total_pages = total_pages


# ============================================================================
# Lookup Errors
# ============================================================================


class NotFoundError(DomainError):
    """Base class for missing-record errors."""

    error_code = "NOT_FOUND"


class ProductNotFoundError(NotFoundError):
    """Raised when no product carries the requested id."""

    error_code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: int) -> None:
        """Initialize product not found error.

        Args:
            product_id: The id that was looked up.
        """
        super().__init__(
            f"Product with ID {product_id} not found",
            details={"product_id": product_id},
        )
        self.product_id = product_id
