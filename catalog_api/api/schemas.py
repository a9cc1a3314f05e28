"""API schemas for the catalog API.

Pydantic models for request/response validation and serialization.
JSON field names are camelCase; Python attributes stay snake_case.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from catalog_api.catalog.models import (
    CATEGORY_LENGTH,
    DESCRIPTION_LENGTH,
    MAX_PRICE,
    MAX_STOCK,
    MIN_PRICE,
    NAME_LENGTH,
    Product,
)
from catalog_api.catalog.pagination import PageMetadata
from catalog_api.catalog.query import ProductQuery


def _now() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Base model serializing to camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(CamelModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(CamelModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    success: bool = Field(default=False, description="Always false for errors")
    message: str = Field(..., description="Human-readable error message")
    status_code: int = Field(..., description="HTTP status code")
    error_code: str = Field(..., description="Machine-readable error code")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )
    timestamp: datetime = Field(default_factory=_now)


class ApiResponse(CamelModel):
    """Envelope shared by every successful response."""

    success: bool = Field(default=True, description="Whether the request succeeded")
    message: str = Field(..., description="Human-readable result message")
    timestamp: datetime = Field(default_factory=_now, description="Response time")


# ============================================================================
# Product Schemas
# ============================================================================


class ProductSchema(CamelModel):
    """Product details."""

    id: int = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    description: str | None = Field(None, description="Product description")
    price: float = Field(..., description="Price in base currency")
    stock: int = Field(..., description="Available quantity")
    category: str = Field(..., description="Product category")
    is_active: bool = Field(..., description="Whether the product is available")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_product(cls, product: Product) -> "ProductSchema":
        """Build the response schema from a stored product."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=float(product.price),
            stock=product.stock,
            category=product.category,
            is_active=product.is_active,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class ProductCreateRequest(CamelModel):
    """Request to create a product."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str = Field(..., min_length=NAME_LENGTH[0], max_length=NAME_LENGTH[1])
    description: str | None = Field(
        default=None,
        min_length=DESCRIPTION_LENGTH[0],
        max_length=DESCRIPTION_LENGTH[1],
    )
    price: Decimal = Field(
        ..., ge=MIN_PRICE, le=MAX_PRICE, description="Price, at least 0.01"
    )
    stock: int = Field(..., ge=0, le=MAX_STOCK)
    category: str = Field(
        ..., min_length=CATEGORY_LENGTH[0], max_length=CATEGORY_LENGTH[1]
    )
    is_active: bool


class ProductUpdateRequest(CamelModel):
    """Partial product update; only the fields sent are changed."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str | None = Field(
        default=None, min_length=NAME_LENGTH[0], max_length=NAME_LENGTH[1]
    )
    description: str | None = Field(
        default=None,
        min_length=DESCRIPTION_LENGTH[0],
        max_length=DESCRIPTION_LENGTH[1],
    )
    price: Decimal | None = Field(default=None, le=MAX_PRICE)
    stock: int | None = Field(default=None, le=MAX_STOCK)
    category: str | None = Field(
        default=None, min_length=CATEGORY_LENGTH[0], max_length=CATEGORY_LENGTH[1]
    )
    is_active: bool | None = None

    def changes(self) -> dict[str, Any]:
        """Fields the client actually sent, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)

    def sent_fields(self) -> list[str]:
        """Fields the client actually sent, as the client spelled them."""
        return list(self.model_dump(exclude_unset=True, by_alias=True))


class PaginationSchema(CamelModel):
    """Page metadata."""

    current_page: int
    items_per_page: int
    total_items: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def from_metadata(cls, metadata: PageMetadata) -> "PaginationSchema":
        return cls(
            current_page=metadata.current_page,
            items_per_page=metadata.items_per_page,
            total_items=metadata.total_items,
            total_pages=metadata.total_pages,
            has_next_page=metadata.has_next_page,
            has_previous_page=metadata.has_previous_page,
        )


class PriceRangeSchema(CamelModel):
    min: float = 0
    max: float | Literal["unlimited"] = "unlimited"


class AppliedFiltersSchema(CamelModel):
    """Filters the list was computed with."""

    category: str | None = None
    price_range: PriceRangeSchema = Field(default_factory=PriceRangeSchema)
    search: str | None = None

    @classmethod
    def from_query(cls, query: ProductQuery) -> "AppliedFiltersSchema":
        return cls(
            category=query.category,
            price_range=PriceRangeSchema(
                min=float(query.min_price) if query.min_price is not None else 0,
                max=(
                    float(query.max_price)
                    if query.max_price is not None
                    else "unlimited"
                ),
            ),
            search=query.search,
        )


class ProductResponse(ApiResponse):
    """Single product response."""

    data: ProductSchema


class ProductListResponse(ApiResponse):
    """Paginated product list response."""

    data: list[ProductSchema]
    pagination: PaginationSchema
    filters: AppliedFiltersSchema


class CategoryProductsResponse(ApiResponse):
    """Active products in one category."""

    category: str
    data: list[ProductSchema]


class ProductUpdateResponse(ApiResponse):
    """Response for a partial update."""

    updated_fields: list[str] = Field(..., description="Fields that were sent")
    data: ProductSchema


# ============================================================================
# Application Schemas
# ============================================================================


class HealthResponse(CamelModel):
    """Health check response schema."""

    message: str
    status: str
    timestamp: datetime = Field(default_factory=_now)


class AppInfoResponse(CamelModel):
    """Application metadata."""

    name: str
    version: str
    environment: str
