"""Product endpoints.

Thin HTTP layer over the catalog: parses path and query input, calls the
service or store, and wraps results in the response envelope. Errors
propagate as domain exceptions and are rendered by the handlers in
``catalog_api.api.errors``.
"""

from fastapi import APIRouter, Request, Response, status

from catalog_api.api.dependencies import CatalogDep, SettingsDep
from catalog_api.api.schemas import (
    AppliedFiltersSchema,
    CategoryProductsResponse,
    ErrorResponse,
    PaginationSchema,
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductSchema,
    ProductUpdateRequest,
    ProductUpdateResponse,
)
from catalog_api.catalog.models import ProductData
from catalog_api.catalog.query import normalize_query
from catalog_api.domain.exceptions import ValidationError

router = APIRouter(prefix="/products", tags=["Products"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


def parse_product_id(raw: str) -> int:
    """Parse a product id path segment.

    Raises:
        ValidationError: If ``raw`` is not a positive integer.
    """
    if not (raw.isascii() and raw.isdigit()) or int(raw) < 1:
        raise ValidationError(
            "id", f"id must be a positive integer, got '{raw}'", value=raw
        )
    return int(raw)


# ============================================================================
# Endpoints
# ============================================================================


@router.get("", response_model=ProductListResponse, responses=ERROR_RESPONSES)
async def list_products(request: Request, catalog: CatalogDep) -> ProductListResponse:
    """List products with filtering, sorting and pagination.

    Query parameters: ``page``, ``limit``, ``category`` (substring, case
    insensitive), ``minPrice``, ``maxPrice``, ``search`` (name, description
    or category), ``sortBy`` (name, price, createdAt, stock) and
    ``order`` (ASC, DESC).

    The ``filters`` block echoes the normalized values, so ``category``
    comes back trimmed and lower-cased.
    """
    query = normalize_query(dict(request.query_params))
    page = catalog.list_products(query)

    return ProductListResponse(
        message="Products retrieved successfully",
        data=[ProductSchema.from_product(p) for p in page.items],
        pagination=PaginationSchema.from_metadata(page.metadata),
        filters=AppliedFiltersSchema.from_query(query),
    )


@router.get(
    "/category/{name}",
    response_model=CategoryProductsResponse,
    responses=ERROR_RESPONSES,
)
async def list_category(name: str, catalog: CatalogDep) -> CategoryProductsResponse:
    """List the active products of one category (exact, case-insensitive)."""
    products = catalog.store.find_by_category(name, active_only=True)

    return CategoryProductsResponse(
        message=f"Found {len(products)} active products in category '{name}'",
        category=name,
        data=[ProductSchema.from_product(p) for p in products],
    )


@router.get("/{product_id}", response_model=ProductResponse, responses=ERROR_RESPONSES)
async def get_product(
    product_id: str,
    response: Response,
    catalog: CatalogDep,
    settings: SettingsDep,
) -> ProductResponse:
    """Get product details by ID.

    Sets an advisory ``Cache-Control`` header; nothing invalidates it.
    """
    product = catalog.store.find_by_id(parse_product_id(product_id))
    response.headers["Cache-Control"] = (
        f"public, max-age={settings.product_cache_max_age}"
    )

    return ProductResponse(
        message="Product retrieved successfully",
        data=ProductSchema.from_product(product),
    )


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def create_product(
    payload: ProductCreateRequest, catalog: CatalogDep
) -> ProductResponse:
    """Create a product."""
    product = catalog.store.create(ProductData(**payload.model_dump()))

    return ProductResponse(
        message="Product created successfully",
        data=ProductSchema.from_product(product),
    )


@router.patch(
    "/{product_id}", response_model=ProductUpdateResponse, responses=ERROR_RESPONSES
)
async def update_product(
    product_id: str,
    payload: ProductUpdateRequest,
    catalog: CatalogDep,
) -> ProductUpdateResponse:
    """Update only the fields present in the request body."""
    product = catalog.store.update(parse_product_id(product_id), payload.changes())

    return ProductUpdateResponse(
        message="Product updated successfully",
        updated_fields=payload.sent_fields(),
        data=ProductSchema.from_product(product),
    )


@router.delete("/{product_id}", response_model=ProductResponse, responses=ERROR_RESPONSES)
async def delete_product(product_id: str, catalog: CatalogDep) -> ProductResponse:
    """Delete a product and return the removed record."""
    product = catalog.store.delete(parse_product_id(product_id))

    return ProductResponse(
        message=f"Product '{product.name}' deleted successfully",
        data=ProductSchema.from_product(product),
    )
