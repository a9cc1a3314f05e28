"""Catalog module for product storage and listing.

Provides:
- Product model and sort enumerations
- Query normalization for list requests
- Filter, sort and pagination engines
- In-memory catalog store and the demonstration seed catalog
"""

from catalog_api.catalog.filters import filter_products
from catalog_api.catalog.models import Product, ProductData, SortField, SortOrder
from catalog_api.catalog.pagination import Page, PageMetadata, paginate
from catalog_api.catalog.query import ProductQuery, normalize_query
from catalog_api.catalog.seed import SEED_PRODUCTS
from catalog_api.catalog.service import CatalogService
from catalog_api.catalog.sorting import sort_products
from catalog_api.catalog.store import CatalogStore

__all__ = [
    "CatalogService",
    "CatalogStore",
    "Page",
    "PageMetadata",
    "Product",
    "ProductData",
    "ProductQuery",
    "SEED_PRODUCTS",
    "SortField",
    "SortOrder",
    "filter_products",
    "normalize_query",
    "paginate",
    "sort_products",
]
