"""Catalog service for product listing.

Runs the list pipeline (filter, sort, paginate) over a snapshot of the
store. Mutations go straight to the store.
"""

import structlog

from catalog_api.catalog.filters import filter_products
from catalog_api.catalog.models import Product
from catalog_api.catalog.pagination import Page, paginate
from catalog_api.catalog.query import ProductQuery
from catalog_api.catalog.sorting import sort_products
from catalog_api.catalog.store import CatalogStore

logger = structlog.get_logger()


class CatalogService:
    """Service for catalog queries.

    Example usage:
        store = CatalogStore(SEED_PRODUCTS)
        service = CatalogService(store)

        page = service.list_products(normalize_query({"sortBy": "price"}))
        for product in page.items:
            ...
    """

    def __init__(self, store: CatalogStore) -> None:
        self.store = store

    def list_products(self, query: ProductQuery) -> Page[Product]:
        """Filter, sort and paginate the catalog.

        Args:
            query: Normalized list query.

        Returns:
            The requested page with metadata computed over the filtered set.

        Raises:
            PageOutOfRangeError: If the page lies beyond the filtered set.
        """
        logger.debug("Listing products", query=query)

        matching = filter_products(self.store.find_all(), query)
        ordered = sort_products(matching, query.sort_by, query.order)
        return paginate(ordered, query.page, query.limit)

    def count(self, query: ProductQuery | None = None) -> int:
        """Number of products matching ``query``'s filters.

        Without a query, the size of the whole catalog.
        """
        if query is None or not query.has_filters:
            return self.store.count()
        return len(filter_products(self.store.find_all(), query))
