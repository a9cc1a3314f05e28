"""Predicate filters for the product list.

Every active filter must pass for a product to survive (AND). Input
order is preserved.
"""

from collections.abc import Callable, Iterable

from catalog_api.catalog.models import Product
from catalog_api.catalog.query import ProductQuery

ProductPredicate = Callable[[Product], bool]


def matches_category(product: Product, category: str) -> bool:
    """Case-insensitive substring match on the product category."""
    return category.lower() in product.category.lower()


def matches_search(product: Product, term: str) -> bool:
    """Case-insensitive substring match on name, description or category."""
    needle = term.lower()
    return (
        needle in product.name.lower()
        or needle in (product.description or "").lower()
        or needle in product.category.lower()
    )


def build_predicates(query: ProductQuery) -> list[ProductPredicate]:
    """Collect one predicate per active filter in ``query``.

    Args:
        query: Normalized list query.

    Returns:
        Predicates to AND together. Empty when no filter is active.
    """
    predicates: list[ProductPredicate] = []

    if query.category is not None:
        category = query.category
        predicates.append(lambda p: matches_category(p, category))

    if query.min_price is not None:
        min_price = query.min_price
        predicates.append(lambda p: p.price >= min_price)

    if query.max_price is not None:
        max_price = query.max_price
        predicates.append(lambda p: p.price <= max_price)

    if query.search is not None:
        search = query.search
        predicates.append(lambda p: matches_search(p, search))

    return predicates


def filter_products(products: Iterable[Product], query: ProductQuery) -> list[Product]:
    """Return the products that pass every active filter in ``query``."""
    predicates = build_predicates(query)
    return [p for p in products if all(check(p) for check in predicates)]
