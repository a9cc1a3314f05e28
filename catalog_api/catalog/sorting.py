"""Ordering for the product list.

Each sort field maps to a typed key function and Python's stable sort
does the rest, so products with equal keys keep their input order in
both directions.
"""

from collections.abc import Callable, Iterable
from typing import Any

from catalog_api.catalog.models import Product, SortField, SortOrder

SORT_KEYS: dict[SortField, Callable[[Product], Any]] = {
    SortField.NAME: lambda p: p.name.lower(),
    SortField.PRICE: lambda p: p.price,
    SortField.CREATED_AT: lambda p: p.created_at,
    SortField.STOCK: lambda p: p.stock,
}


def sort_products(
    products: Iterable[Product],
    sort_by: SortField = SortField.CREATED_AT,
    order: SortOrder = SortOrder.DESC,
) -> list[Product]:
    """Return ``products`` ordered by ``sort_by``.

    Args:
        products: Products to order.
        sort_by: Field to order by.
        order: ASC for ascending, DESC for descending.

    Returns:
        A new list; the input is not modified.
    """
    return sorted(
        products,
        key=SORT_KEYS[SortField(sort_by)],
        reverse=SortOrder(order) is SortOrder.DESC,
    )
