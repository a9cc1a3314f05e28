"""Page slicing and page metadata."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from catalog_api.domain.exceptions import PageOutOfRangeError, ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class PageMetadata:
    """Computed pagination descriptors.

    Attributes:
        current_page: Requested page (1-based).
        items_per_page: Page size.
        total_items: Size of the full ordered set.
        total_pages: Number of pages; 0 for an empty set.
    """

    current_page: int
    items_per_page: int
    total_items: int
    total_pages: int

    @property
    def has_next_page(self) -> bool:
        """Check if there's a next page."""
        return self.current_page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        """Check if there's a previous page."""
        return self.current_page > 1


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus its metadata."""

    items: list[T]
    metadata: PageMetadata


def paginate(items: Sequence[T], page: int, limit: int) -> Page[T]:
    """Slice ``items`` into the requested page.

    An empty set has zero pages but still answers page 1 with an empty
    slice.

    Args:
        items: Full ordered result set.
        page: Page number (1-based).
        limit: Items per page.

    Returns:
        The page slice and its metadata.

    Raises:
        ValidationError: If ``limit`` is not positive.
        PageOutOfRangeError: If ``page`` is outside ``[1, total_pages]``
            for a non-empty set, or not 1 for an empty one.
    """
    if limit < 1:
        raise ValidationError("limit", "limit must be at least 1", value=limit)

    total_items = len(items)
    total_pages = math.ceil(total_items / limit)

    if page < 1 or page > max(total_pages, 1):
        raise PageOutOfRangeError(page, max(total_pages, 1))

    start = (page - 1) * limit
    end = start + limit
    return Page(
        items=list(items[start:end]),
        metadata=PageMetadata(
            current_page=page,
            items_per_page=limit,
            total_items=total_items,
            total_pages=total_pages,
        ),
    )
