"""Tests for list ordering."""

import pytest

from catalog_api.catalog.models import SortField, SortOrder
from catalog_api.catalog.sorting import SORT_KEYS, sort_products


def ids(products) -> list[int]:
    return [p.id for p in products]


def test_every_sort_field_has_a_key() -> None:
    """Each sort field maps to a key function."""
    assert set(SORT_KEYS) == set(SortField)


class TestSortByField:
    """Tests for ordering by each field."""

    def test_price_numeric(self, product_factory) -> None:
        """Prices compare as numbers, not strings."""
        products = [
            product_factory(1, price="100"),
            product_factory(2, price="20"),
            product_factory(3, price="3"),
        ]
        result = sort_products(products, SortField.PRICE, SortOrder.ASC)
        assert ids(result) == [3, 2, 1]

    def test_stock_descending(self, product_factory) -> None:
        """Stock sorts numerically, descending."""
        products = [
            product_factory(1, stock=2),
            product_factory(2, stock=10),
            product_factory(3, stock=0),
        ]
        result = sort_products(products, SortField.STOCK, SortOrder.DESC)
        assert ids(result) == [2, 1, 3]

    def test_name_case_insensitive(self, product_factory) -> None:
        """Names compare on their lower-cased value."""
        products = [
            product_factory(1, name="banana"),
            product_factory(2, name="Apple"),
            product_factory(3, name="cherry"),
        ]
        result = sort_products(products, SortField.NAME, SortOrder.ASC)
        assert ids(result) == [2, 1, 3]

    def test_created_at_by_instant(self, product_factory) -> None:
        """Timestamps compare by instant."""
        products = [product_factory(1, day=5), product_factory(2, day=1)]
        result = sort_products(products, SortField.CREATED_AT, SortOrder.ASC)
        assert ids(result) == [2, 1]

    def test_default_is_newest_first(self, sample_products) -> None:
        """Without arguments products are ordered by createdAt DESC."""
        assert ids(sort_products(sample_products)) == [3, 2, 1]

    def test_accepts_raw_values(self, sample_products) -> None:
        """Plain strings are accepted for field and order."""
        result = sort_products(sample_products, "price", "ASC")
        assert ids(result) == [1, 2, 3]

    def test_input_not_modified(self, sample_products) -> None:
        """Sorting returns a new list."""
        before = list(sample_products)
        sort_products(sample_products, SortField.PRICE, SortOrder.DESC)
        assert sample_products == before


class TestStability:
    """Tests for stable ordering of equal keys."""

    @pytest.fixture
    def with_ties(self, product_factory):
        return [
            product_factory(1, price="50"),
            product_factory(2, price="10"),
            product_factory(3, price="50"),
            product_factory(4, price="10"),
            product_factory(5, price="30"),
        ]

    def test_equal_keys_keep_input_order_ascending(self, with_ties) -> None:
        """Ties keep their input order when ascending."""
        result = sort_products(with_ties, SortField.PRICE, SortOrder.ASC)
        assert ids(result) == [2, 4, 5, 1, 3]

    def test_equal_keys_keep_input_order_descending(self, with_ties) -> None:
        """Ties keep their input order when descending too."""
        result = sort_products(with_ties, SortField.PRICE, SortOrder.DESC)
        assert ids(result) == [1, 3, 5, 2, 4]

    def test_sorting_twice_is_identical(self, with_ties) -> None:
        """Sorting an already sorted list changes nothing."""
        once = sort_products(with_ties, SortField.PRICE, SortOrder.ASC)
        twice = sort_products(once, SortField.PRICE, SortOrder.ASC)
        assert once == twice

    def test_reverse_order_reverses_distinct_keys(self, sample_products) -> None:
        """With distinct keys, DESC is the reverse of ASC."""
        asc = sort_products(sample_products, SortField.PRICE, SortOrder.ASC)
        desc = sort_products(sample_products, SortField.PRICE, SortOrder.DESC)
        assert desc == list(reversed(asc))

    def test_identical_timestamps(self, product_factory) -> None:
        """Products created at the same instant keep input order."""
        products = [product_factory(n, day=7) for n in (3, 1, 2)]
        result = sort_products(products, SortField.CREATED_AT, SortOrder.DESC)
        assert ids(result) == [3, 1, 2]
