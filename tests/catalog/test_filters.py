"""Tests for the list filters."""

from decimal import Decimal

from catalog_api.catalog.filters import filter_products, matches_search
from catalog_api.catalog.query import ProductQuery, normalize_query


def ids(products) -> list[int]:
    return [p.id for p in products]


class TestCategoryFilter:
    """Tests for category filtering."""

    def test_matches_case_insensitively(self, sample_products) -> None:
        """Category filter ignores case."""
        query = normalize_query({"category": "ELECTRONICS"})
        assert ids(filter_products(sample_products, query)) == [1, 2]

    def test_matches_substring(self, sample_products) -> None:
        """Category filter matches a substring of the category."""
        query = normalize_query({"category": "lap"})
        assert ids(filter_products(sample_products, query)) == [3]

    def test_no_match_returns_empty(self, sample_products) -> None:
        """Unmatched category removes everything."""
        query = normalize_query({"category": "furniture"})
        assert filter_products(sample_products, query) == []


class TestPriceFilter:
    """Tests for price bounds."""

    def test_min_price_inclusive(self, sample_products) -> None:
        """minPrice keeps products priced at the bound."""
        query = ProductQuery(min_price=Decimal("200"))
        assert ids(filter_products(sample_products, query)) == [2, 3]

    def test_max_price_inclusive(self, sample_products) -> None:
        """maxPrice keeps products priced at the bound."""
        query = ProductQuery(max_price=Decimal("200"))
        assert ids(filter_products(sample_products, query)) == [1, 2]

    def test_price_range(self, sample_products) -> None:
        """minPrice and maxPrice together select a range."""
        query = normalize_query({"minPrice": "150", "maxPrice": "250"})
        assert ids(filter_products(sample_products, query)) == [2]

    def test_inverted_range_is_empty(self, sample_products) -> None:
        """A range with min above max matches nothing."""
        query = ProductQuery(min_price=Decimal("300"), max_price=Decimal("100"))
        assert filter_products(sample_products, query) == []


class TestSearchFilter:
    """Tests for free-text search."""

    def test_search_name(self, sample_products) -> None:
        """Search matches the product name."""
        query = normalize_query({"search": "CAMERA"})
        assert ids(filter_products(sample_products, query)) == [1]

    def test_search_description(self, sample_products) -> None:
        """Search matches the description."""
        query = normalize_query({"search": "noise"})
        assert ids(filter_products(sample_products, query)) == [2]

    def test_search_category(self, sample_products) -> None:
        """Search matches the category."""
        query = normalize_query({"search": "laptop"})
        assert ids(filter_products(sample_products, query)) == [3]

    def test_missing_description_does_not_fail(self, product_factory) -> None:
        """Products without a description are searched as empty text."""
        product = product_factory(1, name="Thing", description=None)
        assert not matches_search(product, "anything")
        assert matches_search(product, "thi")


class TestComposition:
    """Tests for combining filters."""

    def test_no_filters_is_identity(self, sample_products) -> None:
        """Without filters nothing is removed and order is kept."""
        result = filter_products(sample_products, ProductQuery())
        assert result == sample_products

    def test_filters_combine_with_and(self, sample_products) -> None:
        """A product must pass every active filter."""
        query = normalize_query(
            {"category": "electronics", "minPrice": "150", "search": "head"}
        )
        assert ids(filter_products(sample_products, query)) == [2]

    def test_adding_filter_never_increases_count(self, sample_products) -> None:
        """Each added filter keeps or shrinks the result."""
        steps = [
            {},
            {"category": "e"},
            {"category": "e", "maxPrice": "250"},
            {"category": "e", "maxPrice": "250", "search": "camera"},
        ]
        counts = [
            len(filter_products(sample_products, normalize_query(raw)))
            for raw in steps
        ]
        assert counts == sorted(counts, reverse=True)

    def test_preserves_input_order(self, sample_products) -> None:
        """Survivors keep their relative order."""
        reversed_input = list(reversed(sample_products))
        query = normalize_query({"category": "electronics"})
        assert ids(filter_products(reversed_input, query)) == [2, 1]
