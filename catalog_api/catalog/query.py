"""Query normalization for the product list endpoint.

Turns raw, possibly missing or malformed query-string values into a
fully-defaulted ``ProductQuery``. Bounds and allowed values are kept as
data so callers and tests can enumerate them.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TypeVar

from catalog_api.catalog.models import MAX_PRICE, SortField, SortOrder
from catalog_api.domain.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class NumericRule:
    """Parsing rule for one numeric query parameter.

    Attributes:
        field: Query parameter name.
        minimum: Smallest accepted value.
        maximum: Largest accepted value.
        integer: Whether fractional values are rejected.
        default: Value used when the parameter is absent.
    """

    field: str
    minimum: Decimal
    maximum: Decimal
    integer: bool
    default: int | None = None


NUMERIC_RULES: dict[str, NumericRule] = {
    "page": NumericRule("page", Decimal(1), Decimal(1000), integer=True, default=1),
    "limit": NumericRule("limit", Decimal(1), Decimal(100), integer=True, default=10),
    "minPrice": NumericRule("minPrice", Decimal(0), MAX_PRICE, integer=False),
    "maxPrice": NumericRule("maxPrice", Decimal(0), MAX_PRICE, integer=False),
}

TEXT_FIELDS = ("category", "search")

ALLOWED_PARAMETERS = frozenset(
    {*NUMERIC_RULES, *TEXT_FIELDS, "sortBy", "order"}
)

DEFAULT_SORT_FIELD = SortField.CREATED_AT
DEFAULT_SORT_ORDER = SortOrder.DESC


@dataclass(frozen=True)
class ProductQuery:
    """Normalized list query, safe to hand to filter, sort and paginate.

    ``category`` is already lower-cased; ``category`` and ``search`` are
    ``None`` when absent or blank.
    """

    page: int = 1
    limit: int = 10
    category: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    search: str | None = None
    sort_by: SortField = DEFAULT_SORT_FIELD
    order: SortOrder = DEFAULT_SORT_ORDER

    @property
    def has_filters(self) -> bool:
        """Whether any filter would remove records."""
        return any(
            value is not None
            for value in (self.category, self.min_price, self.max_price, self.search)
        )


def parse_number(rule: NumericRule, raw: str | None) -> Decimal | None:
    """Parse and range-check one numeric parameter.

    Args:
        rule: Rule for the parameter.
        raw: Raw query-string value, or None when absent.

    Returns:
        The parsed value, the rule's default, or None.

    Raises:
        ValidationError: If the value is not a finite number or breaks a bound.
    """
    if raw is None:
        return None if rule.default is None else Decimal(rule.default)

    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        value = None
    if value is None or not value.is_finite():
        raise ValidationError(rule.field, f"{rule.field} must be a number", value=raw)

    if rule.integer and value != value.to_integral_value():
        raise ValidationError(
            rule.field, f"{rule.field} must be an integer", value=raw
        )
    if value < rule.minimum:
        raise ValidationError(
            rule.field, f"{rule.field} must be at least {rule.minimum}", value=raw
        )
    if value > rule.maximum:
        raise ValidationError(
            rule.field, f"{rule.field} cannot exceed {rule.maximum}", value=raw
        )
    return value


def _clean_text(raw: str | None) -> str | None:
    if raw is None:
        return None
    text = raw.strip()
    return text or None


def _parse_choice(field: str, raw: str | None, choices: type[E], default: E) -> E:
    if raw is None:
        return default
    try:
        return choices(raw)
    except ValueError:
        allowed = ", ".join(member.value for member in choices)
        raise ValidationError(
            field, f"{field} must be one of: {allowed}", value=raw
        ) from None


def normalize_query(raw: Mapping[str, str | None]) -> ProductQuery:
    """Build a ``ProductQuery`` from raw query parameters.

    Args:
        raw: Parameter name to raw string value. Missing keys and None
            values both mean "not provided".

    Returns:
        Normalized, immutable query.

    Raises:
        ValidationError: On the first unknown or invalid parameter.
    """
    unknown = sorted(set(raw) - ALLOWED_PARAMETERS)
    if unknown:
        raise ValidationError(
            unknown[0], f"property {unknown[0]} should not exist", value=raw[unknown[0]]
        )

    numbers = {
        name: parse_number(rule, raw.get(name)) for name, rule in NUMERIC_RULES.items()
    }
    category = _clean_text(raw.get("category"))

    return ProductQuery(
        page=int(numbers["page"]),
        limit=int(numbers["limit"]),
        category=category.lower() if category else None,
        min_price=numbers["minPrice"],
        max_price=numbers["maxPrice"],
        search=_clean_text(raw.get("search")),
        sort_by=_parse_choice("sortBy", raw.get("sortBy"), SortField, DEFAULT_SORT_FIELD),
        order=_parse_choice("order", raw.get("order"), SortOrder, DEFAULT_SORT_ORDER),
    )
