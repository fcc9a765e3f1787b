"""Catalog queries over the Product aggregate."""

import math
from dataclasses import dataclass, field
from enum import Enum

from protean.utils.query import Q

from catalogue.domain import catalogue
from catalogue.product.product import Product

DEFAULT_PAGE_SIZE = 12
DEFAULT_FEATURED_LIMIT = 8
_SCAN_BATCH = 100


class SortKey(Enum):
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    NAME = "name"
    NEWEST = "newest"
    RATING = "rating"

    @classmethod
    def parse(cls, value):
        """Resolve a sort key, falling back to ``NEWEST`` for unknown values."""
        try:
            return cls(value)
        except ValueError:
            return cls.NEWEST


_ORDERING = {
    SortKey.PRICE_ASC: ["price"],
    SortKey.PRICE_DESC: ["-price"],
    SortKey.NAME: ["name"],
    SortKey.NEWEST: ["-created_at"],
    SortKey.RATING: ["-rating"],
}


def parse_float(value):
    """Lenient float parser: anything non-numeric becomes ``None``."""
    if value is None or value == "":
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(parsed) else parsed


def parse_positive_int(value, default):
    """Lenient integer parser: non-numeric or < 1 becomes ``default``."""
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= 1 else default


@dataclass
class ProductQuery:
    search: str | None = None
    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    sort_by: SortKey = SortKey.NEWEST
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_params(
        cls,
        search=None,
        category=None,
        min_price=None,
        max_price=None,
        sort_by=None,
        page=None,
        limit=None,
    ):
        """Build a query from raw request parameters without rejecting any of them."""
        return cls(
            search=(search or "").strip() or None,
            category=None if not category or category == "all" else category,
            min_price=parse_float(min_price),
            max_price=parse_float(max_price),
            sort_by=SortKey.parse(sort_by),
            page=parse_positive_int(page, 1),
            limit=parse_positive_int(limit, DEFAULT_PAGE_SIZE),
        )


@dataclass
class ProductPage:
    products: list = field(default_factory=list)
    current_page: int = 1
    total_pages: int = 0
    total: int = 0

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        return self.current_page > 1


def _search_criteria(search):
    criteria = None
    for term in search.split():
        term_matches = Q(name__icontains=term) | Q(description__icontains=term) | Q(tags__icontains=term)
        criteria = term_matches if criteria is None else criteria | term_matches
    return criteria


@catalogue.repository(part_of=Product)
class ProductRepository:
    """Product persistence plus the public catalog queries.

    Every query here only sees active products; ``get`` still reads
    inactive ones by id.
    """

    def search(self, query: ProductQuery) -> ProductPage:
        queryset = self._dao.query.filter(is_active=True)

        if query.category:
            queryset = queryset.filter(category=query.category)
        if query.min_price is not None:
            queryset = queryset.filter(price__gte=query.min_price)
        if query.max_price is not None:
            queryset = queryset.filter(price__lte=query.max_price)
        if query.search:
            criteria = _search_criteria(query.search)
            if criteria is not None:
                queryset = queryset.filter(criteria)

        results = (
            queryset.order_by(_ORDERING[query.sort_by])
            .offset((query.page - 1) * query.limit)
            .limit(query.limit)
            .all()
        )

        return ProductPage(
            products=list(results.items),
            current_page=query.page,
            total_pages=math.ceil(results.total / query.limit),
            total=results.total,
        )

    def featured(self, limit: int = DEFAULT_FEATURED_LIMIT) -> list[Product]:
        results = self._dao.query.filter(is_active=True, is_featured=True).order_by(["-created_at"]).limit(limit).all()
        return list(results.items)

    def categories(self) -> list[str]:
        """Sorted distinct categories across active products."""
        found = set()
        offset = 0
        while True:
            results = self._dao.query.filter(is_active=True).order_by(["name"]).offset(offset).limit(_SCAN_BATCH).all()
            found.update(product.category for product in results.items)
            offset += _SCAN_BATCH
            if offset >= results.total:
                break
        return sorted(found)
