"""
==============================================================================
Product Query Engine
==============================================================================

List, filter, sort and paginate products from a ProductCatalog.

Parameter Normalization:
-----------------------
- page:      absent or < 1            -> 1
- page_size: absent, < 1 or > 100     -> 20 (an oversized page resets to
                                         the default, it is not capped at 100)
- sort_by:   name | price | created    -> anything else means name
- sort_order: asc | desc               -> anything else means asc

Sources:
-------
Every result carries static ``cached``/``source`` labels describing the
backend a production deployment would use. They are not derived from any
real cache.

==============================================================================
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable, List, Optional, Sequence
from uuid import UUID

from catalog_api.core import exceptions

from .catalog import ProductCatalog
from .models import Product


# Module logger
logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

SOURCE_PRIMARY = "mongodb"
SOURCE_SEARCH = "elasticsearch"


class SortField(str, Enum):
    """Sort keys accepted by list_active."""

    NAME = "name"
    PRICE = "price"
    CREATED = "created"

    @classmethod
    def resolve(cls, value: Optional[str]) -> "SortField":
        """Map a raw value to a sort key (case-insensitive, default name)."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.NAME


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def resolve(cls, value: Optional[str]) -> "SortOrder":
        """Map a raw value to a direction (case-insensitive, default asc)."""
        if value is not None and value.strip().lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


_SORT_KEYS = {
    SortField.NAME: lambda p: p.name,
    SortField.PRICE: lambda p: p.price,
    SortField.CREATED: lambda p: p.created_at,
}


@dataclass(frozen=True)
class PageRequest:
    """Normalized pagination parameters."""

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def normalize(cls, page: Optional[int], page_size: Optional[int]) -> "PageRequest":
        """Apply the page/page_size fallback rules."""
        if page is None or page < 1:
            page = DEFAULT_PAGE
        if page_size is None or page_size < 1 or page_size > MAX_PAGE_SIZE:
            page_size = DEFAULT_PAGE_SIZE
        return cls(page=page, page_size=page_size)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass(frozen=True)
class SearchResult:
    """
    One page of matched products plus pagination figures.

    Attributes:
        products: The products on the requested page
        page: Normalized page number
        page_size: Normalized page size
        total_count: Number of products matching before pagination
        total_pages: ceil(total_count / page_size)
        cached: Static cache label
        source: Static backend label
    """

    products: List[Product]
    page: int
    page_size: int
    total_count: int
    total_pages: int
    cached: bool
    source: str


def paginate(
    matches: Sequence[Product],
    paging: PageRequest,
    cached: bool,
    source: str
) -> SearchResult:
    """
    Cut one page out of the matched products.

    A page starting past the end yields an empty list, never an error.
    """
    total_count = len(matches)
    total_pages = math.ceil(total_count / paging.page_size)
    start = paging.offset
    end = min(start + paging.page_size, total_count)
    page_items = list(matches[start:end]) if start < total_count else []

    return SearchResult(
        products=page_items,
        page=paging.page,
        page_size=paging.page_size,
        total_count=total_count,
        total_pages=total_pages,
        cached=cached,
        source=source,
    )


class QueryEngine:
    """
    Query operations over a read-only ProductCatalog.

    Every method is a pure function of the catalog and its arguments.

    Example:
        >>> engine = QueryEngine(ProductCatalog.demo())
        >>> result = engine.list_active(page=1, page_size=2, sort_by="price")
        >>> [p.name for p in result.products]
        ['Wireless Mouse', 'USB-C Hub']
    """

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> ProductCatalog:
        return self._catalog

    # =========================================================================
    # LISTING
    # =========================================================================

    def list_active(
        self,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None
    ) -> SearchResult:
        """
        List ACTIVE products sorted by name, price or creation time.

        Args:
            page: 1-based page number
            page_size: Items per page
            sort_by: name, price or created
            sort_order: asc or desc

        Returns:
            SearchResult labelled cached/mongodb
        """
        paging = PageRequest.normalize(page, page_size)
        field = SortField.resolve(sort_by)
        order = SortOrder.resolve(sort_order)

        active = [p for p in self._catalog.all_products() if p.is_active]
        # sorted() is stable in both directions
        ordered = sorted(
            active,
            key=_SORT_KEYS[field],
            reverse=order is SortOrder.DESC
        )

        logger.debug(
            f"list_active sort={field.value}/{order.value} "
            f"page={paging.page} size={paging.page_size} matched={len(ordered)}"
        )
        return paginate(ordered, paging, cached=True, source=SOURCE_PRIMARY)

    def list_by_category(
        self,
        category: str,
        page: Optional[int] = None,
        page_size: Optional[int] = None
    ) -> SearchResult:
        """Browse one category; in-stock ACTIVE products only."""
        return self.filter_search(
            category=category,
            in_stock=True,
            page=page,
            page_size=page_size,
        )

    # =========================================================================
    # SEARCH
    # =========================================================================

    def filter_search(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
        in_stock: Optional[bool] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None
    ) -> SearchResult:
        """
        Search products with a conjunction of optional filters.

        Results keep catalog order. Unless ``in_stock`` is explicitly
        False only ACTIVE products match; ``in_stock=False`` lifts the
        status restriction and does not require the product to be out
        of stock.

        Args:
            query: Case-insensitive substring of name or description
            category: Case-insensitive exact category
            min_price: Inclusive lower price bound
            max_price: Inclusive upper price bound
            in_stock: True requires stock_quantity > 0
            page: 1-based page number
            page_size: Items per page

        Returns:
            SearchResult labelled not cached/elasticsearch
        """
        paging = PageRequest.normalize(page, page_size)
        predicates = self._build_predicates(query, category, min_price, max_price, in_stock)

        matches = [
            product for product in self._catalog.all_products()
            if all(predicate(product) for predicate in predicates)
        ]

        logger.debug(
            f"filter_search query={query!r} category={category!r} "
            f"price=[{min_price}, {max_price}] in_stock={in_stock} matched={len(matches)}"
        )
        return paginate(matches, paging, cached=False, source=SOURCE_SEARCH)

    @staticmethod
    def _build_predicates(
        query: Optional[str],
        category: Optional[str],
        min_price: Optional[Decimal],
        max_price: Optional[Decimal],
        in_stock: Optional[bool]
    ) -> List[Callable[[Product], bool]]:
        """Translate the supplied filters into product predicates."""
        predicates: List[Callable[[Product], bool]] = [
            lambda p: p.is_active or in_stock is False
        ]

        if query:
            needle = query.lower()
            predicates.append(
                lambda p: needle in p.name.lower()
                or (p.description is not None and needle in p.description.lower())
            )

        if category:
            wanted = category.lower()
            predicates.append(lambda p: p.category.lower() == wanted)

        if min_price is not None:
            predicates.append(lambda p: p.price >= min_price)

        if max_price is not None:
            predicates.append(lambda p: p.price <= max_price)

        if in_stock:
            predicates.append(lambda p: p.in_stock)

        return predicates

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def get_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find a product by its UUID string.

        Returns:
            The product, or None when the id is well formed but unknown

        Raises:
            AppException: INVALID_ID_FORMAT unless ``product_id`` is a
                hyphenated 8-4-4-4-12 UUID
        """
        try:
            parsed = UUID(str(product_id))
        except ValueError:
            raise exceptions.invalid_product_id(product_id)

        # Braced, urn: and bare-hex spellings parse but are not accepted
        if str(parsed) != str(product_id).lower():
            raise exceptions.invalid_product_id(product_id)

        return self._catalog.by_id(parsed)
