"""
==============================================================================
Product Search Endpoints
==============================================================================

Filtered product search, served at /api/v1/search and at the root-level
/search path.

==============================================================================
"""

import logging
import time
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query

from catalog_api.catalog import Product, QueryEngine
from catalog_api.core.dependencies import get_query_engine
from catalog_api.schemas import ErrorResponse, PaginatedResponse


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["Search"])
root_router = APIRouter(tags=["Search"])

ROOT_CACHE_AGE = "60s"


class SearchFilters:
    """Query-string filters shared by both search routes."""

    def __init__(
        self,
        query: Optional[str] = Query(None, description="Search query (name and description)", examples=["laptop"]),
        category: Optional[str] = Query(None, description="Product category filter", examples=["Electronics"]),
        min_price: Optional[Decimal] = Query(None, alias="minPrice", description="Minimum price filter", examples=[500]),
        max_price: Optional[Decimal] = Query(None, alias="maxPrice", description="Maximum price filter", examples=[1500]),
        in_stock: Optional[bool] = Query(None, alias="inStock", description="Filter by stock availability", examples=[True]),
        page: Optional[int] = Query(None, description="Page number (1-based)"),
        page_size: Optional[int] = Query(None, alias="pageSize", description="Items per page (max 100)"),
    ):
        self.query = query
        self.category = category
        self.min_price = min_price
        self.max_price = max_price
        self.in_stock = in_stock
        self.page = page
        self.page_size = page_size


class SearchController:
    """Controller for filtered search."""

    def __init__(self, engine: QueryEngine):
        self._engine = engine

    def search(self, filters: SearchFilters, **labels) -> PaginatedResponse[Product]:
        """Run a filtered search and wrap the result."""
        result = self._engine.filter_search(
            query=filters.query,
            category=filters.category,
            min_price=filters.min_price,
            max_price=filters.max_price,
            in_stock=filters.in_stock,
            page=filters.page,
            page_size=filters.page_size,
        )
        return PaginatedResponse[Product].from_result(result, **labels)


@router.get(
    "",
    response_model=PaginatedResponse[Product],
    summary="Search products",
    responses={400: {"model": ErrorResponse}},
)
async def search_products(
    filters: SearchFilters = Depends(),
    engine: QueryEngine = Depends(get_query_engine)
):
    """Full-text search with optional category, price, and stock filters."""
    started = time.perf_counter()
    controller = SearchController(engine)
    response = controller.search(filters)

    elapsed_ms = int((time.perf_counter() - started) * 1000)
    response.metadata.search_time = f"{elapsed_ms}ms"
    response.metadata.data_freshness = "current"

    logger.debug(f"Search returned {response.pagination.total_count} matches in {elapsed_ms}ms")
    return response


@root_router.get(
    "/search",
    response_model=PaginatedResponse[Product],
    summary="Search products (root path)",
    responses={400: {"model": ErrorResponse}},
)
async def search_products_root(
    filters: SearchFilters = Depends(),
    engine: QueryEngine = Depends(get_query_engine)
):
    """Same search as /api/v1/search, served outside the versioned prefix."""
    controller = SearchController(engine)
    return controller.search(filters, cache_age=ROOT_CACHE_AGE)
