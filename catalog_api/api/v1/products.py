"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Endpoints for listing, browsing by category and fetching products.

Pagination and sort parameters are passed to the QueryEngine as received;
out-of-range values are normalized there instead of being rejected.

==============================================================================
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from catalog_api.catalog import Product, QueryEngine
from catalog_api.core import exceptions
from catalog_api.core.dependencies import get_query_engine
from catalog_api.schemas import ErrorResponse, PaginatedResponse


router = APIRouter(prefix="/products", tags=["Products"])

LIST_CACHE_AGE = "120s"


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, engine: QueryEngine):
        self._engine = engine

    def list_products(
        self,
        page: Optional[int],
        page_size: Optional[int],
        sort_by: Optional[str],
        sort_order: Optional[str]
    ) -> PaginatedResponse[Product]:
        """List active products with sorting."""
        result = self._engine.list_active(page, page_size, sort_by, sort_order)
        return PaginatedResponse[Product].from_result(result, cache_age=LIST_CACHE_AGE)

    def list_by_category(
        self,
        category: str,
        page: Optional[int],
        page_size: Optional[int]
    ) -> PaginatedResponse[Product]:
        """List in-stock products of one category."""
        result = self._engine.list_by_category(category, page, page_size)
        return PaginatedResponse[Product].from_result(result)

    def get_by_id(self, product_id: str) -> Product:
        """Get product by ID."""
        product = self._engine.get_by_id(product_id)

        if product is None:
            raise exceptions.product_not_found(product_id)

        return product


@router.get(
    "",
    response_model=PaginatedResponse[Product],
    summary="Get all products",
    responses={400: {"model": ErrorResponse}},
)
async def list_products(
    page: Optional[int] = Query(None, description="Page number (1-based)", examples=[1]),
    page_size: Optional[int] = Query(None, alias="pageSize", description="Items per page (max 100)", examples=[20]),
    sort_by: Optional[str] = Query(None, alias="sortBy", description="Sort field: name, price, or created", examples=["name"]),
    sort_order: Optional[str] = Query(None, alias="sortOrder", description="Sort order: asc or desc", examples=["asc"]),
    engine: QueryEngine = Depends(get_query_engine)
):
    """Retrieve all active products with pagination and sorting support."""
    controller = ProductController(engine)
    return controller.list_products(page, page_size, sort_by, sort_order)


@router.get(
    "/category/{category}",
    response_model=PaginatedResponse[Product],
    summary="Get products by category",
)
async def list_products_by_category(
    category: str = Path(..., description="Category name", examples=["Electronics"]),
    page: Optional[int] = Query(None, description="Page number (1-based)"),
    page_size: Optional[int] = Query(None, alias="pageSize", description="Items per page (max 100)"),
    engine: QueryEngine = Depends(get_query_engine)
):
    """Retrieve the in-stock products of a category with pagination."""
    controller = ProductController(engine)
    return controller.list_by_category(category, page, page_size)


@router.get(
    "/{product_id}",
    response_model=Product,
    summary="Get product by ID",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_product(
    product_id: str = Path(..., description="Product UUID", examples=["550e8400-e29b-41d4-a716-446655440000"]),
    engine: QueryEngine = Depends(get_query_engine)
):
    """Retrieve a specific product by its UUID."""
    controller = ProductController(engine)
    return controller.get_by_id(product_id)
