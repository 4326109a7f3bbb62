"""
==============================================================================
Catalog Package - Product Store and Queries
==============================================================================

Read-only product catalog with listing, filtering and pagination.

Classes:
--------
- Product: Pydantic model for products
- ProductCatalog: Immutable in-memory product store
- QueryEngine: List/search/lookup operations returning SearchResult

==============================================================================
"""

from .models import Product, ProductImage, ProductStatus
from .catalog import ProductCatalog, demo_products, init_catalog
from .query import PageRequest, QueryEngine, SearchResult, SortField, SortOrder

__all__ = [
    "Product",
    "ProductImage",
    "ProductStatus",
    "ProductCatalog",
    "demo_products",
    "init_catalog",
    "PageRequest",
    "QueryEngine",
    "SearchResult",
    "SortField",
    "SortOrder",
]
