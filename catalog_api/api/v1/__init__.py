"""
==============================================================================
API v1 Endpoints
==============================================================================

Version 1 of the REST API.

Routers:
--------
- health: Health check endpoints
- products: Product listing, category browsing and lookup
- search: Filtered product search

==============================================================================
"""

from . import health, products, search

__all__ = ["health", "products", "search"]
