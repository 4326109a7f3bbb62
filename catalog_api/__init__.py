"""
==============================================================================
Product Catalog Search Service
==============================================================================

Read-only product catalog API: list, filter, sort, paginate and fetch
products from an in-memory catalog.

==============================================================================
"""

__version__ = "1.0.0"
