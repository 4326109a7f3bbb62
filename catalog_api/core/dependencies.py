"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the catalog and its query engine.

The application builds one ProductCatalog and one QueryEngine at startup
and keeps them on ``app.state``. Routes receive them through the
dependencies below, so tests can swap in fixture data with
``app.dependency_overrides``:

    app.dependency_overrides[get_query_engine] = lambda: QueryEngine(catalog)

==============================================================================
"""

from __future__ import annotations

from typing import Optional

from fastapi import Request

from catalog_api.catalog import QueryEngine
from catalog_api.core import exceptions


def get_query_engine(request: Request) -> QueryEngine:
    """
    Get the QueryEngine built at startup.

    Raises:
        AppException: CATALOG_NOT_LOADED if startup did not build one
    """
    engine: Optional[QueryEngine] = getattr(request.app.state, "query_engine", None)
    if engine is None:
        raise exceptions.catalog_not_loaded()
    return engine

