"""
==============================================================================
Product Catalog Search API - Application Entry Point
==============================================================================

Read-only FastAPI service with:
- Product listing with sorting and pagination
- Filtered search (text, category, price range, stock)
- Lookup by product UUID
- Health and readiness probes

Usage:
------
    # Development
    uvicorn catalog_api.main:app --reload

    # Production
    uvicorn catalog_api.main:app --host 0.0.0.0 --port 8080

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from catalog_api import __version__
from catalog_api.api.router import api_router, root_router
from catalog_api.catalog import QueryEngine, init_catalog
from catalog_api.config import Settings, get_settings
from catalog_api.core.exceptions import register_exception_handlers


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


API_DESCRIPTION = """
Product Catalog API for search and filtering.

**Service**: Read-only product search

## Response Format
Listing and search endpoints return paginated responses:
- `data`: Array of product objects
- `pagination`: Page info (page, pageSize, totalCount, totalPages)
- `metadata`: Response metadata (cached, source, cacheAge, searchTime, dataFreshness)

The `cached` and `source` labels are descriptive only.

## Error Handling
Errors use a single JSON shape: `{"success": false, "error": {"code", "message", ...}}`.
- `INVALID_ID_FORMAT` / `INVALID_PARAMETER` (400)
- `PRODUCT_NOT_FOUND` (404)
- `INTERNAL_ERROR` (500)
"""

OPENAPI_TAGS = [
    {"name": "Products", "description": "Product listing and retrieval"},
    {"name": "Search", "description": "Filtered product search"},
    {"name": "Health", "description": "Service status"},
]


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Handles application lifecycle including:
    - Catalog loading on startup
    - Middleware configuration
    - Router registration
    - Exception handler setup
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the application."""
        self._settings = settings or get_settings()
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title="Product Catalog API - Search & Analytics",
            version=__version__,
            description=API_DESCRIPTION,
            openapi_tags=OPENAPI_TAGS,
            contact={"name": "Product Catalog Team"},
            license_info={"name": "MIT License", "url": "https://opensource.org/licenses/MIT"},
            lifespan=self._lifespan,
            docs_url=self._settings.docs_url,
            redoc_url="/redoc",
        )

        # Populated on startup
        app.state.query_engine = None

        self._configure_middleware(app)
        register_exception_handlers(app)
        self._register_routers(app)
        self._register_root(app)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup(app)
        yield
        self._shutdown(app)

    def _startup(self, app: FastAPI) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name} ({self._settings.app_env})")
        logger.info("=" * 60)

        self._load_catalog(app)

        logger.info(f"📍 Running on http://{self._settings.host}:{self._settings.port}")
        logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}{self._settings.docs_url}")

    def _shutdown(self, app: FastAPI) -> None:
        """Application shutdown tasks."""
        logger.info("🛑 Shutting down...")
        app.state.query_engine = None
        logger.info("✅ Shutdown complete")

    def _load_catalog(self, app: FastAPI) -> None:
        """Build the catalog and query engine; failures leave the service degraded."""
        try:
            catalog = init_catalog(self._settings.products_path)
        except Exception as e:
            logger.error(f"❌ Failed to load catalog: {e}")
            return

        app.state.query_engine = QueryEngine(catalog)
        logger.info(f"✅ Loaded {len(catalog)} products")

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["GET", "OPTIONS"],
            allow_headers=["*"],
        )

    def _register_routers(self, app: FastAPI) -> None:
        """Register API routers."""
        app.include_router(api_router)
        app.include_router(root_router)

    def _register_root(self, app: FastAPI) -> None:
        """Register root endpoint."""

        @app.get("/", include_in_schema=False)
        async def root():
            """Redirect to the interactive API documentation."""
            return RedirectResponse(url=self._settings.docs_url)

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
