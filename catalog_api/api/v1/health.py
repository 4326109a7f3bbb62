"""
==============================================================================
Health Check Endpoints
==============================================================================

Service status endpoints for monitoring and orchestration.

==============================================================================
"""

from typing import Optional

from fastapi import APIRouter, Request

from catalog_api.catalog import QueryEngine


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, engine: Optional[QueryEngine]):
        self._engine = engine

    def check_catalog(self) -> dict:
        """Check catalog status."""
        if self._engine is not None:
            return {"status": "healthy", "products": len(self._engine.catalog)}
        return {"status": "not_loaded", "products": 0}

    def get_health(self) -> dict:
        """Get full health status."""
        catalog_info = self.check_catalog()

        overall = "healthy" if catalog_info["status"] == "healthy" else "degraded"

        return {
            "status": overall,
            "message": "Product search service is running",
            "components": {
                "api": "healthy",
                "catalog": catalog_info["status"]
            },
            "details": {
                "products_loaded": catalog_info["products"]
            }
        }


@router.get("")
async def health_check(request: Request):
    """
    Health check endpoint.

    Reports API and catalog status. Never fails, so a missing catalog shows
    up as "degraded" instead of an error.
    """
    controller = HealthController(getattr(request.app.state, "query_engine", None))
    return controller.get_health()


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe: ready once the catalog is loaded."""
    return {"ready": getattr(request.app.state, "query_engine", None) is not None}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
