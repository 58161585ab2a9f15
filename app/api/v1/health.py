"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.catalog.catalog import get_catalog
from app.config import get_settings
from app.handlers.registry import get_mediator
from app.schemas.common import SuccessResponse


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def check_catalog(self) -> dict:
        """Check catalog status."""
        catalog = get_catalog()
        if catalog is not None:
            return {"status": "healthy", **catalog.get_stats()}
        return {"status": "not_loaded", "total_products": 0}

    def check_mediator(self) -> dict:
        """Check query handler registration."""
        mediator = get_mediator()
        if mediator is not None:
            return {"status": "healthy", "handlers": len(mediator)}
        return {"status": "not_loaded", "handlers": 0}

    def get_health(self) -> dict:
        """Get full health status."""
        settings = get_settings()
        catalog_info = self.check_catalog()
        mediator_info = self.check_mediator()

        ready = catalog_info["status"] == "healthy" and mediator_info["status"] == "healthy"

        return {
            "status": "healthy" if ready else "degraded",
            "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            "service": settings.app_name,
            "version": settings.app_version,
            "components": {
                "api": "healthy",
                "catalog": catalog_info["status"],
                "mediator": mediator_info["status"],
            },
            "details": {
                "products_loaded": catalog_info["total_products"],
                "handlers_registered": mediator_info["handlers"],
            },
        }


@router.get("", response_model=SuccessResponse)
async def health_check():
    """
    Health check endpoint.

    Returns system status including API, catalog and query handlers.
    """
    controller = HealthController()
    health = controller.get_health()
    message = "API is healthy" if health["status"] == "healthy" else "API is degraded"
    return SuccessResponse.of(health, message)


@router.get("/ready")
async def readiness_check():
    """Readiness probe for container orchestration."""
    return {"ready": get_mediator() is not None}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
