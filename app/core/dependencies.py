"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency providers for the API routes.

Usage Examples:
--------------
    @router.get("/products/{product_id}")
    async def get_product(
        product_id: str,
        mediator: Mediator = Depends(require_mediator),
    ):
        return mediator.send(GetProductQuery(id=product_id))

Tests replace require_mediator through app.dependency_overrides to serve a
fixture catalog.

==============================================================================
"""

from __future__ import annotations

from app.core import exceptions
from app.handlers.registry import get_mediator
from app.mediator import Mediator


def require_mediator() -> Mediator:
    """
    Get the global mediator, failing if startup did not build one.

    Raises:
        AppException: CATALOG_NOT_LOADED when no catalog was loaded
    """
    mediator = get_mediator()
    if mediator is None:
        raise exceptions.catalog_not_loaded()
    return mediator
