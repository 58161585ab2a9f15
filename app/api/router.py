"""
==============================================================================
Main API Router
==============================================================================

Combines all v1 API routes under /api/v1 prefix.

==============================================================================
"""

from fastapi import APIRouter

from app.api.v1 import health, metadata, products


api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router)
api_router.include_router(products.router)
api_router.include_router(metadata.router)
