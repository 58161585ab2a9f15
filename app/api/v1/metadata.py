"""
==============================================================================
Catalog Metadata Endpoints
==============================================================================

Facet endpoints listing the distinct categories and brands in the catalog.

==============================================================================
"""

from fastapi import APIRouter, Depends

from app.core.dependencies import require_mediator
from app.mediator import Mediator
from app.queries.product import GetBrandsQuery, GetCategoriesQuery
from app.schemas.common import SuccessResponse


router = APIRouter(tags=["Metadata"])


@router.get("/categories", response_model=SuccessResponse)
async def get_categories(mediator: Mediator = Depends(require_mediator)):
    """Get all available product categories."""
    categories = mediator.send(GetCategoriesQuery())
    return SuccessResponse.of(categories, "Categories retrieved successfully")


@router.get("/brands", response_model=SuccessResponse)
async def get_brands(mediator: Mediator = Depends(require_mediator)):
    """Get all available product brands."""
    brands = mediator.send(GetBrandsQuery())
    return SuccessResponse.of(brands, "Brands retrieved successfully")
