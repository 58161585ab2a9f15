"""
==============================================================================
Queries Package
==============================================================================

Read-only query objects dispatched through the Mediator.

==============================================================================
"""

from .product import (
    CompareProductsQuery,
    GetAllProductsQuery,
    GetBrandsQuery,
    GetCategoriesQuery,
    GetProductQuery,
    Query,
    SearchProductsQuery,
)

__all__ = [
    "Query",
    "GetProductQuery",
    "GetAllProductsQuery",
    "CompareProductsQuery",
    "SearchProductsQuery",
    "GetCategoriesQuery",
    "GetBrandsQuery",
]
