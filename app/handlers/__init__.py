"""
==============================================================================
Handlers Package
==============================================================================

Query handlers and the wiring that registers them with the Mediator.

==============================================================================
"""

from .product import (
    CatalogQueryHandler,
    CompareProductsHandler,
    GetAllProductsHandler,
    GetBrandsHandler,
    GetCategoriesHandler,
    GetProductHandler,
    SearchProductsHandler,
)
from .registry import (
    build_mediator,
    get_mediator,
    init_mediator,
    register_product_handlers,
    reset_mediator,
)

__all__ = [
    "CatalogQueryHandler",
    "GetProductHandler",
    "GetAllProductsHandler",
    "CompareProductsHandler",
    "SearchProductsHandler",
    "GetCategoriesHandler",
    "GetBrandsHandler",
    "build_mediator",
    "get_mediator",
    "init_mediator",
    "register_product_handlers",
    "reset_mediator",
]
