"""
==============================================================================
Catalog Package - Product Catalog
==============================================================================

Read-only, in-memory product catalog with filtering, search and facets.

Classes:
--------
- Product, Specification: Pydantic models for catalog items
- ProductLookup: Multi-ID lookup result (found products + missing IDs)
- ProductCatalog: Catalog store with lookup and search operations

==============================================================================
"""

from .models import Product, ProductLookup, Specification
from .loader import load_products
from .catalog import ProductCatalog, get_catalog, init_catalog, reset_catalog

__all__ = [
    "Product",
    "ProductLookup",
    "Specification",
    "ProductCatalog",
    "load_products",
    "get_catalog",
    "init_catalog",
    "reset_catalog",
]
