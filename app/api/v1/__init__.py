"""
==============================================================================
API v1 Endpoints
==============================================================================

Version 1 of the REST API.

Routers:
--------
- health: Health check endpoints
- products: Product listing, search, comparison and lookup
- metadata: Category and brand facets

==============================================================================
"""

from . import health, metadata, products

__all__ = ["health", "metadata", "products"]
