"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Response schemas using Pydantic.

This package provides:
- Common: Shared response envelope
- Product: Result envelopes for listing, comparison and search

==============================================================================
"""

from .common import SuccessResponse
from .product import ComparisonResult, ProductListResult, SearchResult

__all__ = [
    # Common
    "SuccessResponse",
    # Product
    "ProductListResult",
    "ComparisonResult",
    "SearchResult",
]
