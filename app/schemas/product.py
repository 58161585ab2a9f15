"""
==============================================================================
Product Result Schemas
==============================================================================

Envelopes returned by the multi-result query handlers. Each carries the
products, a count, and the query parameters that produced them.

==============================================================================
"""

from typing import List

from pydantic import BaseModel, Field

from app.catalog.models import Product


class ProductListResult(BaseModel):
    """Filtered product listing."""
    products: List[Product] = Field(default_factory=list)
    total_count: int = Field(ge=0)
    category: str = ""
    min_price: float = 0
    max_price: float = 0


class ComparisonResult(BaseModel):
    """Products gathered for a side-by-side comparison."""
    products: List[Product] = Field(default_factory=list)
    total_count: int = Field(ge=0)
    requested_ids: List[str] = Field(default_factory=list)


class SearchResult(BaseModel):
    """Free-text search results."""
    products: List[Product] = Field(default_factory=list)
    query: str
    count: int = Field(ge=0)
