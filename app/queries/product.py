"""
==============================================================================
Product Queries Module
==============================================================================

Immutable query objects, one per read operation on the catalog.

Queries only carry parameters. Request validation happens in the API
layer before a query is built.

==============================================================================
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Query(BaseModel):
    """Base class for all queries."""

    model_config = ConfigDict(frozen=True)


class GetProductQuery(Query):
    """Get a single product by ID."""

    id: str = Field(..., description="Product ID", examples=["PHONE001"])


class GetAllProductsQuery(Query):
    """List products with optional category and price filters."""

    category: str = Field(default="", description="Category filter", examples=["Smartphones"])
    min_price: float = Field(default=0, description="Minimum price, 0 for none")
    max_price: float = Field(default=0, description="Maximum price, 0 for none")


class CompareProductsQuery(Query):
    """Fetch several products side by side."""

    product_ids: List[str] = Field(..., examples=[["PHONE001", "PHONE002"]])


class SearchProductsQuery(Query):
    """Search products by free text."""

    query: str = Field(..., examples=["Samsung Galaxy"])


class GetCategoriesQuery(Query):
    """List distinct product categories."""


class GetBrandsQuery(Query):
    """List distinct product brands."""
