"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Endpoints for listing, searching, comparing and fetching products.

Every endpoint validates its parameters, builds a query, and sends it
through the mediator.

==============================================================================
"""

import math
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.config import get_settings
from app.core import exceptions
from app.core.dependencies import require_mediator
from app.mediator import Mediator
from app.queries.product import (
    CompareProductsQuery,
    GetAllProductsQuery,
    GetProductQuery,
    SearchProductsQuery,
)
from app.schemas.common import SuccessResponse


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, mediator: Mediator):
        self._mediator = mediator
        self._settings = get_settings()

    @staticmethod
    def _parse_price(raw: Optional[str], code: str, label: str) -> float:
        """Parse an optional non-negative price parameter."""
        if raw is None or raw.strip() == "":
            return 0
        try:
            value = float(raw)
        except ValueError:
            value = -1
        if value < 0 or not math.isfinite(value):
            raise exceptions.bad_request(
                code,
                f"Invalid {label} price",
                f"{label.capitalize()} price must be a valid non-negative number"
            )
        return value

    def list_products(
        self,
        category: Optional[str],
        min_price: Optional[str],
        max_price: Optional[str]
    ) -> SuccessResponse:
        """List products with category and price filters."""
        low = self._parse_price(min_price, "INVALID_MIN_PRICE", "minimum")
        high = self._parse_price(max_price, "INVALID_MAX_PRICE", "maximum")

        if low > 0 and high > 0 and low > high:
            raise exceptions.bad_request(
                "INVALID_PRICE_RANGE",
                "Invalid price range",
                "Minimum price cannot be greater than maximum price"
            )

        query = GetAllProductsQuery(
            category=(category or "").strip(),
            min_price=low,
            max_price=high,
        )
        result = self._mediator.send(query)
        return SuccessResponse.of(result, "Products retrieved successfully")

    def search(self, q: Optional[str]) -> SuccessResponse:
        """Search products by name, description, brand or category."""
        text = (q or "").strip()

        if not text:
            raise exceptions.bad_request(
                "MISSING_SEARCH_QUERY",
                "Search query is required",
                "Please provide a search query in the 'q' parameter"
            )

        min_length = self._settings.search_min_length
        if len(text) < min_length:
            raise exceptions.bad_request(
                "INVALID_SEARCH_QUERY",
                "Search query too short",
                f"Search query must be at least {min_length} characters long"
            )

        result = self._mediator.send(SearchProductsQuery(query=text))
        return SuccessResponse.of(result, "Products search completed successfully")

    def compare(self, ids: Optional[str]) -> SuccessResponse:
        """Compare products given as comma-separated IDs."""
        if not ids or not ids.strip():
            raise exceptions.bad_request(
                "MISSING_PRODUCT_IDS",
                "Product IDs are required",
                "Please provide comma-separated product IDs in the 'ids' query parameter"
            )

        product_ids: List[str] = [part.strip() for part in ids.split(",") if part.strip()]

        fewest = self._settings.compare_min_products
        most = self._settings.compare_max_products

        if len(product_ids) < fewest:
            raise exceptions.bad_request(
                "INSUFFICIENT_PRODUCTS",
                f"At least {fewest} products required for comparison",
                f"Please provide at least {fewest} valid product IDs separated by commas"
            )

        if len(product_ids) > most:
            raise exceptions.bad_request(
                "TOO_MANY_PRODUCTS",
                "Too many products for comparison",
                f"Please provide at most {most} products for comparison"
            )

        result = self._mediator.send(CompareProductsQuery(product_ids=product_ids))
        return SuccessResponse.of(result, "Products comparison retrieved successfully")

    def get_product(self, product_id: str) -> SuccessResponse:
        """Get a single product by ID."""
        product = self._mediator.send(GetProductQuery(id=product_id.strip()))
        return SuccessResponse.of(product, "Product retrieved successfully")


@router.get("", response_model=SuccessResponse)
async def list_products(
    category: Optional[str] = Query(None, description="Filter by category"),
    min_price: Optional[str] = Query(None, description="Minimum price filter"),
    max_price: Optional[str] = Query(None, description="Maximum price filter"),
    mediator: Mediator = Depends(require_mediator)
):
    """List products with optional category and price range filters."""
    controller = ProductController(mediator)
    return controller.list_products(category, min_price, max_price)


@router.get("/search", response_model=SuccessResponse)
async def search_products(
    q: Optional[str] = Query(None, description="Search query"),
    mediator: Mediator = Depends(require_mediator)
):
    """Search products by name, description, brand, or category."""
    controller = ProductController(mediator)
    return controller.search(q)


@router.get("/compare", response_model=SuccessResponse)
async def compare_products(
    ids: Optional[str] = Query(None, description="Comma-separated product IDs"),
    mediator: Mediator = Depends(require_mediator)
):
    """Compare several products by ID."""
    controller = ProductController(mediator)
    return controller.compare(ids)


@router.get("/{product_id}", response_model=SuccessResponse)
async def get_product(product_id: str, mediator: Mediator = Depends(require_mediator)):
    """Get a product by ID."""
    controller = ProductController(mediator)
    return controller.get_product(product_id)
