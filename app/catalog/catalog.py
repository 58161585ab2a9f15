"""
==============================================================================
Product Catalog Module
==============================================================================

In-memory, read-only product catalog.

Features:
---------
- Exact ID lookup, single and multi-ID (with partial-result reporting)
- Category and price-range filtering
- Case-insensitive substring search over name, description, brand, category
- Distinct category and brand facets in first-seen order

Filtering Conventions:
---------------------
- An empty category matches every product; otherwise categories compare
  case-insensitively.
- A price bound of 0 or less means "no bound".
- Facets de-duplicate on the exact stored string, so "Apple" and "apple"
  are two brands even though category filtering folds case.

==============================================================================
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from app.core.exceptions import (
    DuplicateProductError,
    InvalidProductIDError,
    ProductNotFoundError,
)

from .loader import load_products
from .models import Product, ProductLookup


# Module logger
logger = logging.getLogger(__name__)


class ProductCatalog:
    """
    Product catalog over an immutable list of products.

    Every operation is a pure read; results keep catalog insertion order.

    Attributes:
        products: Copy of all products

    Example:
        >>> catalog = ProductCatalog(products)
        >>> catalog.get_by_id("PHONE001").brand
        'Samsung'
        >>> [p.id for p in catalog.search("apple")]
        ['PHONE002', 'LAPTOP001']
    """

    def __init__(self, products: Iterable[Product]) -> None:
        """
        Build the catalog from already-validated products.

        Args:
            products: Product records, in display order

        Raises:
            DuplicateProductError: If two products share an ID
        """
        self._products: Tuple[Product, ...] = tuple(products)

        seen: Set[str] = set()
        for product in self._products:
            if product.id in seen:
                raise DuplicateProductError(product.id)
            seen.add(product.id)

    @classmethod
    def from_file(cls, products_file: Path) -> "ProductCatalog":
        """Load a catalog from a products JSON file."""
        return cls(load_products(products_file))

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> List[Product]:
        """Get all products."""
        return list(self._products)

    @property
    def count(self) -> int:
        """Number of products in the catalog."""
        return len(self._products)

    def __len__(self) -> int:
        return len(self._products)

    # =========================================================================
    # LOOKUP METHODS
    # =========================================================================

    def get_by_id(self, product_id: str) -> Product:
        """
        Find a product by exact, case-sensitive ID.

        Args:
            product_id: Product identifier

        Returns:
            The matching product

        Raises:
            InvalidProductIDError: If product_id is empty
            ProductNotFoundError: If no product has this ID
        """
        if not product_id:
            raise InvalidProductIDError(product_id)

        for product in self._products:
            if product.id == product_id:
                return product

        raise ProductNotFoundError(product_id)

    def get_by_ids(self, product_ids: Sequence[str]) -> ProductLookup:
        """
        Find several products by ID without stopping at the first miss.

        Unknown IDs are collected in the lookup's missing_ids. Any other
        lookup error, such as an empty ID, propagates.

        Args:
            product_ids: Requested IDs, in order

        Returns:
            ProductLookup holding found products and missing IDs
        """
        products: List[Product] = []
        missing_ids: List[str] = []

        for product_id in product_ids:
            try:
                products.append(self.get_by_id(product_id))
            except ProductNotFoundError:
                missing_ids.append(product_id)

        return ProductLookup(products=products, missing_ids=missing_ids)

    # =========================================================================
    # FILTER & SEARCH METHODS
    # =========================================================================

    def get_all(
        self,
        category: Optional[str] = "",
        min_price: Optional[float] = 0,
        max_price: Optional[float] = 0
    ) -> List[Product]:
        """
        Get products filtered by category and price range.

        Args:
            category: Category to match case-insensitively; empty for any
            min_price: Lowest price, ignored when 0 or less
            max_price: Highest price, ignored when 0 or less

        Returns:
            Matching products in catalog order
        """
        wanted_category = (category or "").casefold()
        min_price = min_price or 0
        max_price = max_price or 0

        results = []
        for product in self._products:
            if wanted_category and product.category.casefold() != wanted_category:
                continue
            if min_price > 0 and product.price < min_price:
                continue
            if max_price > 0 and product.price > max_price:
                continue
            results.append(product)

        return results

    def search(self, query: Optional[str]) -> List[Product]:
        """
        Search products by substring.

        An empty query returns the whole catalog.

        Args:
            query: Text matched case-insensitively against name,
                description, brand and category

        Returns:
            Matching products in catalog order
        """
        if not query:
            return self.get_all()

        needle = query.lower()
        return [
            product for product in self._products
            if needle in product.name.lower()
            or needle in product.description.lower()
            or needle in product.brand.lower()
            or needle in product.category.lower()
        ]

    # =========================================================================
    # FACET METHODS
    # =========================================================================

    def get_categories(self) -> List[str]:
        """Get distinct categories in first-seen order."""
        return self._distinct(product.category for product in self._products)

    def get_brands(self) -> List[str]:
        """Get distinct brands in first-seen order."""
        return self._distinct(product.brand for product in self._products)

    @staticmethod
    def _distinct(values: Iterable[str]) -> List[str]:
        # dict preserves insertion order; keys compare on the exact string
        return list(dict.fromkeys(values))

    def get_stats(self) -> dict:
        """Get catalog statistics."""
        return {
            "total_products": len(self._products),
            "available_products": sum(1 for p in self._products if p.available),
            "categories": len(self.get_categories()),
            "brands": len(self.get_brands()),
        }


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_catalog_instance: Optional[ProductCatalog] = None


def get_catalog() -> Optional[ProductCatalog]:
    """Get the global catalog instance."""
    return _catalog_instance


def init_catalog(products_file: Path) -> ProductCatalog:
    """
    Initialize the global catalog instance from a products file.

    Args:
        products_file: Path to products.json

    Returns:
        ProductCatalog instance
    """
    global _catalog_instance
    _catalog_instance = ProductCatalog.from_file(products_file)
    logger.info(f"Loaded {len(_catalog_instance)} products from {products_file}")
    return _catalog_instance


def reset_catalog() -> None:
    """Drop the global catalog instance."""
    global _catalog_instance
    _catalog_instance = None
