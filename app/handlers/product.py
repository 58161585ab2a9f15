"""
==============================================================================
Product Query Handlers
==============================================================================

One handler per product query. Each handler checks it received the query
class it serves, calls the catalog, and shapes the result:

- GetProductQuery       -> Product
- GetAllProductsQuery   -> ProductListResult
- CompareProductsQuery  -> ComparisonResult
- SearchProductsQuery   -> SearchResult
- GetCategoriesQuery    -> list of category names
- GetBrandsQuery        -> list of brand names

Handlers apply no business rules of their own; limits such as the minimum
number of products to compare belong to the API layer.

==============================================================================
"""

from __future__ import annotations

from typing import Any, ClassVar, List, Type

from app.catalog.catalog import ProductCatalog
from app.catalog.models import Product
from app.core.exceptions import InvalidRequestTypeError
from app.mediator import Handler
from app.queries.product import (
    CompareProductsQuery,
    GetAllProductsQuery,
    GetBrandsQuery,
    GetCategoriesQuery,
    GetProductQuery,
    Query,
    SearchProductsQuery,
)
from app.schemas.product import ComparisonResult, ProductListResult, SearchResult


class CatalogQueryHandler(Handler):
    """
    Base class for handlers backed by the product catalog.

    Attributes:
        query_type: Query class this handler accepts
    """

    query_type: ClassVar[Type[Query]]

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def _expect(self, query: Any) -> Any:
        """Return the query if it is of the accepted class, else raise."""
        if not isinstance(query, self.query_type):
            raise InvalidRequestTypeError(type(self).__name__, type(query).__name__)
        return query

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class GetProductHandler(CatalogQueryHandler):
    """Return a single product by ID."""

    query_type = GetProductQuery

    def handle(self, query: Any) -> Product:
        query = self._expect(query)
        return self._catalog.get_by_id(query.id)


class GetAllProductsHandler(CatalogQueryHandler):
    """Return products filtered by category and price range."""

    query_type = GetAllProductsQuery

    def handle(self, query: Any) -> ProductListResult:
        query = self._expect(query)
        products = self._catalog.get_all(query.category, query.min_price, query.max_price)

        return ProductListResult(
            products=products,
            total_count=len(products),
            category=query.category,
            min_price=query.min_price,
            max_price=query.max_price,
        )


class CompareProductsHandler(CatalogQueryHandler):
    """
    Return the requested products for comparison.

    If any ID is unknown, raises ProductsNotFoundError; the products that
    did resolve are available on the error.
    """

    query_type = CompareProductsQuery

    def handle(self, query: Any) -> ComparisonResult:
        query = self._expect(query)
        products = self._catalog.get_by_ids(query.product_ids).raise_for_missing()

        return ComparisonResult(
            products=products,
            total_count=len(products),
            requested_ids=list(query.product_ids),
        )


class SearchProductsHandler(CatalogQueryHandler):
    """Return products matching a free-text query."""

    query_type = SearchProductsQuery

    def handle(self, query: Any) -> SearchResult:
        query = self._expect(query)
        products = self._catalog.search(query.query)

        return SearchResult(products=products, query=query.query, count=len(products))


class GetCategoriesHandler(CatalogQueryHandler):
    """Return distinct categories."""

    query_type = GetCategoriesQuery

    def handle(self, query: Any) -> List[str]:
        self._expect(query)
        return self._catalog.get_categories()


class GetBrandsHandler(CatalogQueryHandler):
    """Return distinct brands."""

    query_type = GetBrandsQuery

    def handle(self, query: Any) -> List[str]:
        self._expect(query)
        return self._catalog.get_brands()


PRODUCT_HANDLERS: List[Type[CatalogQueryHandler]] = [
    GetProductHandler,
    GetAllProductsHandler,
    CompareProductsHandler,
    SearchProductsHandler,
    GetCategoriesHandler,
    GetBrandsHandler,
]
