"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for product catalog items.

==============================================================================
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer

from app.core.exceptions import ProductsNotFoundError


class Specification(BaseModel):
    """
    Technical specification of a product.

    Attributes:
        name: Specification label (e.g., "Display Size")
        value: Specification value (e.g., "6.8")
        unit: Unit of measure, omitted when not applicable
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Specification name")
    value: str = Field(..., description="Specification value")
    unit: Optional[str] = Field(default=None, description="Unit of measure")

    @model_serializer(mode="wrap")
    def _omit_empty_unit(self, handler):
        data = handler(self)
        if isinstance(data, dict) and not data.get("unit"):
            data.pop("unit", None)
        return data


class Product(BaseModel):
    """
    Product model for catalog items.

    Instances are frozen; the catalog is read-only after load.

    Attributes:
        id: Unique product identifier (e.g., "PHONE001")
        name: Product display name
        image_url: Product image location
        description: Long product description
        price: Non-negative price
        rating: Customer rating from 0 to 5
        specifications: Ordered technical specifications
        category: Free-form category (e.g., "Smartphones")
        brand: Free-form brand (e.g., "Samsung")
        available: Whether the product can be bought
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        from_attributes=True,
    )

    id: str = Field(..., min_length=1, description="Product identifier")
    name: str = Field(..., description="Product name")
    image_url: str = Field(default="", description="Product image URL")
    description: str = Field(default="", description="Product description")
    price: float = Field(..., ge=0, description="Product price")
    rating: float = Field(default=0.0, ge=0, le=5, description="Rating from 0 to 5")
    specifications: List[Specification] = Field(default_factory=list)
    category: str = Field(default="", description="Product category")
    brand: str = Field(default="", description="Product brand")
    available: bool = Field(default=True, description="Availability")


class ProductLookup(BaseModel):
    """
    Result of a multi-ID lookup.

    Holds the resolved products and the unresolved IDs side by side, so a
    partial result is never mistaken for an empty one.

    Attributes:
        products: Products found, in request order
        missing_ids: Requested IDs with no matching product
    """

    model_config = ConfigDict(frozen=True)

    products: List[Product] = Field(default_factory=list)
    missing_ids: List[str] = Field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """True when every requested ID resolved."""
        return not self.missing_ids

    @property
    def error(self) -> Optional[ProductsNotFoundError]:
        """Aggregate not-found error, or None when the lookup is complete."""
        if self.is_complete:
            return None
        return ProductsNotFoundError(self.missing_ids, self.products)

    def raise_for_missing(self) -> List[Product]:
        """
        Return the products, raising if any requested ID was missing.

        Raises:
            ProductsNotFoundError: Carrying both the found products and
                the missing IDs
        """
        error = self.error
        if error is not None:
            raise error
        return list(self.products)
