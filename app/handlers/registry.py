"""
==============================================================================
Handler Registry Module
==============================================================================

Wires the product query handlers into a Mediator and holds the
process-wide instance used by the API layer.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from app.catalog.catalog import ProductCatalog
from app.mediator import Mediator

from .product import PRODUCT_HANDLERS


# Module logger
logger = logging.getLogger(__name__)


def register_product_handlers(mediator: Mediator, catalog: ProductCatalog) -> Mediator:
    """
    Register one handler per product query class.

    Args:
        mediator: Mediator to populate
        catalog: Catalog the handlers read from

    Returns:
        The same mediator, for chaining
    """
    for handler_cls in PRODUCT_HANDLERS:
        mediator.register(handler_cls.query_type, handler_cls(catalog))
    return mediator


def build_mediator(catalog: ProductCatalog) -> Mediator:
    """Create a Mediator with every product handler registered."""
    return register_product_handlers(Mediator(), catalog)


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_mediator_instance: Optional[Mediator] = None


def get_mediator() -> Optional[Mediator]:
    """Get the global mediator instance."""
    return _mediator_instance


def init_mediator(catalog: ProductCatalog) -> Mediator:
    """
    Initialize the global mediator for a catalog.

    Call once at startup, before serving requests.
    """
    global _mediator_instance
    _mediator_instance = build_mediator(catalog)
    logger.info(f"Registered {len(_mediator_instance)} query handlers")
    return _mediator_instance


def reset_mediator() -> None:
    """Drop the global mediator instance."""
    global _mediator_instance
    _mediator_instance = None
