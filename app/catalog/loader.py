"""
==============================================================================
Product Loader Module
==============================================================================

Reads the product catalog from a JSON file.

JSON Structure:
--------------
[
  {
    "id": "PHONE001",
    "name": "Samsung Galaxy S24 Ultra",
    "image_url": "https://...",
    "description": "...",
    "price": 1299.99,
    "rating": 4.5,
    "specifications": [{"name": "Display Size", "value": "6.8", "unit": "inches"}],
    "category": "Smartphones",
    "brand": "Samsung",
    "available": true
  },
  ...
]

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from pydantic import TypeAdapter, ValidationError

from .models import Product


# Module logger
logger = logging.getLogger(__name__)

_products_adapter = TypeAdapter(List[Product])


def load_products(products_file: Path) -> List[Product]:
    """
    Load and validate products from a JSON file.

    Args:
        products_file: Path to products.json

    Returns:
        Products in file order

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        pydantic.ValidationError: If a record does not match the Product schema
    """
    try:
        with Path(products_file).open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.error(f"Products file not found: {products_file}")
        raise
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {products_file}: {e}")
        raise

    try:
        products = _products_adapter.validate_python(data)
    except ValidationError as e:
        logger.error(f"Invalid product data in {products_file}: {e.error_count()} error(s)")
        raise

    logger.debug(f"Parsed {len(products)} products from {products_file}")
    return products
