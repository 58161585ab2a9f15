"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides sample catalogs, a populated mediator, and an API client wired to
them.

==============================================================================
"""

import json
from pathlib import Path
from typing import Generator, List

import pytest
from fastapi.testclient import TestClient

from app.catalog.catalog import ProductCatalog
from app.catalog.models import Product
from app.core.dependencies import require_mediator
from app.handlers.registry import build_mediator
from app.main import app
from app.mediator import Mediator


# ============================================================================
# PRODUCT FIXTURES
# ============================================================================

def make_product(product_id: str, **overrides) -> Product:
    """Build a product with sensible defaults."""
    fields = {
        "id": product_id,
        "name": f"Product {product_id}",
        "image_url": f"https://images.example.com/{product_id.lower()}.jpg",
        "description": "",
        "price": 100.0,
        "rating": 4.0,
        "specifications": [],
        "category": "Misc",
        "brand": "Generic",
        "available": True,
    }
    fields.update(overrides)
    return Product(**fields)


@pytest.fixture
def sample_products() -> List[Product]:
    """The three-product catalog used across the suite."""
    return [
        make_product(
            "PHONE001",
            name="Samsung Galaxy S24 Ultra",
            description="Flagship smartphone with a 200MP camera",
            price=899.99,
            rating=4.6,
            specifications=[
                {"name": "Display Size", "value": "6.8", "unit": "inches"},
                {"name": "Operating System", "value": "Android 14"},
            ],
            category="Smartphones",
            brand="Samsung",
        ),
        make_product(
            "PHONE002",
            name="iPhone 15 Pro Max",
            description="Titanium design with the A17 Pro chip",
            price=1199.99,
            rating=4.7,
            category="Smartphones",
            brand="Apple",
        ),
        make_product(
            "LAPTOP001",
            name="MacBook Pro 16",
            description="Laptop with the M3 Max chip",
            price=2199.99,
            rating=4.8,
            category="Laptops",
            brand="Apple",
            available=False,
        ),
    ]


@pytest.fixture
def catalog(sample_products: List[Product]) -> ProductCatalog:
    """Catalog built from the sample products."""
    return ProductCatalog(sample_products)


@pytest.fixture
def mediator(catalog: ProductCatalog) -> Mediator:
    """Mediator with every product handler registered."""
    return build_mediator(catalog)


@pytest.fixture
def products_file(tmp_path: Path, sample_products: List[Product]) -> Path:
    """Sample products written to a JSON file."""
    path = tmp_path / "products.json"
    path.write_text(
        json.dumps([p.model_dump() for p in sample_products]),
        encoding="utf-8"
    )
    return path


# ============================================================================
# CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def client(mediator: Mediator) -> Generator[TestClient, None, None]:
    """Create test client serving the sample catalog."""
    app.dependency_overrides[require_mediator] = lambda: mediator

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
