"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides a fixed product catalog, a query engine over it, and an API
client whose engine dependency is overridden with that catalog.

==============================================================================
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Generator, List
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from catalog_api.catalog import Product, ProductCatalog, ProductStatus, QueryEngine
from catalog_api.core.dependencies import get_query_engine
from catalog_api.main import app


NOW = datetime(2026, 1, 13, 10, 0, 0, tzinfo=timezone.utc)

LAPTOP_ID = UUID("11111111-1111-4111-8111-111111111111")
MOUSE_ID = UUID("22222222-2222-4222-8222-222222222222")
HUB_ID = UUID("33333333-3333-4333-8333-333333333333")
KEYBOARD_ID = UUID("44444444-4444-4444-8444-444444444444")
STAND_ID = UUID("55555555-5555-4555-8555-555555555555")
UNKNOWN_ID = UUID("99999999-9999-4999-8999-999999999999")


def make_product(
    product_id: UUID,
    name: str,
    price: str,
    category: str,
    stock: int,
    status: ProductStatus = ProductStatus.ACTIVE,
    created_days_ago: int = 0,
    description: str = None,
) -> Product:
    """Build a product with timestamps relative to NOW."""
    return Product(
        id=product_id,
        name=name,
        description=description,
        price=Decimal(price),
        category=category,
        sku=f"{name.upper().replace(' ', '-')}-001",
        stock_quantity=stock,
        status=status,
        created_at=NOW - timedelta(days=created_days_ago),
        updated_at=NOW,
    )


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def products() -> List[Product]:
    """Four ACTIVE Electronics products and one INACTIVE, out-of-stock Office product."""
    return [
        make_product(LAPTOP_ID, "Laptop", "999.99", "Electronics", 50,
                     created_days_ago=30,
                     description="High-performance laptop for developers"),
        make_product(MOUSE_ID, "Wireless Mouse", "29.99", "Electronics", 200,
                     created_days_ago=60,
                     description="Ergonomic wireless mouse with extended battery"),
        make_product(HUB_ID, "USB-C Hub", "49.99", "Electronics", 120,
                     created_days_ago=45,
                     description="Multi-port USB-C hub with HDMI and SD card reader"),
        make_product(KEYBOARD_ID, "Mechanical Keyboard", "149.99", "Electronics", 75,
                     created_days_ago=20,
                     description="RGB mechanical keyboard with hot-swappable switches"),
        make_product(STAND_ID, "Monitor Stand", "39.99", "Office", 0,
                     status=ProductStatus.INACTIVE, created_days_ago=15,
                     description="Adjustable monitor stand with storage drawer"),
    ]


@pytest.fixture
def catalog(products: List[Product]) -> ProductCatalog:
    """Catalog over the fixture products."""
    return ProductCatalog(products)


@pytest.fixture
def engine(catalog: ProductCatalog) -> QueryEngine:
    """Query engine over the fixture catalog."""
    return QueryEngine(catalog)


# ============================================================================
# CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def client(engine: QueryEngine) -> Generator[TestClient, None, None]:
    """Create test client serving the fixture catalog."""
    app.dependency_overrides[get_query_engine] = lambda: engine

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
