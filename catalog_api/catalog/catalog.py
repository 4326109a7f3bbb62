"""
==============================================================================
Product Catalog Module
==============================================================================

In-memory, read-only product store.

Features:
---------
- Built once at startup from the demonstration data set or a JSON file
- Insertion order preserved for full enumeration
- Lookup by product UUID

The store never changes after construction, so concurrent readers need no
locking. It is handed to whoever needs it instead of living in a module
global.

JSON Structure:
--------------
[
  {
    "id": "550e8400-e29b-41d4-a716-446655440000",
    "name": "Laptop",
    "price": 999.99,
    "category": "Electronics",
    "sku": "LAPTOP-001",
    "stockQuantity": 50,
    "status": "ACTIVE",
    "createdAt": "2026-01-13T10:00:00"
  },
  ...
]

==============================================================================
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple
from uuid import UUID, uuid4

from pydantic import TypeAdapter

from .models import Product, ProductStatus


# Module logger
logger = logging.getLogger(__name__)

_PRODUCT_LIST = TypeAdapter(List[Product])


class ProductCatalog:
    """
    Read-only product catalog.

    Example:
        >>> catalog = ProductCatalog.from_json(Path("data/products.json"))
        >>> product = catalog.by_id(some_uuid)
        >>> len(catalog)
        5
    """

    def __init__(self, products: Iterable[Product]) -> None:
        """
        Initialize catalog from product records.

        Args:
            products: Products in the order they should be listed
        """
        self._products: Tuple[Product, ...] = tuple(products)
        self._by_id: Dict[UUID, Product] = {}

        for product in self._products:
            if product.id in self._by_id:
                logger.warning(f"Duplicate product id {product.id}, keeping first")
                continue
            self._by_id[product.id] = product

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def from_json(cls, products_file: Path) -> "ProductCatalog":
        """
        Load catalog from a JSON array of product objects.

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If the content is not a valid product list
        """
        try:
            with products_file.open("r", encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError:
            logger.error(f"Products file not found: {products_file}")
            raise

        products = _PRODUCT_LIST.validate_json(raw)
        logger.info(f"Loaded {len(products)} products from {products_file}")
        return cls(products)

    @classmethod
    def demo(cls) -> "ProductCatalog":
        """Build the catalog from the built-in demonstration products."""
        return cls(demo_products())

    # =========================================================================
    # READ ACCESS
    # =========================================================================

    def all_products(self) -> Tuple[Product, ...]:
        """Full collection, insertion order preserved."""
        return self._products

    def by_id(self, product_id: UUID) -> Optional[Product]:
        """Find product by UUID."""
        return self._by_id.get(product_id)

    def __len__(self) -> int:
        return len(self._products)


# =============================================================================
# DEMONSTRATION DATA
# =============================================================================

_DEMO_ROWS = [
    # name, description, price, category, sku, stock, status, created, updated (days ago)
    ("Laptop", "High-performance laptop for developers",
     "999.99", "Electronics", "LAPTOP-001", 50, ProductStatus.ACTIVE, 30, 5),
    ("Wireless Mouse", "Ergonomic wireless mouse with extended battery",
     "29.99", "Electronics", "MOUSE-001", 200, ProductStatus.ACTIVE, 60, 2),
    ("USB-C Hub", "Multi-port USB-C hub with HDMI and SD card reader",
     "49.99", "Electronics", "HUB-001", 120, ProductStatus.ACTIVE, 45, 1),
    ("Mechanical Keyboard", "RGB mechanical keyboard with hot-swappable switches",
     "149.99", "Electronics", "KB-001", 75, ProductStatus.ACTIVE, 20, 0),
    ("Monitor Stand", "Adjustable monitor stand with storage drawer",
     "39.99", "Office", "STAND-001", 0, ProductStatus.INACTIVE, 15, 7),
]


def demo_products(now: Optional[datetime] = None) -> List[Product]:
    """
    Build the demonstration product set.

    Timestamps are relative to ``now`` and ids are random, so two calls
    produce different identifiers.
    """
    now = now or datetime.now(timezone.utc)
    return [
        Product(
            id=uuid4(),
            name=name,
            description=description,
            price=Decimal(price),
            category=category,
            sku=sku,
            stock_quantity=stock,
            status=status,
            created_at=now - timedelta(days=created_days),
            updated_at=now - timedelta(days=updated_days),
        )
        for (name, description, price, category, sku, stock, status,
             created_days, updated_days) in _DEMO_ROWS
    ]


def init_catalog(products_file: Optional[Path] = None) -> ProductCatalog:
    """
    Build the catalog for application startup.

    Args:
        products_file: JSON catalog to load; None uses the demonstration data

    Returns:
        ProductCatalog instance
    """
    if products_file is None:
        catalog = ProductCatalog.demo()
        logger.info(f"Using built-in demonstration catalog ({len(catalog)} products)")
        return catalog

    return ProductCatalog.from_json(products_file)
