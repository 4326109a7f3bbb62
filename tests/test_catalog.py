"""
==============================================================================
Catalog Store Tests
==============================================================================

Tests for building and reading the product catalog.

==============================================================================
"""

import json
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

import pytest
from pydantic import ValidationError

from catalog_api.catalog import (
    ProductCatalog,
    ProductStatus,
    demo_products,
    init_catalog,
)

from conftest import LAPTOP_ID, STAND_ID, UNKNOWN_ID


class TestProductCatalog:
    """Tests for read access."""

    def test_preserves_insertion_order(self, catalog: ProductCatalog, products):
        """Test enumeration follows construction order."""
        assert list(catalog.all_products()) == products
        assert len(catalog) == 5

    def test_by_id(self, catalog: ProductCatalog):
        """Test lookup by UUID."""
        assert catalog.by_id(LAPTOP_ID).name == "Laptop"
        assert catalog.by_id(STAND_ID).status == ProductStatus.INACTIVE

    def test_by_id_unknown(self, catalog: ProductCatalog):
        """Test unknown UUID returns None."""
        assert catalog.by_id(UNKNOWN_ID) is None

    def test_all_products_is_read_only(self, catalog: ProductCatalog):
        """Test the collection cannot be changed through all_products."""
        assert isinstance(catalog.all_products(), tuple)
        assert len(catalog) == 5

    def test_duplicate_id_keeps_first(self, products):
        """Test the first record wins on duplicate ids."""
        duplicate = products[1].model_copy(update={"id": LAPTOP_ID})
        catalog = ProductCatalog([products[0], duplicate])
        assert catalog.by_id(LAPTOP_ID).name == "Laptop"

    def test_products_are_frozen(self, catalog: ProductCatalog):
        """Test records cannot be modified after load."""
        with pytest.raises(ValidationError):
            catalog.by_id(LAPTOP_ID).price = Decimal("1.00")


class TestCatalogLoading:
    """Tests for startup catalog construction."""

    def test_demo_products(self):
        """Test the built-in data set."""
        now = datetime(2026, 1, 1, tzinfo=timezone.utc)
        products = demo_products(now)

        assert [p.sku for p in products] == [
            "LAPTOP-001", "MOUSE-001", "HUB-001", "KB-001", "STAND-001"
        ]
        assert sum(p.status == ProductStatus.ACTIVE for p in products) == 4
        stand = products[-1]
        assert stand.category == "Office"
        assert stand.stock_quantity == 0
        assert all(p.created_at < now for p in products)

    def test_init_without_file_uses_demo(self):
        """Test init_catalog falls back to the demonstration data."""
        assert len(init_catalog(None)) == 5

    def test_from_json(self, tmp_path: Path):
        """Test loading camelCase JSON records."""
        products_file = tmp_path / "products.json"
        products_file.write_text(json.dumps([
            {
                "id": str(LAPTOP_ID),
                "name": "Desk Lamp",
                "description": "LED lamp",
                "price": 24.5,
                "category": "Office",
                "sku": "LAMP-001",
                "stockQuantity": 12,
                "status": "DISCONTINUED",
                "createdAt": "2026-01-13T10:00:00",
                "images": [{"url": "https://img.example/lamp.png", "primary": True}],
                "attributes": {"color": "white"}
            }
        ]), encoding="utf-8")

        catalog = init_catalog(products_file)

        product = catalog.by_id(LAPTOP_ID)
        assert product.name == "Desk Lamp"
        assert product.price == Decimal("24.5")
        assert product.stock_quantity == 12
        assert product.status == ProductStatus.DISCONTINUED
        assert product.images[0].primary is True
        assert product.attributes == {"color": "white"}

    def test_from_json_missing_file(self, tmp_path: Path):
        """Test a missing file raises."""
        with pytest.raises(FileNotFoundError):
            ProductCatalog.from_json(tmp_path / "missing.json")

    def test_from_json_rejects_invalid_records(self, tmp_path: Path):
        """Test negative stock is rejected."""
        products_file = tmp_path / "products.json"
        products_file.write_text(json.dumps([
            {
                "id": str(LAPTOP_ID),
                "name": "Broken",
                "price": 1,
                "category": "Office",
                "sku": "X-1",
                "stockQuantity": -1,
                "createdAt": "2026-01-13T10:00:00"
            }
        ]), encoding="utf-8")

        with pytest.raises(ValidationError):
            ProductCatalog.from_json(products_file)

    def test_from_json_mixed_timestamps_become_utc(self, tmp_path: Path):
        """Test naive and offset timestamps load as comparable UTC values."""
        products_file = tmp_path / "products.json"
        products_file.write_text(json.dumps([
            {
                "id": str(LAPTOP_ID),
                "name": "Naive",
                "price": 10,
                "category": "Office",
                "sku": "N-1",
                "createdAt": "2026-01-13T10:00:00",
                "updatedAt": "2026-01-14T10:00:00"
            },
            {
                "id": str(STAND_ID),
                "name": "Aware",
                "price": 20,
                "category": "Office",
                "sku": "A-1",
                "createdAt": "2026-01-12T10:00:00Z"
            }
        ]), encoding="utf-8")

        catalog = ProductCatalog.from_json(products_file)

        naive = catalog.by_id(LAPTOP_ID)
        assert naive.created_at == datetime(2026, 1, 13, 10, tzinfo=timezone.utc)
        assert naive.updated_at.tzinfo is not None
        assert catalog.by_id(STAND_ID).created_at < naive.created_at
