"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for product catalog items.

Products are frozen once built: the catalog is loaded at startup and never
written afterwards. Field names are snake_case in Python and camelCase on
the wire (``stock_quantity`` <-> ``stockQuantity``).

==============================================================================
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Annotated, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel


# Prices stay Decimal in Python but are written as JSON numbers
Price = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ProductStatus(str, Enum):
    """
    Product lifecycle status.

    ACTIVE: available for purchase
    INACTIVE: temporarily unavailable
    DISCONTINUED: no longer sold
    """

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    DISCONTINUED = "DISCONTINUED"


class CatalogModel(BaseModel):
    """Base model: immutable, camelCase aliases, populated by either name."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ProductImage(CatalogModel):
    """Image reference attached to a product."""

    url: str = Field(..., description="Image URL")
    alt: Optional[str] = Field(default=None, description="Alternative text")
    primary: bool = Field(default=False, description="Primary display image")


class Product(CatalogModel):
    """
    Product model for catalog items.

    Attributes:
        id: Unique product identifier (UUID)
        name: Product display name, used for sorting and search
        description: Optional long text, included in search
        price: Non-negative decimal price
        category: Category name (matched case-insensitively)
        stock_quantity: Units on hand; > 0 means in stock
        sku: Stock keeping unit, display only
        status: Lifecycle status
        created_at: Creation timestamp, used by the "created" sort
        updated_at: Last update timestamp
        images: Display-only image list
        attributes: Display-only key/value attributes
        created_by: User who created the record
        updated_by: User who last updated the record
    """

    id: UUID = Field(..., description="Unique product identifier (UUID)")
    name: str = Field(..., min_length=1, max_length=100, description="Product name")
    description: Optional[str] = Field(default=None, max_length=500, description="Product description")
    price: Price = Field(..., ge=0, description="Product price")
    category: str = Field(..., min_length=1, max_length=50, description="Product category")
    stock_quantity: int = Field(default=0, ge=0, description="Stock quantity available")
    sku: str = Field(..., description="Stock Keeping Unit")
    status: ProductStatus = Field(default=ProductStatus.ACTIVE, description="Product status")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(default=None, description="Last update timestamp")
    images: List[ProductImage] = Field(default_factory=list, description="Product images")
    attributes: Dict[str, str] = Field(default_factory=dict, description="Product attributes")
    created_by: Optional[str] = Field(default=None, description="User ID who created the product")
    updated_by: Optional[str] = Field(default=None, description="User ID who last updated the product")

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        """
        Treat naive timestamps as UTC.

        Every timestamp in a catalog must be offset-aware so the "created"
        sort can compare any two products.
        """
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def is_active(self) -> bool:
        """Check if the product is ACTIVE."""
        return self.status == ProductStatus.ACTIVE

    @property
    def in_stock(self) -> bool:
        """Check if at least one unit is available."""
        return self.stock_quantity > 0
