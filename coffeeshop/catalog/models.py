"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for coffee shop catalog items.

==============================================================================
"""

from typing import Any, Dict, Tuple
from pydantic import BaseModel, ConfigDict, Field


# Fields left out of the wire representation when empty
OPTIONAL_FIELDS = ("unit", "quantity", "price", "properties")


class Property(BaseModel):
    """Free-form descriptive attribute such as flavour notes or intensity."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Attribute name")
    value: str = Field(default="", description="Attribute value, may be empty")


class Product(BaseModel):
    """
    Product model for catalog items.

    Prices and quantities are kept as strings to preserve their formatting.
    Instances are deeply immutable; properties are stored as a tuple.

    Attributes:
        id: Unique product identifier (catalog key)
        type: Product type (e.g., "Coffee", "Tea")
        brand: Brand name
        name: Product display name
        unit: Unit of measure (e.g., "gram")
        quantity: Quantity in units (e.g., "1000")
        price: Price as displayed (e.g., "7.99")
        properties: Ordered descriptive attributes
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Product identifier")
    type: str = Field(default="", description="Product type")
    brand: str = Field(default="", description="Brand name")
    name: str = Field(default="", description="Display name")
    unit: str = Field(default="", description="Unit of measure")
    quantity: str = Field(default="", description="Quantity")
    price: str = Field(default="", description="Price")
    properties: Tuple[Property, ...] = Field(default_factory=tuple, description="Descriptive attributes")

    def is_type(self, product_type: str) -> bool:
        """Check product type, ignoring case."""
        return self.type.lower() == product_type.lower()

    def to_wire(self) -> Dict[str, Any]:
        """
        Convert to the JSON wire representation.

        id, type, brand and name are always present; unit, quantity,
        price and properties are omitted when empty.
        """
        empty = {field for field in OPTIONAL_FIELDS if not getattr(self, field)}
        return self.model_dump(mode="json", exclude=empty)
