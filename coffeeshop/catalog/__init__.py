"""
==============================================================================
Catalog Package - Product Storage
==============================================================================

In-memory product catalog with case-insensitive type views.

Classes:
--------
- Product, Property: Pydantic models for catalog items
- MemoryStore: Thread-safe read-only store
- CatalogStore: Query protocol any backend can implement

==============================================================================
"""

from .models import Product, Property
from .store import CatalogStore, MemoryStore, ProductNotFoundError
from .inventory import INVENTORY

__all__ = [
    "Product",
    "Property",
    "CatalogStore",
    "MemoryStore",
    "ProductNotFoundError",
    "INVENTORY",
]
