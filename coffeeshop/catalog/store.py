"""
==============================================================================
Catalog Store Module
==============================================================================

Thread-safe, read-only access to the product catalog.

Features:
---------
- In-memory mapping of product identifier to product
- Single reader/writer lock over the whole mapping
- Case-insensitive type views ("coffee", "tea")
- JSON seed file loading

JSON Structure:
--------------
{
  "1": {"id": "1", "type": "Coffee", "brand": "illy", "name": "Intenso", ...},
  "2": {...}
}

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Protocol, Union

from pydantic import ValidationError

from coffeeshop.core.exceptions import ConfigurationError

from .locks import ReadWriteLock
from .models import Product


# Module logger
logger = logging.getLogger(__name__)


class ProductNotFoundError(LookupError):
    """Raised when no product with the requested identifier exists."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"product {product_id!r} not found")


class CatalogStore(Protocol):
    """Read-only query contract the HTTP layer depends on."""

    def get_all(self) -> List[Product]: ...

    def get_product(self, product_id: str) -> Product: ...

    def get_coffee(self) -> List[Product]: ...

    def get_tea(self) -> List[Product]: ...


class MemoryStore:
    """
    In-memory product store.

    The mapping is filled once under the writer lock during construction
    and only read afterwards, under the reader lock.

    Use the memory store for testing and development.

    Example:
        >>> store = MemoryStore({"1": Product(id="1", type="Coffee", brand="illy")})
        >>> store.get_product("1").brand
        'illy'
        >>> store.get_tea()
        []
    """

    def __init__(self, products: Mapping[str, Union[Product, Dict[str, Any]]]) -> None:
        """
        Initialize the store from a seed mapping.

        Args:
            products: Mapping of identifier to Product (or product dict)

        Raises:
            ConfigurationError: If a product is invalid or its id differs from its key
        """
        self._lock = ReadWriteLock()
        self._products: Dict[str, Product] = {}

        with self._lock.write_locked():
            self._load(products)

        logger.info(f"Loaded {len(self._products)} products into memory store")

    def _load(self, products: Mapping[str, Union[Product, Dict[str, Any]]]) -> None:
        """Validate and copy the seed mapping."""
        for key, item in products.items():
            try:
                product = item if isinstance(item, Product) else Product.model_validate(item)
            except ValidationError as e:
                raise ConfigurationError(f"invalid product {key!r}: {e}") from e

            if product.id != key:
                raise ConfigurationError(
                    f"product id {product.id!r} does not match catalog key {key!r}"
                )

            self._products[key] = product

    @classmethod
    def from_json_file(cls, products_file: Path) -> "MemoryStore":
        """
        Build a store from a JSON seed file.

        Args:
            products_file: Path to a JSON object keyed by product id

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigurationError: If the file is not a valid catalog
        """
        try:
            with products_file.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.error(f"Products file not found: {products_file}")
            raise
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"invalid JSON in {products_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"{products_file} must contain a JSON object keyed by product id")

        logger.debug(f"Read {len(data)} products from {products_file}")
        return cls(data)

    # =========================================================================
    # QUERIES
    # =========================================================================

    def get_all(self) -> List[Product]:
        """Return every product, in no particular order."""
        with self._lock.read_locked():
            return list(self._products.values())

    def get_product(self, product_id: str) -> Product:
        """
        Return the product with the given identifier.

        Raises:
            ProductNotFoundError: If no such product exists
        """
        with self._lock.read_locked():
            product = self._products.get(product_id)

        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def get_coffee(self) -> List[Product]:
        """Return products whose type is "coffee", ignoring case."""
        return self._by_type("coffee")

    def get_tea(self) -> List[Product]:
        """Return products whose type is "tea", ignoring case."""
        return self._by_type("tea")

    def _by_type(self, product_type: str) -> List[Product]:
        with self._lock.read_locked():
            return [p for p in self._products.values() if p.is_type(product_type)]

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._products)
