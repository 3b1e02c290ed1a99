"""
==============================================================================
Coffee Shop Catalog - Application Entry Point
==============================================================================

Serves the product catalog over HTTP with an artificial per-request
latency, for exercising client timeout behaviour.

Usage:
------
    # Built-in inventory, 100ms latency, port 8080
    python -m coffeeshop.main

    # Custom latency and catalog
    COFFEESHOP_LATENCY=2s COFFEESHOP_PRODUCTS_FILE=data/products.json coffeeshop

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from coffeeshop.catalog import INVENTORY, MemoryStore
from coffeeshop.config import Settings, get_settings
from coffeeshop.server import CatalogServer


logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )


def build_store(settings: Settings) -> MemoryStore:
    """Load the configured products file, or the built-in inventory."""
    products_path = settings.products_path
    if products_path is None:
        return MemoryStore(INVENTORY)

    logger.info(f"Loading products from {products_path}")
    return MemoryStore.from_json_file(products_path)


def run(settings: Optional[Settings] = None) -> None:
    """Build the store and serve it until interrupted."""
    settings = settings or get_settings()
    configure_logging(settings)

    store = build_store(settings)
    server = CatalogServer(settings.address, store, settings=settings)
    server.serve()


if __name__ == "__main__":
    run()
