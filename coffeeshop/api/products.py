"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Read-only endpoints over the catalog store.

    GET /products            all products
    GET /products/coffee     products of type "coffee" (404 when none)
    GET /products/tea        products of type "tea" (404 when none)
    GET /products/{id}       single product (404 when unknown)

The static coffee/tea routes are registered before the {product_id}
route so they win the match.

==============================================================================
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Depends

from coffeeshop.api.responses import PrettyJSONResponse
from coffeeshop.catalog.models import Product
from coffeeshop.catalog.store import CatalogStore, ProductNotFoundError
from coffeeshop.core import exceptions
from coffeeshop.core.dependencies import get_store


# Module logger
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller translating store queries into HTTP responses."""

    def __init__(self, store: CatalogStore):
        self._store = store

    def list_products(self) -> PrettyJSONResponse:
        """All products; an empty catalog is an empty array, not an error."""
        return self._render([p.to_wire() for p in self._store.get_all()])

    def get_product(self, product_id: str) -> PrettyJSONResponse:
        """Single product by identifier."""
        try:
            product = self._store.get_product(product_id)
        except ProductNotFoundError:
            raise exceptions.product_not_found(product_id)

        return self._render(product.to_wire())

    def get_coffee(self) -> PrettyJSONResponse:
        """Coffee products."""
        return self._render_non_empty(self._store.get_coffee())

    def get_tea(self) -> PrettyJSONResponse:
        """Tea products."""
        return self._render_non_empty(self._store.get_tea())

    def _render_non_empty(self, products: List[Product]) -> PrettyJSONResponse:
        if not products:
            raise exceptions.product_not_found()
        return self._render([p.to_wire() for p in products])

    @staticmethod
    def _render(content: Any) -> PrettyJSONResponse:
        # Rendering happens in the response constructor.
        try:
            return PrettyJSONResponse(content)
        except (TypeError, ValueError) as e:
            logger.exception("Failed to serialize response")
            raise exceptions.serialization_failure(str(e))


@router.get("", response_class=PrettyJSONResponse)
def list_products(store: CatalogStore = Depends(get_store)):
    """List every product in the catalog."""
    return ProductController(store).list_products()


@router.get("/coffee", response_class=PrettyJSONResponse)
def get_coffee(store: CatalogStore = Depends(get_store)):
    """List coffee products."""
    return ProductController(store).get_coffee()


@router.get("/tea", response_class=PrettyJSONResponse)
def get_tea(store: CatalogStore = Depends(get_store)):
    """List tea products."""
    return ProductController(store).get_tea()


@router.get("/{product_id}", response_class=PrettyJSONResponse)
def get_product(product_id: str, store: CatalogStore = Depends(get_store)):
    """Get a single product by identifier."""
    return ProductController(store).get_product(product_id)
