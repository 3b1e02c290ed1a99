"""
FastAPI dependencies.

The catalog store is owned by the application that serves it and is
looked up from ``app.state`` on each request.
"""

from fastapi import Request

from coffeeshop.catalog.store import CatalogStore


def get_store(request: Request) -> CatalogStore:
    """Return the store attached to the serving application."""
    return request.app.state.store
