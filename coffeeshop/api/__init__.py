"""
==============================================================================
API Package
==============================================================================

REST endpoints of the catalog service.

Routers:
--------
- products: Product catalog queries

==============================================================================
"""

from .router import api_router

__all__ = ["api_router"]
