"""
Main API router combining all route modules.
"""

from fastapi import APIRouter

from coffeeshop.api import products


api_router = APIRouter()
api_router.include_router(products.router)
