"""
FastAPI Routers Package

All routers are included in api/index.py.
"""

from boutique.routers.cart import router as cart_router
from boutique.routers.checkout import router as checkout_router
from boutique.routers.products import router as products_router

__all__ = [
    "cart_router",
    "checkout_router",
    "products_router",
]
