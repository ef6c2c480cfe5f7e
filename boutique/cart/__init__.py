"""Cart package: models, storage port, and the cart store."""
from .models import Cart, CartItem
from .service import CART_STORAGE_KEY, CartStore
from .storage import CartStorage, MemoryStorage, RedisStorage

__all__ = [
    "CART_STORAGE_KEY",
    "Cart",
    "CartItem",
    "CartStorage",
    "CartStore",
    "MemoryStorage",
    "RedisStorage",
]
