"""
Cart store.

Holds the visitor's cart in memory and writes the whole cart back to storage
at the end of every mutation. On construction it rehydrates from storage;
unreadable content is logged and replaced by an empty cart.
"""
import json
from decimal import Decimal
from typing import Optional

from boutique.catalog.models import Product
from boutique.logging import get_logger, sanitize_id_for_logging

from .models import Cart, CartItem
from .storage import CartStorage

logger = get_logger(__name__)

# Single storage key holding the serialized cart
CART_STORAGE_KEY = "cart"


class CartStore:
    """
    Authoritative cart state for one visitor.

    Features:
    - One line per product id, quantities always >= 1
    - Persistence after every mutation
    - Cart panel open/closed flag (opened by add_to_cart)

    Usage:
        store = CartStore(MemoryStorage())
        store.add_to_cart(product)
        store.update_quantity(product.id, 3)
        store.compute_total()
    """

    def __init__(self, storage: CartStorage):
        self._storage = storage
        self.cart = self._load()
        self.is_open = False

    # ==================== PERSISTENCE ====================

    def _load(self) -> Cart:
        """Read the stored cart; an absent or malformed value gives an empty cart."""
        data = self._storage.read(CART_STORAGE_KEY)
        if not data:
            return Cart()

        try:
            return Cart.from_list(json.loads(data))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, RecursionError) as e:
            logger.warning(f"Failed to parse stored cart, starting empty: {e}")
            return Cart()

    def _persist(self) -> None:
        self._storage.write(CART_STORAGE_KEY, json.dumps(self.cart.to_list()))

    # ==================== MUTATIONS ====================

    def add_to_cart(self, product: Product) -> CartItem:
        """Add one unit of a product and open the cart panel."""
        item = self.cart.find(product.id)
        if item:
            item.quantity += 1
        else:
            item = CartItem(product=product, quantity=1)
            self.cart.items.append(item)

        self.is_open = True
        self._persist()
        return item

    def remove_from_cart(self, product_id: str) -> None:
        """Drop a product line. Unknown ids are ignored."""
        self.cart.items = [item for item in self.cart.items if item.product_id != product_id]
        self._persist()

    def update_quantity(self, product_id: str, new_quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line."""
        if new_quantity <= 0:
            self.remove_from_cart(product_id)
            return

        item = self.cart.find(product_id)
        if item is None:
            logger.debug(f"update_quantity: {sanitize_id_for_logging(product_id)} not in cart")
        else:
            item.quantity = new_quantity
        self._persist()

    def increment(self, product_id: str) -> None:
        """Panel "+" button."""
        item = self.cart.find(product_id)
        if item:
            self.update_quantity(product_id, item.quantity + 1)

    def decrement(self, product_id: str) -> None:
        """Panel "-" button; stops at 1 (removal has its own button)."""
        item = self.cart.find(product_id)
        if item:
            self.update_quantity(product_id, max(1, item.quantity - 1))

    # ==================== PANEL ====================

    def open_panel(self) -> None:
        self.is_open = True

    def close_panel(self) -> None:
        self.is_open = False

    # ==================== DERIVED VALUES ====================

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self.cart.items)

    @property
    def is_empty(self) -> bool:
        return self.cart.is_empty

    def get_item(self, product_id: str) -> Optional[CartItem]:
        return self.cart.find(product_id)

    def compute_total(self) -> Decimal:
        return self.cart.total

    def item_count(self) -> int:
        return self.cart.item_count
