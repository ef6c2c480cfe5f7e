"""Cart models with Decimal-based totals."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from boutique.catalog.models import Product


@dataclass
class CartItem:
    """One product line of the cart."""
    product: Product
    quantity: int

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def total_price(self) -> Decimal:
        """Price for all units."""
        return self.product.price * self.quantity

    def to_dict(self) -> dict:
        return {
            "product": self.product.to_dict(),
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        """
        Create from a stored dict.

        Raises:
            KeyError, TypeError, ValueError: the stored shape is wrong
        """
        quantity = data["quantity"]
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise TypeError(f"quantity must be an integer, got {quantity!r}")
        if quantity < 1:
            raise ValueError(f"quantity must be >= 1, got {quantity}")
        return cls(product=Product.from_dict(data["product"]), quantity=quantity)


@dataclass
class Cart:
    """Ordered cart lines, at most one per product id."""
    items: list[CartItem] = field(default_factory=list)

    def find(self, product_id: str) -> Optional[CartItem]:
        return next((item for item in self.items if item.product_id == product_id), None)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def total(self) -> Decimal:
        """Sum of price x quantity, unrounded."""
        return sum((item.total_price for item in self.items), Decimal("0"))

    @property
    def item_count(self) -> int:
        """Total number of units (badge count)."""
        return sum(item.quantity for item in self.items)

    def to_list(self) -> list[dict]:
        """Convert to the stored JSON shape: [{product, quantity}, ...]."""
        return [item.to_dict() for item in self.items]

    @classmethod
    def from_list(cls, data: list) -> "Cart":
        """
        Create from the stored JSON shape.

        Lines repeating a product id are merged into the first one.
        """
        if not isinstance(data, list):
            raise TypeError(f"cart must be a list, got {type(data).__name__}")

        cart = cls()
        for raw in data:
            item = CartItem.from_dict(raw)
            existing = cart.find(item.product_id)
            if existing:
                existing.quantity += item.quantity
            else:
                cart.items.append(item)
        return cart
