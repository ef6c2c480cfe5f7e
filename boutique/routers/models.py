"""
Storefront API Pydantic Models

Request and response models shared by the routers.
"""
from pydantic import BaseModel

from boutique.catalog.models import Product
from boutique.services.money import to_float


# ==================== CATALOG MODELS ====================

class ProductResponse(BaseModel):
    id: str
    name: str
    price: float
    image_url: str
    availability: str
    category: str

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            price=to_float(product.price),
            image_url=product.image_url,
            availability=product.availability,
            category=product.category,
        )


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    product_id: str


class UpdateCartItemRequest(BaseModel):
    product_id: str
    quantity: int  # 0 or less removes the item


class CartItemRequest(BaseModel):
    product_id: str


# ==================== CHECKOUT MODELS ====================

class CheckoutRequest(BaseModel):
    full_name: str = ""
    location: str = ""
    lang: str | None = None


class CheckoutResponse(BaseModel):
    url: str
    message: str
