"""
Cart Router

Cart endpoints for the storefront. Storage calls are synchronous, so every
cart action runs in a worker thread: the store is rehydrated, mutated (which
persists it), and formatted in one go.
"""
import asyncio
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException

from boutique.cart import CartStore
from boutique.cart.storage import CartStorage
from boutique.catalog import CatalogService
from boutique.errors import ERROR_CART_STORAGE_UNAVAILABLE, ERROR_PRODUCT_NOT_FOUND
from boutique.logging import get_logger
from boutique.services.money import to_float

from .deps import get_cart_storage, get_catalog
from .models import AddToCartRequest, CartItemRequest, UpdateCartItemRequest

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])


def format_cart_response(store: CartStore) -> dict:
    """Cart lines plus derived totals for the cart panel and badge."""
    return {
        "items": [
            {
                "product_id": item.product_id,
                "name": item.product.name,
                "image_url": item.product.image_url,
                "price": to_float(item.product.price),
                "quantity": item.quantity,
                "total_price": to_float(item.total_price),
            }
            for item in store.items
        ],
        "total": to_float(store.compute_total()),
        "count": store.item_count(),
        "is_open": store.is_open,
    }


def _apply(storage: CartStorage, action: Callable[[CartStore], object] | None = None) -> dict:
    store = CartStore(storage)
    if action is not None:
        action(store)
    return format_cart_response(store)


async def _run_cart_action(
    storage: CartStorage, action: Callable[[CartStore], object] | None = None
) -> dict:
    try:
        return await asyncio.to_thread(_apply, storage, action)
    except ValueError as e:
        logger.error(f"Cart action failed: {e}")
        raise HTTPException(status_code=503, detail=ERROR_CART_STORAGE_UNAVAILABLE)


@router.get("/api/cart")
async def get_cart(storage: CartStorage = Depends(get_cart_storage)):
    """Get the visitor's cart."""
    return await _run_cart_action(storage)


@router.post("/api/cart/add")
async def add_to_cart(
    request: AddToCartRequest,
    storage: CartStorage = Depends(get_cart_storage),
    catalog: CatalogService = Depends(get_catalog),
):
    """Add one unit of a catalog product (opens the cart panel)."""
    product = await catalog.get_product(request.product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)

    return await _run_cart_action(storage, lambda store: store.add_to_cart(product))


@router.patch("/api/cart/item")
async def update_cart_item(
    request: UpdateCartItemRequest, storage: CartStorage = Depends(get_cart_storage)
):
    """Set an item's quantity (0 or less removes it)."""
    return await _run_cart_action(
        storage, lambda store: store.update_quantity(request.product_id, request.quantity)
    )


@router.post("/api/cart/item/increment")
async def increment_cart_item(
    request: CartItemRequest, storage: CartStorage = Depends(get_cart_storage)
):
    return await _run_cart_action(storage, lambda store: store.increment(request.product_id))


@router.post("/api/cart/item/decrement")
async def decrement_cart_item(
    request: CartItemRequest, storage: CartStorage = Depends(get_cart_storage)
):
    """Decrease an item's quantity, never below 1."""
    return await _run_cart_action(storage, lambda store: store.decrement(request.product_id))


@router.delete("/api/cart/item")
async def remove_cart_item(product_id: str, storage: CartStorage = Depends(get_cart_storage)):
    """Remove item from cart."""
    return await _run_cart_action(storage, lambda store: store.remove_from_cart(product_id))
