"""
Checkout Router

Builds the WhatsApp handoff link for the visitor's cart. Client info comes
with the request and is never stored.
"""
import asyncio

from fastapi import APIRouter, Depends, HTTPException

from boutique.cart import CartStore
from boutique.cart.storage import CartStorage
from boutique.checkout import (
    CheckoutUnavailable,
    ClientInfo,
    build_checkout_message,
    build_checkout_url,
)
from boutique.errors import ERROR_CART_STORAGE_UNAVAILABLE
from boutique.logging import get_logger, sanitize_string_for_logging

from .deps import get_cart_storage
from .models import CheckoutRequest, CheckoutResponse

logger = get_logger(__name__)

router = APIRouter(tags=["checkout"])


@router.post("/api/checkout", response_model=CheckoutResponse)
async def checkout(request: CheckoutRequest, storage: CartStorage = Depends(get_cart_storage)):
    """Return the WhatsApp link (and the plain message) for the current cart."""
    try:
        store = await asyncio.to_thread(CartStore, storage)
    except ValueError as e:
        logger.error(f"Failed to load cart for checkout: {e}")
        raise HTTPException(status_code=503, detail=ERROR_CART_STORAGE_UNAVAILABLE)

    client_info = ClientInfo(full_name=request.full_name, location=request.location)
    try:
        url = build_checkout_url(store.cart, client_info, lang=request.lang)
    except CheckoutUnavailable as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        f"Checkout link built for {sanitize_string_for_logging(client_info.full_name)}: "
        f"{store.item_count()} items"
    )
    return CheckoutResponse(
        url=url,
        message=build_checkout_message(store.cart, client_info, lang=request.lang),
    )
