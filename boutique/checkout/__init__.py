"""Checkout handoff: WhatsApp order message and link."""
from .message import (
    WHATSAPP_URL_TEMPLATE,
    CheckoutUnavailable,
    ClientInfo,
    build_checkout_message,
    build_checkout_payload,
    build_checkout_url,
    is_checkout_enabled,
)

__all__ = [
    "WHATSAPP_URL_TEMPLATE",
    "CheckoutUnavailable",
    "ClientInfo",
    "build_checkout_message",
    "build_checkout_payload",
    "build_checkout_url",
    "is_checkout_enabled",
]
