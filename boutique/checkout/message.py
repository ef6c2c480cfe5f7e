"""
Checkout Message Builder

There is no order submission: checkout opens WhatsApp with a pre-filled
message listing the cart and the customer's contact details. The message is
deterministic for a given cart and client info.
"""
from dataclasses import dataclass, replace
from typing import Optional
from urllib.parse import quote

from boutique import config
from boutique.cart.models import Cart
from boutique.errors import ERROR_CHECKOUT_EMPTY_CART, ERROR_CHECKOUT_MISSING_CLIENT_INFO
from boutique.i18n import get_text
from boutique.services.money import format_amount

WHATSAPP_URL_TEMPLATE = "https://wa.me/{phone}?text={text}"


class CheckoutUnavailable(ValueError):
    """Checkout was requested while the checkout action is disabled."""


@dataclass(frozen=True)
class ClientInfo:
    """Customer contact fields typed in the cart panel. Never persisted."""
    full_name: str = ""
    location: str = ""

    def merge(self, full_name: Optional[str] = None, location: Optional[str] = None) -> "ClientInfo":
        """Copy with only the given fields replaced."""
        changes = {}
        if full_name is not None:
            changes["full_name"] = full_name
        if location is not None:
            changes["location"] = location
        return replace(self, **changes)

    @property
    def is_complete(self) -> bool:
        return bool(self.full_name) and bool(self.location)


def is_checkout_enabled(cart: Cart, client_info: ClientInfo) -> bool:
    """The checkout button is shown for a non-empty cart and enabled once both fields are filled."""
    return not cart.is_empty and client_info.is_complete


def build_checkout_message(
    cart: Cart,
    client_info: ClientInfo,
    lang: Optional[str] = None,
    currency: Optional[str] = None,
) -> str:
    """
    Plain-text order message.

    Lines: greeting, one line per cart item, total, blank line, full name,
    location.
    """
    lang = lang or config.STORE_LANGUAGE
    currency = currency or config.CURRENCY_LABEL

    lines = [get_text("checkout.greeting", lang)]
    for item in cart.items:
        lines.append(
            get_text(
                "checkout.item_line",
                lang,
                quantity=item.quantity,
                name=item.product.name,
                price=format_amount(item.product.price),
                currency=currency,
            )
        )
    lines.append(
        get_text("checkout.total_line", lang, total=format_amount(cart.total), currency=currency)
    )
    lines.append("")
    lines.append(get_text("checkout.full_name_line", lang, full_name=client_info.full_name))
    lines.append(get_text("checkout.location_line", lang, location=client_info.location))
    return "\n".join(lines)


def build_checkout_payload(
    cart: Cart,
    client_info: ClientInfo,
    lang: Optional[str] = None,
    currency: Optional[str] = None,
) -> str:
    """The order message percent-encoded for a query parameter (newline -> %0A)."""
    return quote(build_checkout_message(cart, client_info, lang, currency), safe="")


def build_checkout_url(
    cart: Cart,
    client_info: ClientInfo,
    lang: Optional[str] = None,
    phone: Optional[str] = None,
) -> str:
    """
    WhatsApp link carrying the order message.

    Raises:
        CheckoutUnavailable: the cart is empty or a client field is missing
    """
    if cart.is_empty:
        raise CheckoutUnavailable(ERROR_CHECKOUT_EMPTY_CART)
    if not client_info.is_complete:
        raise CheckoutUnavailable(ERROR_CHECKOUT_MISSING_CLIENT_INFO)

    return WHATSAPP_URL_TEMPLATE.format(
        phone=phone or config.WHATSAPP_PHONE,
        text=build_checkout_payload(cart, client_info, lang),
    )
