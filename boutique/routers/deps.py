"""
Shared Dependencies for Routers

Visitor session, cart storage and catalog service providers. Tests override
these through `app.dependency_overrides`.
"""
from fastapi import Depends, Request

from boutique.cart.storage import CartStorage, RedisStorage
from boutique.catalog.service import CatalogService, get_catalog_service
from boutique.middleware.session import SESSION_COOKIE

__all__ = ["SESSION_COOKIE", "get_cart_storage", "get_catalog", "get_session_id"]


def get_session_id(request: Request) -> str:
    """Visitor session id resolved by SessionMiddleware."""
    session_id = getattr(request.state, "session_id", None)
    if session_id is None:
        raise RuntimeError("SessionMiddleware is not installed on this app")
    return session_id


def get_cart_storage(session_id: str = Depends(get_session_id)) -> CartStorage:
    """Cart storage scoped to the visitor session."""
    return RedisStorage(session_id)


def get_catalog() -> CatalogService:
    return get_catalog_service()
