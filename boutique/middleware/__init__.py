"""HTTP middleware for the storefront API."""
from .session import SESSION_COOKIE, SessionMiddleware

__all__ = ["SESSION_COOKIE", "SessionMiddleware"]
