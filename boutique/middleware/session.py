"""
Visitor Session Middleware

Resolves the `session_id` cookie before routing and stores it on
`request.state.session_id`. A missing or malformed cookie gets a fresh id,
and the cookie is written on whatever response goes out, error responses
included, so a visitor keeps one id from the first request on.
"""
import re
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

SESSION_COOKIE = "session_id"
SESSION_COOKIE_MAX_AGE = 60 * 60 * 24 * 365  # 1 year

_SESSION_ID_RE = re.compile(r"^[0-9a-f]{32}$")


def is_valid_session_id(value: str | None) -> bool:
    return bool(value) and _SESSION_ID_RE.match(value) is not None


class SessionMiddleware(BaseHTTPMiddleware):
    """Give every visitor a stable session id cookie."""

    async def dispatch(self, request: Request, call_next):
        session_id = request.cookies.get(SESSION_COOKIE)
        is_new = not is_valid_session_id(session_id)
        if is_new:
            session_id = uuid.uuid4().hex
        request.state.session_id = session_id

        response: Response = await call_next(request)

        if is_new:
            response.set_cookie(
                SESSION_COOKIE,
                session_id,
                max_age=SESSION_COOKIE_MAX_AGE,
                httponly=True,
                samesite="lax",
            )
        return response
