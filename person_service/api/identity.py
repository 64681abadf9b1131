"""Caller Identity Pass-Through: trusts an identity already resolved upstream.

Invariants:
    - No credentials are checked here; the header value is taken as-is
    - A missing or blank header leaves the request unauthenticated
    - Installed only when settings.trusted_user_header is set

Design Decisions:
    - Starlette AuthenticationMiddleware: handlers read request.scope["user"]
      the same way whether or not the middleware is installed
"""

from starlette.authentication import (
    AuthCredentials, AuthenticationBackend, BaseUser, SimpleUser,
)
from starlette.requests import HTTPConnection


class TrustedHeaderBackend(AuthenticationBackend):
    """Read the caller's name from a header set by a fronting proxy."""

    def __init__(self, header_name: str):
        self.header_name = header_name

    async def authenticate(
        self, conn: HTTPConnection,
    ) -> tuple[AuthCredentials, BaseUser] | None:
        name = conn.headers.get(self.header_name, "").strip()
        if not name:
            return None
        return AuthCredentials(["authenticated"]), SimpleUser(name)


def resolved_caller(conn: HTTPConnection) -> str | None:
    """Name of the authenticated caller, or None if no identity was resolved."""
    user = conn.scope.get("user")
    if user is None or not user.is_authenticated:
        return None
    return user.display_name
