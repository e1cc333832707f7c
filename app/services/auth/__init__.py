"""
Authentication service package.

Local password auth with database sessions. The session token is accepted
from the session cookie (browser clients) or an `Authorization: Bearer`
header (mobile clients).

Usage:
    from app.services.auth import get_auth_provider
    from app.services.auth.dependencies import get_current_user

    # In routes:
    @router.get("/protected")
    async def protected_route(user: User = Depends(get_current_user)):
        ...
"""
from app.services.auth.base import AuthProvider
from app.services.auth.local_provider import local_auth_provider


def get_auth_provider() -> AuthProvider:
    """Factory function to get the configured auth provider."""
    return local_auth_provider


__all__ = [
    "AuthProvider",
    "get_auth_provider",
    "local_auth_provider",
]
