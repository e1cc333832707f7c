"""Abstract base class for authentication providers."""
from abc import ABC, abstractmethod
from typing import Optional

from fastapi import Request
from sqlalchemy.orm import Session as DBSession

from app.models.user import User


class AuthProvider(ABC):
    """
    Abstract authentication provider interface.

    Route code depends on this interface only, so the session mechanism can
    change without touching the routers.
    """

    @abstractmethod
    async def authenticate(self, db: DBSession, email: str, password: str) -> Optional[User]:
        """
        Authenticate user with email and password.

        Returns User if credentials are valid, None otherwise.
        """
        pass

    @abstractmethod
    async def create_user(
        self,
        db: DBSession,
        email: str,
        password: str,
        name: Optional[str] = None,
    ) -> User:
        """
        Create a new user with the given credentials.

        Raises ValueError if the email is already registered.
        """
        pass

    @abstractmethod
    async def get_user_from_request(self, db: DBSession, request: Request) -> Optional[User]:
        """
        Extract and validate user from request (session cookie or bearer token).

        Returns User if authenticated, None otherwise.
        """
        pass

    @abstractmethod
    async def get_user_from_token(self, db: DBSession, token: str) -> Optional[User]:
        """Return the owner of a valid session token, None if unknown or expired."""
        pass

    @abstractmethod
    async def create_session(self, db: DBSession, user: User, request: Request) -> str:
        """
        Create a new session for the user.

        Returns the session token.
        """
        pass

    @abstractmethod
    async def refresh_session(self, db: DBSession, token: str, request: Request) -> Optional[str]:
        """
        Swap a still-valid session token for a fresh one.

        Returns the new token, or None if the old one is unknown or expired.
        """
        pass

    @abstractmethod
    async def revoke_session(self, db: DBSession, token: str) -> bool:
        """
        Revoke/invalidate a session by its token.

        Returns True if session was revoked, False if not found.
        """
        pass
