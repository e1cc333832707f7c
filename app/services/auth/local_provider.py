"""Local password-based authentication provider."""
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from fastapi import Request
from sqlalchemy.orm import Session as DBSession

from app.config import settings
from app.models.user import User
from app.models.session import Session
from app.services.auth.base import AuthProvider

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


def get_request_token(request: Request) -> Optional[str]:
    """Session token from the Authorization header, falling back to the cookie."""
    auth_header = request.headers.get("authorization", "")
    if auth_header.lower().startswith(BEARER_PREFIX):
        token = auth_header[len(BEARER_PREFIX):].strip()
        if token:
            return token
    return request.cookies.get(settings.session_cookie_name)


class LocalAuthProvider(AuthProvider):
    """
    Local authentication provider using password hashing and database sessions.

    Passwords are hashed with bcrypt. Sessions are stored in database with
    secure random tokens.
    """

    def _hash_password(self, password: str) -> str:
        """Hash a password using bcrypt."""
        return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')

    def _verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))

    def _generate_session_token(self) -> str:
        """Generate a cryptographically secure session token."""
        return secrets.token_urlsafe(32)

    def _find_valid_session(self, db: DBSession, token: str) -> Optional[Session]:
        now = datetime.now(timezone.utc)
        return db.query(Session).filter(
            Session.token == token,
            Session.expires_at > now
        ).first()

    async def authenticate(self, db: DBSession, email: str, password: str) -> Optional[User]:
        """Authenticate user with email and password."""
        user = db.query(User).filter(User.email == email.strip().lower()).first()
        if not user or not user.password_hash:
            return None
        if not self._verify_password(password, user.password_hash):
            return None
        return user

    async def create_user(
        self,
        db: DBSession,
        email: str,
        password: str,
        name: Optional[str] = None,
    ) -> User:
        """Create a new user with hashed password."""
        email = email.strip().lower()
        if db.query(User).filter(User.email == email).first():
            raise ValueError("An account with this email already exists")

        user = User(
            email=email,
            password_hash=self._hash_password(password),
            name=name,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("Created user %s", user.id)
        return user

    async def get_user_from_request(self, db: DBSession, request: Request) -> Optional[User]:
        """Extract user from bearer token or session cookie."""
        token = get_request_token(request)
        if not token:
            return None
        return await self.get_user_from_token(db, token)

    async def get_user_from_token(self, db: DBSession, token: str) -> Optional[User]:
        session = self._find_valid_session(db, token)
        if not session:
            return None
        return session.user

    async def create_session(self, db: DBSession, user: User, request: Request) -> str:
        """Create a new session for the user."""
        token = self._generate_session_token()
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=settings.session_max_age)

        # Extract request metadata
        user_agent = request.headers.get("user-agent", "")[:512]
        client_ip = request.client.host if request.client else None

        session = Session(
            user_id=user.id,
            token=token,
            expires_at=expires_at,
            user_agent=user_agent,
            ip_address=client_ip
        )
        db.add(session)
        db.commit()

        return token

    async def refresh_session(self, db: DBSession, token: str, request: Request) -> Optional[str]:
        """Rotate a valid session: the old token stops working immediately."""
        session = self._find_valid_session(db, token)
        if not session:
            return None

        user = session.user
        db.delete(session)
        db.commit()
        return await self.create_session(db, user, request)

    async def revoke_session(self, db: DBSession, token: str) -> bool:
        """Revoke a session by its token."""
        session = db.query(Session).filter(Session.token == token).first()
        if not session:
            return False
        db.delete(session)
        db.commit()
        return True


# Singleton instance
local_auth_provider = LocalAuthProvider()
