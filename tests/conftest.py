"""
Test configuration and fixtures for FridgeChef.

Implements the transaction rollback pattern:
- Session-scoped engine (SQLite in-memory unless TEST_DATABASE_URL is set)
- Function-scoped transactional session with automatic rollback
- TestClient with database dependency override
- Authenticated client fixtures (cookie and bearer)
"""

import os
from typing import Generator
from datetime import datetime, timedelta, timezone
import secrets

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import User, Session as UserSession


# =============================================================================
# Database Fixtures
# =============================================================================


def get_test_database_url() -> str:
    """
    Get the test database URL.

    TEST_DATABASE_URL points the suite at PostgreSQL (JSONB columns, real
    timestamptz); without it an in-memory SQLite database is used.
    """
    return os.environ.get("TEST_DATABASE_URL", "sqlite://")


@pytest.fixture(scope="session")
def test_engine():
    """
    Create test database engine once per session.

    Tables are created at the start and dropped at the end.
    """
    database_url = get_test_database_url()

    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url)

    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(test_engine) -> Generator[Session, None, None]:
    """
    Provide a transactional database session that rolls back after each test.

    Service code calls commit(); the session joins the outer transaction so
    those commits never reach the database.
    """
    connection = test_engine.connect()
    transaction = connection.begin()

    TestingSessionLocal = sessionmaker(bind=connection)
    session = TestingSessionLocal()

    yield session

    session.close()
    transaction.rollback()
    connection.close()


# =============================================================================
# TestClient Fixtures
# =============================================================================


def _override_get_db(db: Session):
    def override_get_db():
        try:
            yield db
        finally:
            pass  # Don't close - managed by db fixture

    return override_get_db


@pytest.fixture
def client(db: Session) -> Generator[TestClient, None, None]:
    """
    TestClient with database dependency override.

    The database session is injected into the app's get_db dependency.
    """
    app.dependency_overrides[get_db] = _override_get_db(db)

    with TestClient(app) as test_client:
        # Set default Referer so CSRF Origin middleware allows requests
        test_client.headers["referer"] = "http://testserver/"
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# Authentication Fixtures
# =============================================================================


@pytest.fixture
def test_user(db: Session) -> User:
    """Create a test user."""
    import bcrypt

    password_hash = bcrypt.hashpw(
        "testpassword123".encode("utf-8"), bcrypt.gensalt()
    ).decode("utf-8")

    user = User(email="testuser@example.com", password_hash=password_hash, name="Test User")
    db.add(user)
    db.flush()
    return user


@pytest.fixture
def other_user(db: Session) -> User:
    """A second user, for ownership checks."""
    user = User(email="other@example.com", password_hash=None, name="Other")
    db.add(user)
    db.flush()
    return user


@pytest.fixture
def test_session(db: Session, test_user: User) -> UserSession:
    """Create a test session for the test user."""
    token = secrets.token_urlsafe(32)
    session = UserSession(
        user_id=test_user.id,
        token=token,
        expires_at=datetime.now(timezone.utc) + timedelta(days=7),
        user_agent="pytest-test-client",
        ip_address="127.0.0.1",
    )
    db.add(session)
    db.flush()
    return session


@pytest.fixture
def auth_client(
    db: Session, test_session: UserSession
) -> Generator[TestClient, None, None]:
    """
    Authenticated TestClient (session cookie).

    Creates a separate TestClient instance to avoid cookie conflicts.
    """
    from app.config import settings

    app.dependency_overrides[get_db] = _override_get_db(db)

    with TestClient(app) as test_client:
        test_client.cookies.set(settings.session_cookie_name, test_session.token)
        # Set default Referer so CSRF Origin middleware allows requests
        test_client.headers["referer"] = "http://testserver/"
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def bearer_client(
    db: Session, test_session: UserSession
) -> Generator[TestClient, None, None]:
    """Authenticated TestClient using the Authorization header and no Referer."""
    app.dependency_overrides[get_db] = _override_get_db(db)

    with TestClient(app) as test_client:
        test_client.headers["authorization"] = f"Bearer {test_session.token}"
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_claude_service(monkeypatch):
    """
    Mock Claude service for testing AI functionality.

    Replaces the module-level service used by the scan routes.
    """
    from tests.fixtures.mocks import MockClaudeService

    mock_service = MockClaudeService()
    monkeypatch.setattr("app.api.scans.claude_service", mock_service)

    return mock_service


@pytest.fixture
def chicken_rice_pool():
    """Two-ingredient pool used across pipeline tests."""
    from app.services.recipe_types import MacrosPer100g, ScannedIngredient

    return (
        ScannedIngredient(
            name="Chicken Breast",
            quantity=400,
            unit="g",
            macros_per_100g=MacrosPer100g(calories=165, protein=31, carbs=0, fat=3.6),
        ),
        ScannedIngredient(
            name="Rice",
            quantity=300,
            unit="g",
            macros_per_100g=MacrosPer100g(calories=130, protein=2.7, carbs=28, fat=0.3),
        ),
    )


# =============================================================================
# pytest markers
# =============================================================================


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m not slow')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "security: marks security tests")
