"""
Security tests for authentication and authorization.

Tests security aspects including:
- Session security
- Access control between users
- Token handling
"""

import pytest
from datetime import timedelta
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.config import settings
from app.models import User, Session as UserSession
from tests.factories import (
    create_favorite,
    create_meal_consumed,
    create_scan,
    create_session,
    create_user,
    sample_recipe,
)


@pytest.mark.security
class TestSessionSecurity:
    """Tests for session security."""

    def test_session_token_not_guessable(self, db: Session):
        user = create_user(db)

        tokens = [create_session(db, user).token for _ in range(100)]

        assert len(set(tokens)) == 100
        assert all(len(token) >= 32 for token in tokens)

    def test_expired_session_rejected(self, client: TestClient, db: Session):
        user = create_user(db)
        session = create_session(db, user, expires_in=timedelta(days=-1))

        client.cookies.set(settings.session_cookie_name, session.token)

        assert client.get("/scans").status_code == 401

    def test_expired_bearer_rejected(self, client: TestClient, db: Session):
        user = create_user(db)
        session = create_session(db, user, expires_in=timedelta(days=-1))

        response = client.get("/scans", headers={"Authorization": f"Bearer {session.token}"})

        assert response.status_code == 401

    def test_invalid_session_token_rejected(self, client: TestClient):
        client.cookies.set(settings.session_cookie_name, "invalid_token_12345")

        assert client.get("/scans").status_code == 401

    def test_session_cleared_on_logout(
        self, auth_client: TestClient, test_session: UserSession, db: Session
    ):
        token = test_session.token

        auth_client.post("/auth/logout")

        db.expire_all()
        assert db.query(UserSession).filter(UserSession.token == token).first() is None

    def test_session_resolves_to_its_owner(self, client: TestClient, db: Session):
        user1 = create_user(db, email="user1@example.com")
        create_user(db, email="user2@example.com")
        session1 = create_session(db, user1)

        response = client.get("/auth/me", headers={"Authorization": f"Bearer {session1.token}"})

        assert response.json()["email"] == "user1@example.com"

    def test_login_cookie_is_httponly(self, client: TestClient, db: Session):
        create_user(db, email="cookie@example.com", password="password123")

        response = client.post(
            "/auth/login", json={"email": "cookie@example.com", "password": "password123"}
        )

        set_cookie = response.headers["set-cookie"].lower()
        assert "httponly" in set_cookie
        assert "samesite=lax" in set_cookie


@pytest.mark.security
class TestAccessControl:
    """Users only ever see and change their own data."""

    def test_cannot_read_other_users_recipes(
        self, auth_client: TestClient, other_user: User, db: Session
    ):
        scan = create_scan(db, other_user, recipes=[sample_recipe()])

        assert auth_client.get(f"/scans/{scan.id}/recipes").status_code == 403
        assert auth_client.get(f"/scans/{scan.id}/recipes/1").status_code == 403

    def test_cannot_edit_other_users_pool(
        self, auth_client: TestClient, other_user: User, db: Session
    ):
        scan = create_scan(db, other_user)

        response = auth_client.put(
            f"/scans/{scan.id}/ingredients",
            json={"ingredients": [{"name": "Eggs", "quantity": 2, "unit": "pcs"}]},
        )

        assert response.status_code == 403
        db.refresh(scan)
        assert scan.ingredients[0]["name"] == "Chicken Breast"

    def test_cannot_delete_other_users_scan(
        self, auth_client: TestClient, other_user: User, db: Session
    ):
        scan = create_scan(db, other_user)

        assert auth_client.delete(f"/scans/{scan.id}").status_code == 403

    def test_cannot_delete_other_users_meal(
        self, auth_client: TestClient, other_user: User, db: Session
    ):
        meal = create_meal_consumed(db, other_user)

        assert auth_client.delete(f"/tracker/meals/{meal.id}").status_code == 403

    def test_cannot_log_other_users_favorite(
        self, auth_client: TestClient, other_user: User, db: Session
    ):
        scan = create_scan(db, other_user, recipes=[sample_recipe()])
        favorite = create_favorite(db, other_user, scan)

        response = auth_client.post("/tracker/meals", json={"recipe_id": favorite.recipe_id})

        assert response.status_code == 404

    def test_other_users_meals_not_in_daily(
        self, auth_client: TestClient, other_user: User, db: Session
    ):
        create_meal_consumed(db, other_user, calories=900)

        assert auth_client.get("/tracker/daily").json()["consumed"] == 0


@pytest.mark.security
class TestPasswordSecurity:
    def test_password_not_stored_plaintext(self, db: Session):
        user = create_user(db, password="mysecretpassword")

        assert user.password_hash != "mysecretpassword"
        assert user.password_hash.startswith("$2b$")

    def test_password_not_returned(self, auth_client: TestClient):
        body = auth_client.get("/auth/me").json()

        assert "password_hash" not in body
        assert "password" not in body
