"""
Security tests for CSRF origin validation.

Cookie-authenticated writes need a same-origin Origin or Referer header;
bearer-token requests carry no ambient credential and are exempt.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.models import User
from tests.factories import create_scan


@pytest.mark.security
class TestCSRFProtection:
    def test_cross_origin_cookie_write_blocked(
        self, auth_client: TestClient, test_user: User, db: Session
    ):
        scan = create_scan(db, test_user)

        response = auth_client.delete(
            f"/scans/{scan.id}", headers={"origin": "https://evil.example"}
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Origin validation failed"
        assert auth_client.get(f"/scans/{scan.id}").status_code == 200

    def test_cross_site_referer_blocked(self, auth_client: TestClient):
        response = auth_client.post(
            "/tracker/water",
            json={"delta": 1},
            headers={"referer": "https://evil.example/page"},
        )

        assert response.status_code == 403

    def test_missing_origin_and_referer_blocked(self, auth_client: TestClient):
        del auth_client.headers["referer"]

        response = auth_client.post("/tracker/water", json={"delta": 1})

        assert response.status_code == 403

    def test_same_origin_allowed(self, auth_client: TestClient):
        response = auth_client.post(
            "/tracker/water", json={"delta": 1}, headers={"origin": "http://testserver"}
        )

        assert response.status_code == 200

    def test_bearer_requests_exempt(self, bearer_client: TestClient):
        response = bearer_client.post("/tracker/water", json={"delta": 1})

        assert response.status_code == 200

    def test_safe_methods_allowed(self, auth_client: TestClient):
        del auth_client.headers["referer"]

        assert auth_client.get("/tracker/water").status_code == 200

    def test_write_without_session(self, client: TestClient, db: Session, other_user: User):
        scan = create_scan(db, other_user)

        assert client.delete(f"/scans/{scan.id}").status_code == 401
