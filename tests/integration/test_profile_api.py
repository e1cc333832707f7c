"""Integration tests for the profile API."""
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.models import User
from tests.factories import create_scan


ONBOARDING = {
    "name": "Test User",
    "gender": "female",
    "height_cm": 165,
    "weight_kg": 70,
    "birth_date": "1990-04-02",
    "activity_level": "lightly_active",
    "fitness_goal": "lose_weight",
    "target_weight_kg": 65,
    "target_weeks": 10,
    "cuisine_preferences": ["Italian", "Mexican"],
    "taste_preferences": ["spicy"],
}


class TestProfile:
    def test_get_profile_includes_usage(self, auth_client: TestClient, db: Session, test_user: User):
        create_scan(db, test_user)

        response = auth_client.get("/profile")

        assert response.status_code == 200
        body = response.json()
        assert body["email"] == test_user.email
        assert body["usage"]["scans_this_month"] == 1

    def test_onboarding_sets_goal(self, auth_client: TestClient):
        response = auth_client.put("/profile", json=ONBOARDING)

        assert response.status_code == 200
        body = response.json()
        assert body["birth_date"] == "1990-04-02"
        assert body["cuisine_preferences"] == ["Italian", "Mexican"]
        assert body["daily_calorie_goal"] >= 1200

    def test_partial_update_keeps_other_fields(self, auth_client: TestClient):
        auth_client.put("/profile", json=ONBOARDING)

        response = auth_client.put("/profile", json={"weight_kg": 68})

        body = response.json()
        assert body["weight_kg"] == 68
        assert body["gender"] == "female"

    def test_invalid_values_rejected(self, auth_client: TestClient):
        for payload in (
            {"height_cm": 50},
            {"gender": "robot"},
            {"activity_level": "couch"},
            {"fitness_goal": "fly"},
            {"name": "R2D2"},
            {"birth_date": "2999-01-01"},
            {"cuisine_preferences": ["x" * 60]},
        ):
            assert auth_client.put("/profile", json=payload).status_code == 422, payload

    def test_requires_auth(self, client: TestClient):
        assert client.get("/profile").status_code == 401
