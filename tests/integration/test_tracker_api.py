"""Integration tests for the calorie and water tracker API."""
from datetime import date, datetime, timedelta, timezone

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.models import MealConsumed, User
from tests.factories import (
    create_favorite,
    create_meal_consumed,
    create_scan,
    sample_recipe,
)


class TestLogMeal:
    def test_log_from_scan(self, auth_client: TestClient, db: Session, test_user: User):
        scan = create_scan(db, test_user, recipes=[sample_recipe("1")])

        response = auth_client.post(
            "/tracker/meals", json={"scan_id": scan.id, "recipe_id": "1", "servings": 2}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["recipe_name"] == "Chicken Rice Bowl"
        assert body["calories"] == 1050
        assert body["protein"] == 132

    def test_log_from_favorite(self, auth_client: TestClient, db: Session, test_user: User):
        scan = create_scan(db, test_user, recipes=[sample_recipe("1")])
        favorite = create_favorite(db, test_user, scan)

        response = auth_client.post("/tracker/meals", json={"recipe_id": favorite.recipe_id})

        assert response.status_code == 201
        assert response.json()["calories"] == 525
        assert response.json()["recipe_id"] == favorite.recipe_id

    def test_unknown_recipe(self, auth_client: TestClient, db: Session, test_user: User):
        scan = create_scan(db, test_user, recipes=[sample_recipe("1")])

        response = auth_client.post("/tracker/meals", json={"scan_id": scan.id, "recipe_id": "7"})

        assert response.status_code == 404

    def test_other_users_scan(self, auth_client: TestClient, db: Session, other_user: User):
        scan = create_scan(db, other_user, recipes=[sample_recipe("1")])

        response = auth_client.post("/tracker/meals", json={"scan_id": scan.id, "recipe_id": "1"})

        assert response.status_code == 403

    def test_servings_must_be_positive(self, auth_client: TestClient, db: Session, test_user: User):
        scan = create_scan(db, test_user, recipes=[sample_recipe("1")])

        response = auth_client.post(
            "/tracker/meals", json={"scan_id": scan.id, "recipe_id": "1", "servings": 0}
        )

        assert response.status_code == 422


class TestDeleteMeal:
    def test_delete_own_meal(self, auth_client: TestClient, db: Session, test_user: User):
        meal = create_meal_consumed(db, test_user)

        assert auth_client.delete(f"/tracker/meals/{meal.id}").status_code == 200
        assert db.query(MealConsumed).filter(MealConsumed.id == meal.id).first() is None

    def test_delete_other_users_meal(self, auth_client: TestClient, db: Session, other_user: User):
        meal = create_meal_consumed(db, other_user)

        assert auth_client.delete(f"/tracker/meals/{meal.id}").status_code == 403

    def test_delete_missing_meal(self, auth_client: TestClient):
        assert auth_client.delete("/tracker/meals/99999").status_code == 404


class TestDailyAndWeekly:
    def test_daily_summary(self, auth_client: TestClient, db: Session, test_user: User):
        day = date(2026, 6, 15)
        test_user.daily_calorie_goal = 2000
        create_meal_consumed(
            db, test_user, calories=800,
            created_at=datetime(2026, 6, 15, 13, tzinfo=timezone.utc),
        )

        response = auth_client.get("/tracker/daily", params={"date": day.isoformat()})

        assert response.status_code == 200
        body = response.json()
        assert body["date"] == "2026-06-15"
        assert body["consumed"] == 800
        assert body["remaining"] == 1200
        assert body["progress"] == 0.4
        assert len(body["meals"]) == 1
        assert body["water"]["goal"] == 8

    def test_week(self, auth_client: TestClient, db: Session, test_user: User):
        end = date(2026, 6, 15)
        create_meal_consumed(
            db, test_user, calories=600,
            created_at=datetime(2026, 6, 10, 9, tzinfo=timezone.utc),
        )

        response = auth_client.get("/tracker/week", params={"end": end.isoformat()})

        days = response.json()["days"]
        assert len(days) == 7
        assert days[0]["date"] == (end - timedelta(days=6)).isoformat()
        assert days[1]["calories"] == 600

    def test_invalid_date(self, auth_client: TestClient):
        assert auth_client.get("/tracker/daily", params={"date": "yesterday"}).status_code == 422


class TestWater:
    def test_adjust_water(self, auth_client: TestClient):
        day = "2026-06-15"

        assert auth_client.post("/tracker/water", json={"delta": 2, "date": day}).json()["glasses"] == 2
        assert auth_client.post("/tracker/water", json={"delta": -5, "date": day}).json()["glasses"] == 0
        assert auth_client.get("/tracker/water", params={"date": day}).json() == {
            "date": day,
            "glasses": 0,
            "goal": 8,
        }

    def test_delta_bounds(self, auth_client: TestClient):
        assert auth_client.post("/tracker/water", json={"delta": 50}).status_code == 422
