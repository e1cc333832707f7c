"""Integration tests for the favorites API."""
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.models import User
from tests.factories import create_favorite, create_scan, sample_recipe


class TestFavorites:
    def test_add_and_list(self, auth_client: TestClient, db: Session, test_user: User):
        scan = create_scan(db, test_user, recipes=[sample_recipe("1")])

        response = auth_client.post("/favorites", json={"scan_id": scan.id, "recipe_id": "1"})

        assert response.status_code == 201
        key = f"{scan.id}-1"
        assert response.json()["recipe_id"] == key
        assert response.json()["recipe"]["name"] == "Chicken Rice Bowl"

        listed = auth_client.get("/favorites").json()
        assert [f["recipe_id"] for f in listed] == [key]

    def test_add_twice_keeps_one(self, auth_client: TestClient, db: Session, test_user: User):
        scan = create_scan(db, test_user, recipes=[sample_recipe("1")])

        auth_client.post("/favorites", json={"scan_id": scan.id, "recipe_id": "1"})
        auth_client.post("/favorites", json={"scan_id": scan.id, "recipe_id": "1"})

        assert len(auth_client.get("/favorites").json()) == 1

    def test_favorite_survives_regeneration(self, auth_client: TestClient, db: Session, test_user: User):
        scan = create_scan(db, test_user, recipes=[sample_recipe("1")])
        auth_client.post("/favorites", json={"scan_id": scan.id, "recipe_id": "1"})

        scan.recipes = [sample_recipe("1", name="Something Else")]
        db.flush()

        assert auth_client.get("/favorites").json()[0]["recipe"]["name"] == "Chicken Rice Bowl"

    def test_missing_scan(self, auth_client: TestClient):
        response = auth_client.post("/favorites", json={"scan_id": 99999, "recipe_id": "1"})

        assert response.status_code == 404

    def test_missing_recipe(self, auth_client: TestClient, db: Session, test_user: User):
        scan = create_scan(db, test_user)

        response = auth_client.post("/favorites", json={"scan_id": scan.id, "recipe_id": "1"})

        assert response.status_code == 404

    def test_other_users_scan(self, auth_client: TestClient, db: Session, other_user: User):
        scan = create_scan(db, other_user, recipes=[sample_recipe("1")])

        response = auth_client.post("/favorites", json={"scan_id": scan.id, "recipe_id": "1"})

        assert response.status_code == 403

    def test_remove(self, auth_client: TestClient, db: Session, test_user: User):
        scan = create_scan(db, test_user, recipes=[sample_recipe("1")])
        favorite = create_favorite(db, test_user, scan)

        assert auth_client.delete(f"/favorites/{favorite.recipe_id}").status_code == 200
        assert auth_client.get("/favorites").json() == []
        assert auth_client.delete(f"/favorites/{favorite.recipe_id}").status_code == 404
