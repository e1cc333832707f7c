"""
Unit tests for ScanService.

Covers the scanning streak and scan storage.
"""
from datetime import date, datetime, timedelta, timezone

import pytest
from sqlalchemy.orm import Session

from app.services.recipe_types import ScannedIngredient
from app.services.scan_service import next_streak, scan_service
from tests.factories import create_scan, create_user, default_pool, sample_recipe


TODAY = date(2026, 6, 15)


class TestNextStreak:
    @pytest.mark.parametrize(
        "current,last,expected",
        [
            (0, None, 1),
            (4, TODAY - timedelta(days=1), 5),
            (4, TODAY, 4),
            (0, TODAY, 1),
            (9, TODAY - timedelta(days=2), 1),
            (3, TODAY + timedelta(days=1), 1),
        ],
    )
    def test_streak(self, current, last, expected):
        assert next_streak(current, last, TODAY) == expected


class TestCreateScan:
    def test_stores_pool_and_extends_streak(self, db: Session, chicken_rice_pool):
        user = create_user(db, current_streak=2, last_scan_date=TODAY - timedelta(days=1))

        scan = scan_service.create_scan(
            db, user, chicken_rice_pool, image_path="uploads/scans/a.jpg", today=TODAY
        )

        assert scan.id is not None
        assert [item["name"] for item in scan.ingredients] == ["Chicken Breast", "Rice"]
        assert scan.recipes is None
        assert user.current_streak == 3
        assert user.last_scan_date == TODAY

    def test_second_scan_same_day_keeps_streak(self, db: Session, chicken_rice_pool):
        user = create_user(db)

        scan_service.create_scan(db, user, chicken_rice_pool, today=TODAY)
        scan_service.create_scan(db, user, chicken_rice_pool, today=TODAY)

        assert user.current_streak == 1


class TestRecentScans:
    def test_newest_first_with_limit(self, db: Session):
        user = create_user(db)
        now = datetime.now(timezone.utc)
        old = create_scan(db, user, created_at=now - timedelta(days=2))
        new = create_scan(db, user, created_at=now)

        scans = scan_service.get_recent_scans(db, user.id)

        assert [s.id for s in scans] == [new.id, old.id]
        assert len(scan_service.get_recent_scans(db, user.id, limit=1)) == 1

    def test_only_own_scans(self, db: Session):
        user = create_user(db)
        create_scan(db, create_user(db))

        assert scan_service.get_recent_scans(db, user.id) == []


class TestIngredientsAndRecipes:
    def test_get_pool(self, db: Session):
        scan = create_scan(db, create_user(db))

        pool = scan_service.get_pool(scan)

        assert isinstance(pool[0], ScannedIngredient)
        assert pool[0].quantity == 400.0
        assert pool[1].macros_per_100g.carbs == 28.0

    def test_update_ingredients_clears_recipes(self, db: Session):
        scan = create_scan(db, create_user(db), recipes=[sample_recipe()])
        edited = [ScannedIngredient.from_dict(default_pool()[0])]

        updated = scan_service.update_ingredients(db, scan.id, edited)

        assert len(updated.ingredients) == 1
        assert updated.recipes is None

    def test_update_missing_scan(self, db: Session):
        assert scan_service.update_ingredients(db, 999999, []) is None

    def test_find_recipe(self, db: Session):
        scan = create_scan(db, create_user(db), recipes=[sample_recipe("1"), sample_recipe("2")])

        assert scan_service.find_recipe(scan, "2")["id"] == "2"
        assert scan_service.find_recipe(scan, "3") is None

    def test_find_recipe_before_generation(self, db: Session):
        scan = create_scan(db, create_user(db))

        assert scan_service.find_recipe(scan, "1") is None

    def test_delete_scan(self, db: Session):
        scan = create_scan(db, create_user(db))

        assert scan_service.delete_scan(db, scan.id) is True
        assert scan_service.get_scan(db, scan.id) is None
        assert scan_service.delete_scan(db, scan.id) is False
