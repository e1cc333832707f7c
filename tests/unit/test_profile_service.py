"""Unit tests for ProfileService and the derived calorie goal."""
from datetime import date
from unittest.mock import patch

from sqlalchemy.orm import Session

from app.services.profile_service import goal_for_user, profile_service
from tests.factories import create_user


FULL_PROFILE = {
    "gender": "male",
    "height_cm": 180,
    "weight_kg": 80,
    "birth_date": date(1996, 1, 1),
    "activity_level": "moderately_active",
    "fitness_goal": "maintain_weight",
}


class TestGoalForUser:
    def test_missing_inputs(self, db: Session):
        user = create_user(db, gender="male", weight_kg=80)

        assert goal_for_user(user) is None

    def test_complete_profile(self, db: Session):
        user = create_user(db, **FULL_PROFILE)

        with patch("app.services.profile_service.compute_daily_calorie_goal", return_value=2700) as compute:
            assert goal_for_user(user) == 2700

        assert compute.call_args.kwargs["activity_level"] == "moderately_active"


class TestUpdateProfile:
    def test_sets_fields_and_goal(self, db: Session):
        user = create_user(db)

        updated = profile_service.update_profile(
            db, user, {**FULL_PROFILE, "cuisine_preferences": ["Italian"], "is_admin": True}
        )

        assert updated.height_cm == 180
        assert updated.cuisine_preferences == ["Italian"]
        assert updated.daily_calorie_goal is not None
        assert updated.daily_calorie_goal >= 1200
        assert not hasattr(updated, "is_admin")

    def test_partial_update_keeps_goal_when_incomplete(self, db: Session):
        user = create_user(db, daily_calorie_goal=1900)

        updated = profile_service.update_profile(db, user, {"name": "Sam"})

        assert updated.name == "Sam"
        assert updated.daily_calorie_goal == 1900

    def test_goal_recomputed_on_change(self, db: Session):
        user = create_user(db, **FULL_PROFILE)
        profile_service.update_profile(db, user, {})
        maintain = user.daily_calorie_goal

        profile_service.update_profile(db, user, {"fitness_goal": "gym"})

        assert user.daily_calorie_goal > maintain
