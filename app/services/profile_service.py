"""Onboarding/profile updates and the derived daily calorie goal."""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.models.user import User
from app.services.calorie_goal import compute_daily_calorie_goal

logger = logging.getLogger(__name__)

PROFILE_FIELDS = (
    "name",
    "gender",
    "height_cm",
    "weight_kg",
    "birth_date",
    "activity_level",
    "fitness_goal",
    "target_weight_kg",
    "target_weeks",
    "cuisine_preferences",
    "taste_preferences",
)

GOAL_INPUTS = ("gender", "height_cm", "weight_kg", "birth_date", "activity_level", "fitness_goal")


def goal_for_user(user: User) -> Optional[int]:
    """Calorie goal for the user's current profile, or None if inputs are missing."""
    if any(getattr(user, field) is None for field in GOAL_INPUTS):
        return None
    return compute_daily_calorie_goal(
        gender=user.gender,
        weight_kg=user.weight_kg,
        height_cm=user.height_cm,
        birth_date=user.birth_date,
        activity_level=user.activity_level,
        fitness_goal=user.fitness_goal,
        target_weight_kg=user.target_weight_kg,
        target_weeks=user.target_weeks,
    )


class ProfileService:
    """Service for profile operations."""

    @staticmethod
    def update_profile(db: Session, user: User, updates: dict) -> User:
        """
        Apply profile field updates and recompute the calorie goal.

        Unknown keys are ignored. The goal is only replaced when every
        input it needs is present.
        """
        for field in PROFILE_FIELDS:
            if field in updates:
                setattr(user, field, updates[field])

        goal = goal_for_user(user)
        if goal is not None:
            user.daily_calorie_goal = goal
            logger.info("Daily calorie goal for user %s set to %d", user.id, goal)

        db.commit()
        db.refresh(user)
        return user


# Singleton instance
profile_service = ProfileService()
