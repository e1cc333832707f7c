"""Calorie and water tracking: logged meals, daily totals, weekly history."""

from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from app.models.meal_consumed import MealConsumed
from app.models.user import User
from app.models.water_intake import WaterIntake
from app.services.macro_aggregator import round_half_up

DEFAULT_CALORIE_GOAL = 2000
WATER_GOAL_GLASSES = 8
WEEK_DAYS = 7


def _day_bounds(day: date) -> tuple[datetime, datetime]:
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    return start, start + timedelta(days=1)


def _scaled(value, servings: float) -> int:
    return round_half_up(max(float(value or 0), 0.0) * servings)


class TrackerService:
    """Service for the daily tracker."""

    @staticmethod
    def log_meal(
        db: Session,
        user_id: UUID,
        recipe: dict,
        servings: float = 1,
        eaten_at: Optional[datetime] = None,
    ) -> MealConsumed:
        """
        Record that the user ate `servings` of a recipe.

        Args:
            db: Database session
            user_id: User ID
            recipe: Recipe dict (as stored on a scan or favorite)
            servings: Portions eaten; macros are multiplied by this
            eaten_at: When it was eaten (defaults to now)

        Returns:
            Created MealConsumed object
        """
        macros = recipe.get("macros") or {}
        meal = MealConsumed(
            user_id=user_id,
            recipe_id=str(recipe.get("id")) if recipe.get("id") is not None else None,
            recipe_name=recipe.get("name") or "Meal",
            calories=_scaled(macros.get("calories"), servings),
            protein=_scaled(macros.get("protein"), servings),
            carbs=_scaled(macros.get("carbs"), servings),
            fat=_scaled(macros.get("fat"), servings),
            servings=servings,
            created_at=eaten_at or datetime.now(timezone.utc),
        )
        db.add(meal)
        db.commit()
        db.refresh(meal)
        return meal

    @staticmethod
    def get_meal(db: Session, meal_id: int) -> Optional[MealConsumed]:
        return db.query(MealConsumed).filter(MealConsumed.id == meal_id).first()

    @staticmethod
    def delete_meal(db: Session, meal_id: int) -> bool:
        """
        Delete a logged meal.

        Returns:
            True if deleted, False if not found
        """
        meal = db.query(MealConsumed).filter(MealConsumed.id == meal_id).first()
        if not meal:
            return False
        db.delete(meal)
        db.commit()
        return True

    @staticmethod
    def get_meals_for_day(db: Session, user_id: UUID, day: date) -> List[MealConsumed]:
        start, end = _day_bounds(day)
        return (
            db.query(MealConsumed)
            .filter(
                MealConsumed.user_id == user_id,
                MealConsumed.created_at >= start,
                MealConsumed.created_at < end,
            )
            .order_by(MealConsumed.created_at.asc(), MealConsumed.id.asc())
            .all()
        )

    @staticmethod
    def get_daily_summary(db: Session, user: User, day: date) -> dict:
        """
        Totals for one day against the user's calorie goal.

        Progress is consumed / goal, capped at 1.0. Remaining can go
        negative when the user eats past the goal.
        """
        meals = TrackerService.get_meals_for_day(db, user.id, day)
        goal = user.daily_calorie_goal or DEFAULT_CALORIE_GOAL

        totals = {
            "calories": sum(m.calories for m in meals),
            "protein": sum(m.protein for m in meals),
            "carbs": sum(m.carbs for m in meals),
            "fat": sum(m.fat for m in meals),
        }

        return {
            "date": day,
            "goal": goal,
            "consumed": totals["calories"],
            "remaining": goal - totals["calories"],
            "progress": min(totals["calories"] / goal, 1.0) if goal > 0 else 0.0,
            "totals": totals,
            "meals": meals,
            "water": TrackerService.get_water(db, user.id, day),
        }

    @staticmethod
    def get_week_history(db: Session, user: User, end_day: date) -> List[dict]:
        """Calories per day for the seven days ending on `end_day`, oldest first."""
        start_day = end_day - timedelta(days=WEEK_DAYS - 1)
        start, _ = _day_bounds(start_day)
        _, end = _day_bounds(end_day)

        meals = (
            db.query(MealConsumed)
            .filter(
                MealConsumed.user_id == user.id,
                MealConsumed.created_at >= start,
                MealConsumed.created_at < end,
            )
            .all()
        )

        per_day = {start_day + timedelta(days=i): 0 for i in range(WEEK_DAYS)}
        for meal in meals:
            created = meal.created_at
            if created.tzinfo is not None:
                created = created.astimezone(timezone.utc)
            if created.date() in per_day:
                per_day[created.date()] += meal.calories

        goal = user.daily_calorie_goal or DEFAULT_CALORIE_GOAL
        return [
            {"date": day, "calories": calories, "goal": goal}
            for day, calories in per_day.items()
        ]

    @staticmethod
    def get_water(db: Session, user_id: UUID, day: date) -> dict:
        record = (
            db.query(WaterIntake)
            .filter(WaterIntake.user_id == user_id, WaterIntake.date == day)
            .first()
        )
        return {
            "date": day,
            "glasses": record.glasses if record else 0,
            "goal": WATER_GOAL_GLASSES,
        }

    @staticmethod
    def adjust_water(db: Session, user_id: UUID, day: date, delta: int) -> dict:
        """Add (or remove, for negative delta) glasses; never below zero."""
        record = (
            db.query(WaterIntake)
            .filter(WaterIntake.user_id == user_id, WaterIntake.date == day)
            .first()
        )
        if not record:
            record = WaterIntake(user_id=user_id, date=day, glasses=0)
            db.add(record)

        record.glasses = max((record.glasses or 0) + delta, 0)
        db.commit()
        db.refresh(record)

        return {"date": day, "glasses": record.glasses, "goal": WATER_GOAL_GLASSES}


# Singleton instance
tracker_service = TrackerService()
