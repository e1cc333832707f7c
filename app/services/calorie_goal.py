"""Daily calorie goal from body stats, activity level and fitness goal."""

import math
from datetime import date
from typing import Optional

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "lightly_active": 1.375,
    "moderately_active": 1.55,
    "very_active": 1.725,
    "extremely_active": 1.9,
}

ACTIVITY_LEVEL_LABELS = {
    "sedentary": "Sedentary",
    "lightly_active": "Lightly Active",
    "moderately_active": "Moderately Active",
    "very_active": "Very Active",
    "extremely_active": "Extremely Active",
}

FITNESS_GOALS = ("gym", "lose_weight", "gain_weight", "maintain_weight")
GENDERS = ("male", "female", "other")

GYM_MIN_MULTIPLIER = 1.55
GYM_HEAVY_WEIGHT_KG = 75
KCAL_PER_KG_BODY_WEIGHT = 7700
MIN_DAILY_CALORIES = 1200


def calculate_age(birth_date: date, today: Optional[date] = None) -> int:
    """Whole years, one less if this year's birthday is still ahead."""
    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def calculate_bmr(gender: str, weight_kg: float, height_cm: float, age: int) -> float:
    """Revised Harris-Benedict BMR. 'other' uses the male equation."""
    if gender == "female":
        return 447.593 + 9.247 * weight_kg + 3.098 * height_cm - 4.330 * age
    return 88.362 + 13.397 * weight_kg + 4.799 * height_cm - 5.677 * age


def compute_daily_calorie_goal(
    gender: str,
    weight_kg: float,
    height_cm: float,
    birth_date: date,
    activity_level: str,
    fitness_goal: str,
    target_weight_kg: Optional[float] = None,
    target_weeks: Optional[int] = None,
    today: Optional[date] = None,
) -> int:
    """
    Daily calorie target, never below 1200 kcal.

    Gym-goers are treated as at least moderately active and get a flat
    surplus. Lose/gain goals spread the weight delta (7700 kcal per kg) over
    the target weeks; without both targets there is no adjustment.
    """
    age = calculate_age(birth_date, today)
    bmr = calculate_bmr(gender, weight_kg, height_cm, age)

    multiplier = ACTIVITY_MULTIPLIERS[activity_level]
    if fitness_goal == "gym" and multiplier < GYM_MIN_MULTIPLIER:
        multiplier = GYM_MIN_MULTIPLIER
    tdee = bmr * multiplier

    adjustment = 0.0
    if fitness_goal == "gym":
        adjustment = 400 if weight_kg >= GYM_HEAVY_WEIGHT_KG else 300
    elif fitness_goal in ("lose_weight", "gain_weight"):
        if target_weight_kg and target_weeks and target_weeks > 0:
            daily_change = abs(
                (target_weight_kg - weight_kg) * KCAL_PER_KG_BODY_WEIGHT / (target_weeks * 7)
            )
            adjustment = -daily_change if fitness_goal == "lose_weight" else daily_change

    return max(MIN_DAILY_CALORIES, math.floor(tdee + adjustment + 0.5))
