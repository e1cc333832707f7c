"""Meal timing and dietary tags derived from a recipe's macro split."""

from typing import NamedTuple

from app.services.recipe_types import Macros, MealTiming

PROTEIN_KCAL_PER_G = 4
CARB_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9

BULKING_MIN_CALORIES = 600
CUTTING_MAX_CALORIES = 400


class Classification(NamedTuple):
    meal_timing: MealTiming
    tags: tuple[str, ...]


def macro_split(macros: Macros) -> tuple[float, float, float]:
    """(protein, carb, fat) share of macro calories; total floored at 1 kcal."""
    protein_kcal = macros.protein * PROTEIN_KCAL_PER_G
    carb_kcal = macros.carbs * CARB_KCAL_PER_G
    fat_kcal = macros.fat * FAT_KCAL_PER_G
    total = max(protein_kcal + carb_kcal + fat_kcal, 1)
    return protein_kcal / total, carb_kcal / total, fat_kcal / total


def classify_recipe(macros: Macros) -> Classification:
    protein_pct, carb_pct, fat_pct = macro_split(macros)

    if carb_pct > 0.5:
        timing = MealTiming.PRE_WORKOUT
    elif protein_pct > 0.3:
        timing = MealTiming.POST_WORKOUT
    else:
        timing = MealTiming.BREAKFAST

    tags = []
    if protein_pct > 0.25:
        tags.append("high-protein")
    if carb_pct > 0.5:
        tags.append("high-carb")
    if fat_pct > 0.4:
        tags.append("high-fat")
    if macros.calories > BULKING_MIN_CALORIES:
        tags.append("bulking")
    elif macros.calories < CUTTING_MAX_CALORIES:
        tags.append("cutting")

    return Classification(meal_timing=timing, tags=tuple(tags))
