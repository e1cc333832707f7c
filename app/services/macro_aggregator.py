"""Absolute macros for a recipe, scaled from matched ingredients' per-100g data."""

from typing import Sequence

from app.services.ingredient_matcher import match_ingredient
from app.services.recipe_types import (
    Macros,
    RecipeIngredient,
    ScannedIngredient,
    safe_quantity,
)


def aggregate_macros(
    recipe_ingredients: Sequence[RecipeIngredient],
    pool: Sequence[ScannedIngredient],
) -> Macros:
    """
    Sum calories/protein/carbs/fat over the recipe's matched ingredients.

    Each recipe quantity is read as grams (quantity / 100 of the per-100g
    profile). Ingredients that match nothing in the pool, or whose match has
    no nutrition data, contribute zero. Fields are rounded independently.
    """
    calories = protein = carbs = fat = 0.0

    for ingredient in recipe_ingredients:
        scanned = match_ingredient(ingredient.name, pool)
        if scanned is None or scanned.macros_per_100g is None:
            continue

        per_100g = scanned.macros_per_100g
        factor = safe_quantity(ingredient.quantity) / 100
        calories += safe_quantity(per_100g.calories) * factor
        protein += safe_quantity(per_100g.protein) * factor
        carbs += safe_quantity(per_100g.carbs) * factor
        fat += safe_quantity(per_100g.fat) * factor

    return Macros(
        calories=round_half_up(calories),
        protein=round_half_up(protein),
        carbs=round_half_up(carbs),
        fat=round_half_up(fat),
    )


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (Python's round() is banker's)."""
    return int(value + 0.5)
