"""How completely a recipe uses the scanned ingredient pool."""

from typing import NamedTuple, Sequence

from app.services.ingredient_matcher import first_match
from app.services.macro_aggregator import round_half_up
from app.services.recipe_types import RecipeIngredient, ScannedIngredient, safe_quantity

COUNT_WEIGHT = 0.5
QUANTITY_WEIGHT = 0.5


class UtilizationScore(NamedTuple):
    match_score: int
    ingredients_used: int


def score_utilization(
    recipe_ingredients: Sequence[RecipeIngredient],
    pool: Sequence[ScannedIngredient],
) -> UtilizationScore:
    """
    Score 0-100: half for how many pool items are used, half for how much
    of the available quantity is used.

    A recipe can never claim more of an item than the pool holds, so each
    matched item contributes min(recipe quantity, pool quantity).
    An empty pool, or one whose quantities sum to zero, scores 0.
    """
    if not pool:
        return UtilizationScore(match_score=0, ingredients_used=0)

    used_count = 0
    used_quantity = 0.0
    available_quantity = 0.0

    for scanned in pool:
        available = safe_quantity(scanned.quantity)
        available_quantity += available

        found = first_match(scanned.name, recipe_ingredients, key=lambda ri: ri.name)
        if found is not None:
            used_count += 1
            used_quantity += min(safe_quantity(found.quantity), available)

    if available_quantity <= 0:
        return UtilizationScore(match_score=0, ingredients_used=used_count)

    count_ratio = used_count / len(pool)
    quantity_ratio = used_quantity / available_quantity

    score = round_half_up(100 * (COUNT_WEIGHT * count_ratio + QUANTITY_WEIGHT * quantity_ratio))
    return UtilizationScore(
        match_score=max(0, min(100, score)),
        ingredients_used=used_count,
    )
