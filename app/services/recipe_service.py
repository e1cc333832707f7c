"""
Recipe generation from a scanned ingredient pool.

Flow: render the pool -> one recipe-model call -> for every candidate,
aggregate macros, score pool utilization, classify -> rank by match score.
All nutrition numbers are computed here; the model's own claims about
calories, tags or timing are never used.
"""

import logging
from typing import Optional, Sequence

from app.services.ai_service import ClaudeService, ConfigError
from app.services.macro_aggregator import aggregate_macros
from app.services.recipe_classifier import classify_recipe
from app.services.recipe_types import Recipe, RecipeIngredient, ScannedIngredient
from app.services.utilization_scorer import score_utilization

logger = logging.getLogger(__name__)

# Cosmetic placeholders, assigned by position in the model's response.
FOOD_IMAGES = [
    "https://images.unsplash.com/photo-1546069901-ba9599a7e63c?w=600&h=400&fit=crop",
    "https://images.unsplash.com/photo-1567620905732-2d1ec7ab7445?w=600&h=400&fit=crop",
    "https://images.unsplash.com/photo-1565299624946-b28f40a0ae38?w=600&h=400&fit=crop",
    "https://images.unsplash.com/photo-1512621776951-a57141f2eefd?w=600&h=400&fit=crop",
    "https://images.unsplash.com/photo-1484723091739-30a097e8f929?w=600&h=400&fit=crop",
    "https://images.unsplash.com/photo-1473093295043-cdd812d0e601?w=600&h=400&fit=crop",
    "https://images.unsplash.com/photo-1532550907401-a500c9a57435?w=600&h=400&fit=crop",
    "https://images.unsplash.com/photo-1603133872878-684f208fb84b?w=600&h=400&fit=crop",
    "https://images.unsplash.com/photo-1585937421612-70a008356fbe?w=600&h=400&fit=crop",
    "https://images.unsplash.com/photo-1467003909585-2f8a72700288?w=600&h=400&fit=crop",
]


def _format_quantity(quantity: float) -> str:
    """Exact decimal text: 400.0 -> "400", 1234567.5 -> "1234567.5"."""
    if float(quantity).is_integer():
        return str(int(quantity))
    return repr(float(quantity))


def render_ingredient_list(pool: Sequence[ScannedIngredient]) -> str:
    """'400g Chicken Breast, 300g Rice' for the generation prompt."""
    return ", ".join(
        f"{_format_quantity(item.quantity)}{item.unit} {item.name}" for item in pool
    )


def placeholder_image(index: int) -> str:
    return FOOD_IMAGES[index % len(FOOD_IMAGES)]


def build_recipe(candidate: dict, index: int, pool: Sequence[ScannedIngredient]) -> Recipe:
    """
    Turn one validated model candidate into a fully scored Recipe.

    `candidate` is a CandidateRecipeSchema dump; its fields are already
    coerced, so only defaults that depend on position are filled here.
    """
    ingredients = tuple(
        RecipeIngredient(name=i["name"], quantity=i["quantity"], unit=i["unit"])
        for i in candidate["ingredients"]
    )

    macros = aggregate_macros(ingredients, pool)
    utilization = score_utilization(ingredients, pool)
    classification = classify_recipe(macros)

    return Recipe(
        id=str(index + 1),
        name=candidate["name"] or f"Recipe {index + 1}",
        description=candidate["description"],
        ingredients=ingredients,
        steps=tuple(candidate["steps"]),
        macros=macros,
        prep_time=candidate["prep_time"],
        cook_time=candidate["cook_time"],
        servings=candidate["servings"],
        health_score=candidate["health_score"],
        match_score=utilization.match_score,
        ingredients_used=utilization.ingredients_used,
        total_ingredients=len(pool),
        meal_timing=classification.meal_timing,
        tags=classification.tags,
        image_url=placeholder_image(index),
    )


def rank_recipes(recipes: Sequence[Recipe]) -> list[Recipe]:
    """Highest match score first; equal scores keep their original order."""
    return sorted(recipes, key=lambda r: r.match_score, reverse=True)


class RecipeService:
    """Generates ranked recipes for a scanned ingredient pool."""

    def __init__(self, claude_service: Optional[ClaudeService] = None):
        self.claude_service = claude_service or ClaudeService()

    async def generate(self, pool: Sequence[ScannedIngredient]) -> list[Recipe]:
        """
        Generate, score and rank recipes for `pool`.

        Raises:
            ConfigError: empty pool (the model is not called)
            UpstreamError: model unreachable, timed out, or refused
            ParseError: model reply was not usable recipe JSON
        """
        recipes, _usage = await self.generate_with_usage(pool)
        return recipes

    async def generate_with_usage(
        self, pool: Sequence[ScannedIngredient]
    ) -> tuple[list[Recipe], dict]:
        """Same as generate(), plus the model name and token usage of the call."""
        if not pool:
            raise ConfigError("No ingredients supplied for recipe generation")

        pool = tuple(pool)
        result = await self.claude_service.generate_recipe_candidates(
            render_ingredient_list(pool)
        )

        recipes = [
            build_recipe(candidate, index, pool)
            for index, candidate in enumerate(result["recipes"])
        ]
        ranked = rank_recipes(recipes)

        logger.info(
            "Generated %d recipes for %d ingredients (best match %s)",
            len(ranked),
            len(pool),
            ranked[0].match_score if ranked else "n/a",
        )

        usage = {"model": result.get("model"), **result.get("usage_stats", {})}
        return ranked, usage
