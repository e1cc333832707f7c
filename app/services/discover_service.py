"""Browse the curated recipe catalogue by meal type, goal and cuisine."""

from typing import Iterable, List, Optional, Sequence

from app.services.discover_catalog import CATALOG, CUISINES, TAG_LABELS
from app.services.recipe_types import DiscoverRecipe

# First active goal in this list decides the ordering
GOAL_SORT_KEYS = (
    ("high-protein", lambda r: -r.protein),
    ("cutting", lambda r: r.calories),
    ("bulking", lambda r: -r.calories),
    ("pre-workout", lambda r: -r.carbs),
    ("quick", lambda r: r.minutes),
)


class DiscoverService:
    """Service for filtering the Discover catalogue."""

    @staticmethod
    def unknown_tags(tags: Iterable[str]) -> List[str]:
        return sorted(set(tags) - set(TAG_LABELS))

    @staticmethod
    def filter_recipes(
        tags: Iterable[str],
        recipes: Sequence[DiscoverRecipe] = CATALOG,
    ) -> List[DiscoverRecipe]:
        """
        Recipes matching the active filters.

        Cuisine tags are alternatives (any one must match). Every other tag
        is required. No active filters returns nothing rather than the whole
        catalogue.

        Args:
            tags: Active filter tags
            recipes: Catalogue to filter (defaults to the built-in one)

        Returns:
            Matching recipes, ordered by the first active goal that has an
            ordering, otherwise in catalogue order
        """
        active = set(tags)
        if not active:
            return []

        cuisines = active & set(CUISINES)
        required = active - cuisines

        results = []
        for recipe in recipes:
            recipe_tags = set(recipe.tags)
            if not required <= recipe_tags:
                continue
            if cuisines and not cuisines & recipe_tags:
                continue
            results.append(recipe)

        for goal, sort_key in GOAL_SORT_KEYS:
            if goal in active:
                results.sort(key=sort_key)
                break

        return results

    @staticmethod
    def get_recipe(name: str, recipes: Sequence[DiscoverRecipe] = CATALOG) -> Optional[DiscoverRecipe]:
        for recipe in recipes:
            if recipe.name == name:
                return recipe
        return None

    @staticmethod
    def as_tracker_recipe(recipe: DiscoverRecipe) -> dict:
        """Recipe dict accepted by TrackerService.log_meal; the name doubles as the id."""
        return {"id": recipe.name, "name": recipe.name, "macros": recipe.macros.to_dict()}


# Singleton instance
discover_service = DiscoverService()
