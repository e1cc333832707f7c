"""Unit tests for the Discover catalogue filters."""
import pytest

from app.services.discover_catalog import CATALOG, TAG_LABELS
from app.services.discover_service import discover_service
from app.services.recipe_types import DiscoverRecipe


def make_recipe(name, tags, calories=400, protein=20, carbs=40, fat=10, minutes=20):
    return DiscoverRecipe(
        name=name,
        description="",
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        minutes=minutes,
        tags=tuple(tags),
        image_url="https://example.com/x.jpg",
    )


@pytest.fixture
def catalogue():
    return (
        make_recipe("Carbonara", ["italian", "dinner"], calories=700, protein=30, minutes=25),
        make_recipe("Ramen", ["asian", "dinner", "spicy"], calories=550, protein=35, minutes=30),
        make_recipe("Tacos", ["mexican", "lunch", "quick"], calories=450, protein=28, minutes=10),
        make_recipe("Omelette", ["breakfast", "quick", "high-protein"], calories=300, protein=24, minutes=8),
    )


class TestFilterRecipes:
    def test_no_filters_returns_nothing(self, catalogue):
        assert discover_service.filter_recipes([], catalogue) == []

    def test_cuisines_are_alternatives(self, catalogue):
        names = [r.name for r in discover_service.filter_recipes(["italian", "asian"], catalogue)]
        assert names == ["Carbonara", "Ramen"]

    def test_other_tags_are_all_required(self, catalogue):
        names = [r.name for r in discover_service.filter_recipes(["dinner", "spicy"], catalogue)]
        assert names == ["Ramen"]

    def test_cuisine_and_required_tag_combined(self, catalogue):
        result = discover_service.filter_recipes(["italian", "mexican", "quick"], catalogue)
        assert [r.name for r in result] == ["Tacos"]

    def test_recipe_without_cuisine_excluded_once_cuisine_chosen(self, catalogue):
        result = discover_service.filter_recipes(["italian", "breakfast"], catalogue)
        assert result == []

    def test_quick_sorts_by_time(self, catalogue):
        names = [r.name for r in discover_service.filter_recipes(["quick"], catalogue)]
        assert names == ["Omelette", "Tacos"]

    def test_high_protein_ordering_wins_over_quick(self, catalogue):
        recipes = catalogue + (make_recipe("Steak Bites", ["quick", "high-protein"], protein=40, minutes=14),)
        names = [r.name for r in discover_service.filter_recipes(["quick", "high-protein"], recipes)]
        assert names == ["Steak Bites", "Omelette"]

    @pytest.mark.parametrize(
        "goal,expected",
        [
            ("cutting", ["Light", "Medium", "Heavy"]),
            ("bulking", ["Heavy", "Medium", "Light"]),
        ],
    )
    def test_calorie_goals(self, goal, expected):
        recipes = (
            make_recipe("Medium", [goal], calories=500),
            make_recipe("Heavy", [goal], calories=900),
            make_recipe("Light", [goal], calories=200),
        )
        assert [r.name for r in discover_service.filter_recipes([goal], recipes)] == expected

    def test_pre_workout_sorts_by_carbs_keeping_ties_in_order(self):
        names = [r.name for r in discover_service.filter_recipes(["pre-workout"])]
        assert names == [
            "PB Banana Shake",
            "Overnight Oats",
            "Protein Pancakes",
            "Protein Smoothie",
            "Energy Bites",
        ]


class TestCatalogue:
    def test_every_tag_has_a_label(self):
        for recipe in CATALOG:
            assert set(recipe.tags) <= set(TAG_LABELS), recipe.name

    def test_names_are_unique(self):
        names = [r.name for r in CATALOG]
        assert len(names) == len(set(names))

    def test_unknown_tags(self):
        assert discover_service.unknown_tags(["vegan", "keto", "paleo"]) == ["keto", "paleo"]

    def test_get_recipe(self):
        assert discover_service.get_recipe("Overnight Oats").calories == 380
        assert discover_service.get_recipe("Nope") is None

    def test_as_tracker_recipe(self):
        recipe = discover_service.get_recipe("Overnight Oats")
        data = discover_service.as_tracker_recipe(recipe)
        assert data["id"] == "Overnight Oats"
        assert data["macros"] == {"calories": 380, "protein": 12, "carbs": 62, "fat": 10}
