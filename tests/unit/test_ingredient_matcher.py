"""
Unit tests for ingredient name matching.

Covers the three matching rules, first-match ordering and the known
over-matches that are kept as-is.
"""
import pytest

from app.services.ingredient_matcher import match_ingredient, names_match
from app.services.recipe_types import ScannedIngredient


def _pool(*names):
    return tuple(ScannedIngredient(name=n, quantity=100) for n in names)


class TestNamesMatch:
    def test_exact_match_ignores_case_and_whitespace(self):
        assert names_match("  Chicken Breast ", "chicken breast")

    def test_substring_either_direction(self):
        assert names_match("chicken", "Chicken Breast")
        assert names_match("Chicken Breast", "chicken")

    def test_token_overlap(self):
        assert names_match("Basmati Rice", "Jasmine Rice")

    def test_short_tokens_do_not_count(self):
        # "of" and "oz" are below the token length threshold
        assert not names_match("cup of tea", "oz of ham")

    def test_unrelated_names(self):
        assert not names_match("Salmon", "Broccoli")

    @pytest.mark.parametrize(
        "candidate,reference",
        [
            ("egg", "eggplant"),
            ("milk", "buttermilk"),
        ],
    )
    def test_known_over_matches(self, candidate, reference):
        assert names_match(candidate, reference)
        assert names_match(reference, candidate)

    @pytest.mark.parametrize(
        "a,b",
        [
            ("tomato", "Cherry Tomatoes"),
            ("Greek Yogurt", "yogurt"),
            ("olive oil", "Extra Virgin Olive Oil"),
            ("pasta", "rice"),
        ],
    )
    def test_symmetric(self, a, b):
        assert names_match(a, b) == names_match(b, a)

    def test_none_is_treated_as_empty(self):
        # Empty string is a substring of everything
        assert names_match(None, "rice")


class TestMatchIngredient:
    def test_returns_first_matching_pool_entry(self):
        pool = _pool("Brown Rice", "White Rice")
        assert match_ingredient("rice", pool).name == "Brown Rice"

    def test_no_match_returns_none(self):
        assert match_ingredient("salmon", _pool("Rice", "Chicken")) is None

    def test_empty_pool(self):
        assert match_ingredient("rice", ()) is None

    def test_deterministic(self):
        pool = _pool("Chicken Thigh", "Chicken Breast", "Rice")
        results = {match_ingredient("chicken", pool).name for _ in range(10)}
        assert results == {"Chicken Thigh"}
