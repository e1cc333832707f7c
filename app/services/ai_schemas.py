"""
Pydantic models for validating structured JSON responses from Claude AI.

Each schema corresponds to one AI method's expected response format.
Used by _call_with_schema_retry() in ai_service.py for validation.

Model output is loosely typed, so the field validators here coerce every
value once ("200g" -> 200.0, missing healthScore -> 5, ...). Nothing
downstream re-checks types.
"""

import math
import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.services.macro_aggregator import round_half_up
from app.services.recipe_types import normalize_unit

_LEADING_NUMBER = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")

DEFAULT_HEALTH_SCORE = 5
DEFAULT_STEPS = ["Combine ingredients", "Mix well", "Serve"]


def parse_number(value: Any) -> Optional[float]:
    """Lenient number parse: numbers pass through, strings use their leading number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        found = _LEADING_NUMBER.match(value)
        if not found:
            return None
        number = float(found.group(1))
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _non_negative(value: Any) -> float:
    number = parse_number(value)
    return number if number is not None and number > 0 else 0.0


class _LenientModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# --- Ingredient Scan (analyze_ingredient_image) ---


class MacrosPer100gSchema(_LenientModel):
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0

    @field_validator("calories", "protein", "carbs", "fat", "fiber", mode="before")
    @classmethod
    def _coerce_macro(cls, value):
        return _non_negative(value)


class ScannedIngredientSchema(_LenientModel):
    name: str = "Unknown"
    quantity: float = 100.0
    unit: str = "g"
    macros_per_100g: MacrosPer100gSchema = Field(
        default_factory=MacrosPer100gSchema, alias="macrosPer100g"
    )

    @field_validator("name", mode="before")
    @classmethod
    def _clean_name(cls, value):
        name = re.sub(r"[<>]", "", str(value or "").strip())[:100]
        return name or "Unknown"

    @field_validator("quantity", mode="before")
    @classmethod
    def _positive_quantity(cls, value):
        number = parse_number(value)
        return number if number is not None and number > 0 else 100.0

    @field_validator("unit", mode="before")
    @classmethod
    def _normalize_unit(cls, value):
        return normalize_unit(value if isinstance(value, str) else None)

    @field_validator("macros_per_100g", mode="before")
    @classmethod
    def _macros_object(cls, value):
        return value if isinstance(value, dict) else {}


class IngredientScanSchema(_LenientModel):
    ingredients: list[ScannedIngredientSchema]


# --- Recipe Generation (generate_recipe_candidates) ---


class CandidateIngredientSchema(_LenientModel):
    name: str
    quantity: float = 0.0
    unit: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value):
        return str(value).strip() if value is not None else ""

    @field_validator("quantity", mode="before")
    @classmethod
    def _coerce_quantity(cls, value):
        return _non_negative(value)

    @field_validator("unit", mode="before")
    @classmethod
    def _coerce_unit(cls, value):
        return str(value).strip() if value is not None else ""


class CandidateRecipeSchema(_LenientModel):
    name: Optional[str] = None
    description: str = ""
    ingredients: list[CandidateIngredientSchema] = []
    steps: list[str] = Field(default_factory=lambda: list(DEFAULT_STEPS))
    prep_time: int = Field(default=10, alias="prepTime")
    cook_time: int = Field(default=5, alias="cookTime")
    servings: int = 1
    health_score: int = Field(default=DEFAULT_HEALTH_SCORE, alias="healthScore")

    @field_validator("name", mode="before")
    @classmethod
    def _blank_name_is_missing(cls, value):
        if value is None:
            return None
        name = str(value).strip()
        return name or None

    @field_validator("description", mode="before")
    @classmethod
    def _description_text(cls, value):
        return str(value).strip() if value is not None else ""

    @field_validator("ingredients", mode="before")
    @classmethod
    def _drop_unusable_ingredients(cls, value):
        # Nameless lines would substring-match every scanned item
        if not isinstance(value, list):
            return []
        return [
            item
            for item in value
            if isinstance(item, dict) and str(item.get("name") or "").strip()
        ]

    @field_validator("steps", mode="before")
    @classmethod
    def _steps_list(cls, value):
        if not isinstance(value, list):
            return list(DEFAULT_STEPS)
        steps = [str(step).strip() for step in value if str(step).strip()]
        return steps or list(DEFAULT_STEPS)

    @field_validator("prep_time", mode="before")
    @classmethod
    def _prep_time(cls, value):
        number = parse_number(value)
        return int(number) if number and number > 0 else 10

    @field_validator("cook_time", mode="before")
    @classmethod
    def _cook_time(cls, value):
        number = parse_number(value)
        return int(number) if number and number > 0 else 5

    @field_validator("servings", mode="before")
    @classmethod
    def _servings(cls, value):
        number = parse_number(value)
        return max(1, int(number)) if number and number > 0 else 1

    @field_validator("health_score", mode="before")
    @classmethod
    def _clamp_health_score(cls, value):
        number = parse_number(value)
        if not number:
            return DEFAULT_HEALTH_SCORE
        return round_half_up(min(10.0, max(1.0, number)))


class RecipeGenerationSchema(_LenientModel):
    recipes: list[CandidateRecipeSchema]


# --- Extra Ingredient Suggestions (suggest_extra_ingredients) ---


class IngredientSuggestionSchema(_LenientModel):
    name: str = ""
    quantity: float = 1.0
    unit: str = "g"

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value):
        return str(value).strip() if value is not None else ""

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity(cls, value):
        number = parse_number(value)
        return number if number and number > 0 else 1.0

    @field_validator("unit", mode="before")
    @classmethod
    def _unit(cls, value):
        return normalize_unit(value if isinstance(value, str) else None)


class IngredientSuggestionsSchema(_LenientModel):
    suggestions: list[IngredientSuggestionSchema] = []
