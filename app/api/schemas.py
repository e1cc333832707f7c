"""Request bodies for the JSON API."""

import re
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from app.services.calorie_goal import ACTIVITY_MULTIPLIERS, FITNESS_GOALS, GENDERS
from app.services.recipe_types import VALID_UNITS, normalize_unit

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
NAME_RE = re.compile(r"^[a-zA-Z\s'-]+$")
INGREDIENT_NAME_DISALLOWED = re.compile(r"[^a-zA-Z0-9\s\-,'()]")

MAX_PREFERENCES = 20
MAX_PREFERENCE_LENGTH = 50
MAX_INGREDIENT_QUANTITY = 10000
ACCEPTED_UNITS = set(VALID_UNITS) | {"piece", "pieces"}


def sanitize_ingredient_name(name: str) -> str:
    """Keep letters, digits and common food punctuation, at most 100 chars."""
    return INGREDIENT_NAME_DISALLOWED.sub("", name.strip())[:100]


class RegisterRequest(BaseModel):
    email: str
    password: str = Field(min_length=6, max_length=128)
    name: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _valid_email(cls, value: str) -> str:
        value = value.strip().lower()
        if not EMAIL_RE.match(value):
            raise ValueError("Invalid email address")
        return value


class LoginRequest(BaseModel):
    email: str
    password: str


def _check_preferences(value: Optional[List[str]]) -> Optional[List[str]]:
    if value is None:
        return value
    if len(value) > MAX_PREFERENCES:
        raise ValueError(f"At most {MAX_PREFERENCES} preferences allowed")
    for item in value:
        if not item or len(item) >= MAX_PREFERENCE_LENGTH:
            raise ValueError(f"Preferences must be 1-{MAX_PREFERENCE_LENGTH - 1} characters")
    return value


class ProfileUpdate(BaseModel):
    """Partial profile update; only fields present in the body are changed."""

    name: Optional[str] = None
    gender: Optional[str] = None
    height_cm: Optional[float] = Field(None, ge=100, le=250)
    weight_kg: Optional[float] = Field(None, ge=20, le=300)
    birth_date: Optional[date] = None
    activity_level: Optional[str] = None
    fitness_goal: Optional[str] = None
    target_weight_kg: Optional[float] = Field(None, ge=20, le=300)
    target_weeks: Optional[int] = Field(None, ge=1, le=520)
    cuisine_preferences: Optional[List[str]] = None
    taste_preferences: Optional[List[str]] = None

    @field_validator("name")
    @classmethod
    def _valid_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        stripped = value.strip()
        if not NAME_RE.match(value) or not 2 <= len(stripped) <= 50:
            raise ValueError("Name must be 2-50 characters and contain only letters")
        return stripped

    @field_validator("gender")
    @classmethod
    def _valid_gender(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in GENDERS:
            raise ValueError("Invalid gender selection")
        return value

    @field_validator("activity_level")
    @classmethod
    def _valid_activity(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in ACTIVITY_MULTIPLIERS:
            raise ValueError("Invalid activity level")
        return value

    @field_validator("fitness_goal")
    @classmethod
    def _valid_goal(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in FITNESS_GOALS:
            raise ValueError("Invalid fitness goal")
        return value

    @field_validator("birth_date")
    @classmethod
    def _not_in_future(cls, value: Optional[date]) -> Optional[date]:
        if value is not None and value > date.today():
            raise ValueError("Birth date cannot be in the future")
        return value

    @field_validator("cuisine_preferences", "taste_preferences")
    @classmethod
    def _valid_preferences(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return _check_preferences(value)


class IngredientInput(BaseModel):
    """One user-edited pool entry."""

    id: Optional[str] = None
    name: str
    quantity: float = Field(gt=0, le=MAX_INGREDIENT_QUANTITY)
    unit: str
    macros_per_100g: Optional[dict] = Field(None, alias="macrosPer100g")

    model_config = {"populate_by_name": True}

    @field_validator("name")
    @classmethod
    def _sanitize_name(cls, value: str) -> str:
        cleaned = sanitize_ingredient_name(value)
        if len(cleaned) < 2:
            raise ValueError("Ingredient name must be at least 2 characters")
        return cleaned

    @field_validator("unit")
    @classmethod
    def _known_unit(cls, value: str) -> str:
        if value.strip().lower() not in ACCEPTED_UNITS:
            raise ValueError("Invalid unit of measurement")
        return normalize_unit(value)


class IngredientsUpdate(BaseModel):
    ingredients: List[IngredientInput] = Field(min_length=1, max_length=50)


class SuggestionRequest(BaseModel):
    ingredients: List[str] = Field(min_length=1, max_length=50)


class LogMealRequest(BaseModel):
    """Log a recipe from a scan (scan_id) or from the user's favorites."""

    recipe_id: str
    scan_id: Optional[int] = None
    servings: float = Field(1, gt=0, le=20)


class WaterUpdate(BaseModel):
    delta: int = Field(ge=-20, le=20)
    day: Optional[date] = Field(None, alias="date")

    model_config = {"populate_by_name": True}


class FavoriteRequest(BaseModel):
    scan_id: int
    recipe_id: str


class DiscoverMealRequest(BaseModel):
    """Log servings of a catalogue recipe, looked up by name."""

    name: str = Field(min_length=1, max_length=100)
    servings: float = Field(1, gt=0, le=20)
