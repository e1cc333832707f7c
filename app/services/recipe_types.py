"""
Typed values shared by the recipe pipeline.

Everything here is immutable. LLM and vision output is validated into these
types once (see ai_schemas.py) and never mutated afterwards.
"""

import enum
import math
from dataclasses import dataclass, field, asdict
from typing import Optional


VALID_UNITS = ("g", "kg", "ml", "l", "pcs", "tbsp", "tsp", "cup", "oz", "lb")

_UNIT_ALIASES = {
    "ml": ("ml", "milliliter", "milliliters", "millilitres"),
    "l": ("l", "liter", "liters", "litres"),
    "g": ("g", "gram", "grams"),
    "kg": ("kg", "kilogram", "kilograms"),
    "pcs": ("pcs", "pieces", "piece", "stuks", "stuk"),
    "tbsp": ("tbsp", "tablespoon", "tablespoons"),
    "tsp": ("tsp", "teaspoon", "teaspoons"),
    "cup": ("cup", "cups"),
    "oz": ("oz", "ounce", "ounces"),
    "lb": ("lb", "lbs", "pound", "pounds"),
}


def normalize_unit(raw: Optional[str]) -> str:
    """Map a free-text unit onto the canonical unit set (blank -> 'g')."""
    unit = (raw or "g").strip().lower()
    for canonical, aliases in _UNIT_ALIASES.items():
        if unit in aliases:
            return canonical
    return unit[:10] or "g"


def safe_quantity(value) -> float:
    """Quantity usable in nutrition math: negative, NaN and inf count as 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number) or number < 0:
        return 0.0
    return number


class MealTiming(str, enum.Enum):
    """Coarse meal timing derived from the macro split."""
    PRE_WORKOUT = "pre-workout"
    POST_WORKOUT = "post-workout"
    BREAKFAST = "breakfast"


@dataclass(frozen=True)
class MacrosPer100g:
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0


@dataclass(frozen=True)
class Macros:
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fat: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ScannedIngredient:
    """An item detected in a scan, with the package quantity the user has."""

    name: str
    quantity: float
    unit: str = "g"
    macros_per_100g: Optional[MacrosPer100g] = None
    id: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
        }
        if self.macros_per_100g is not None:
            data["macrosPer100g"] = asdict(self.macros_per_100g)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ScannedIngredient":
        macros = data.get("macrosPer100g", data.get("macros_per_100g"))
        return cls(
            id=data.get("id"),
            name=str(data.get("name") or ""),
            quantity=safe_quantity(data.get("quantity")),
            unit=normalize_unit(data.get("unit")),
            macros_per_100g=MacrosPer100g(
                **{k: safe_quantity(macros.get(k)) for k in ("calories", "protein", "carbs", "fat", "fiber")}
            )
            if isinstance(macros, dict)
            else None,
        )


@dataclass(frozen=True)
class RecipeIngredient:
    """An ingredient line as written by the recipe model."""

    name: str
    quantity: float
    unit: str = ""

    def to_dict(self) -> dict:
        return {"name": self.name, "quantity": self.quantity, "unit": self.unit}


@dataclass(frozen=True)
class Recipe:
    id: str
    name: str
    description: str
    ingredients: tuple[RecipeIngredient, ...]
    steps: tuple[str, ...]
    macros: Macros
    prep_time: int
    cook_time: int
    servings: int
    health_score: int
    match_score: int
    ingredients_used: int
    total_ingredients: int
    meal_timing: MealTiming
    tags: tuple[str, ...] = field(default_factory=tuple)
    image_url: Optional[str] = None

    def to_dict(self) -> dict:
        """camelCase shape stored on the scan and returned to clients."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "ingredients": [i.to_dict() for i in self.ingredients],
            "steps": list(self.steps),
            "macros": self.macros.to_dict(),
            "prepTime": self.prep_time,
            "cookTime": self.cook_time,
            "servings": self.servings,
            "healthScore": self.health_score,
            "matchScore": self.match_score,
            "ingredientsUsed": self.ingredients_used,
            "totalIngredients": self.total_ingredients,
            "mealTiming": self.meal_timing.value,
            "tags": list(self.tags),
            "imageUrl": self.image_url,
        }


@dataclass(frozen=True)
class DiscoverRecipe:
    """A catalogue recipe with fixed per-serving macros."""

    name: str
    description: str
    calories: int
    protein: int
    carbs: int
    fat: int
    minutes: int
    tags: tuple[str, ...]
    image_url: str

    @property
    def macros(self) -> Macros:
        return Macros(calories=self.calories, protein=self.protein, carbs=self.carbs, fat=self.fat)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "macros": self.macros.to_dict(),
            "time": self.minutes,
            "tags": list(self.tags),
            "imageUrl": self.image_url,
        }
