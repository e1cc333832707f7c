"""
Factory functions for creating test data.

These factories create model instances with sensible defaults.
Use db.flush() to get IDs without committing (for transaction rollback).
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, List
import secrets

import bcrypt
from sqlalchemy.orm import Session

from app.models import (
    User,
    Scan,
    MealConsumed,
    Favorite,
    Session as UserSession,
)


# =============================================================================
# User Factory
# =============================================================================


def create_user(
    db: Session,
    email: Optional[str] = None,
    password: str = "testpassword123",
    **overrides,
) -> User:
    """
    Create a test user with hashed password.

    Args:
        db: Database session
        email: User email (auto-generated if not provided)
        password: Plain text password to hash
        **overrides: Additional fields to override

    Returns:
        Created User object
    """
    if email is None:
        email = f"testuser_{secrets.token_hex(4)}@example.com"

    password_hash = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode(
        "utf-8"
    )

    defaults = {
        "email": email.lower(),
        "password_hash": password_hash,
        "current_streak": 0,
    }
    defaults.update(overrides)

    user = User(**defaults)
    db.add(user)
    db.flush()
    return user


# =============================================================================
# Session Factory
# =============================================================================


def create_session(
    db: Session,
    user: User,
    expires_in: timedelta = timedelta(days=7),
    **overrides,
) -> UserSession:
    """Create a user session (negative expires_in gives an expired one)."""
    defaults = {
        "user_id": user.id,
        "token": secrets.token_urlsafe(32),
        "expires_at": datetime.now(timezone.utc) + expires_in,
        "user_agent": "pytest-test-client",
        "ip_address": "127.0.0.1",
    }
    defaults.update(overrides)

    session = UserSession(**defaults)
    db.add(session)
    db.flush()
    return session


# =============================================================================
# Scan Factory
# =============================================================================


def default_pool() -> List[dict]:
    return [
        {
            "id": "ingredient-0",
            "name": "Chicken Breast",
            "quantity": 400.0,
            "unit": "g",
            "macrosPer100g": {"calories": 165.0, "protein": 31.0, "carbs": 0.0, "fat": 3.6, "fiber": 0.0},
        },
        {
            "id": "ingredient-1",
            "name": "Rice",
            "quantity": 300.0,
            "unit": "g",
            "macrosPer100g": {"calories": 130.0, "protein": 2.7, "carbs": 28.0, "fat": 0.3, "fiber": 0.4},
        },
    ]


def sample_recipe(recipe_id: str = "1", **overrides) -> dict:
    """A stored recipe dict, shaped like Recipe.to_dict()."""
    recipe = {
        "id": recipe_id,
        "name": "Chicken Rice Bowl",
        "description": "Simple bowl",
        "ingredients": [
            {"name": "Chicken Breast", "quantity": 200.0, "unit": "g"},
            {"name": "Rice", "quantity": 150.0, "unit": "g"},
        ],
        "steps": ["Cook rice", "Grill chicken", "Serve"],
        "macros": {"calories": 525, "protein": 66, "carbs": 42, "fat": 8},
        "prepTime": 10,
        "cookTime": 20,
        "servings": 2,
        "healthScore": 8,
        "matchScore": 75,
        "ingredientsUsed": 2,
        "totalIngredients": 2,
        "mealTiming": "post-workout",
        "tags": ["high-protein"],
        "imageUrl": None,
    }
    recipe.update(overrides)
    return recipe


def create_scan(
    db: Session,
    user: User,
    ingredients: Optional[List[dict]] = None,
    recipes: Optional[List[dict]] = None,
    **overrides,
) -> Scan:
    """
    Create a scan.

    Args:
        db: Database session
        user: Owner
        ingredients: Stored pool (defaults to chicken + rice)
        recipes: Stored recipes (None = not generated yet)
        **overrides: Additional fields to override

    Returns:
        Created Scan object
    """
    defaults = {
        "user_id": user.id,
        "ingredients": ingredients if ingredients is not None else default_pool(),
        "recipes": recipes,
        "image_path": None,
        "created_at": datetime.now(timezone.utc),
    }
    defaults.update(overrides)

    scan = Scan(**defaults)
    db.add(scan)
    db.flush()
    return scan


# =============================================================================
# Tracker Factories
# =============================================================================


def create_meal_consumed(
    db: Session,
    user: User,
    calories: int = 500,
    created_at: Optional[datetime] = None,
    **overrides,
) -> MealConsumed:
    """Create a logged meal."""
    defaults = {
        "user_id": user.id,
        "recipe_id": "1",
        "recipe_name": "Test Meal",
        "calories": calories,
        "protein": 30,
        "carbs": 50,
        "fat": 15,
        "servings": 1,
        "created_at": created_at or datetime.now(timezone.utc),
    }
    defaults.update(overrides)

    meal = MealConsumed(**defaults)
    db.add(meal)
    db.flush()
    return meal


def create_favorite(
    db: Session,
    user: User,
    scan: Scan,
    recipe: Optional[dict] = None,
    **overrides,
) -> Favorite:
    """Create a favorite recipe snapshot keyed like FavoriteService does."""
    recipe = recipe or sample_recipe()
    key = f"{scan.id}-{recipe['id']}"
    defaults = {
        "user_id": user.id,
        "recipe_id": key,
        "scan_id": scan.id,
        "recipe": {**recipe, "id": key},
    }
    defaults.update(overrides)

    favorite = Favorite(**defaults)
    db.add(favorite)
    db.flush()
    return favorite
