"""Discover endpoints: browse the curated catalogue and log its recipes."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.schemas import DiscoverMealRequest
from app.api.tracker import serialize_meal
from app.database import get_db
from app.models.user import User
from app.services.auth.dependencies import get_current_user
from app.services.discover_catalog import CUISINES, GOALS, MEAL_TYPES
from app.services.discover_service import discover_service
from app.services.tracker_service import tracker_service

router = APIRouter(prefix="/discover", tags=["discover"])


def _options(labels: dict) -> list:
    return [{"id": key, "label": label} for key, label in labels.items()]


@router.get("/filters")
async def list_filters(user: User = Depends(get_current_user)):
    return {
        "meal_types": _options(MEAL_TYPES),
        "goals": _options(GOALS),
        "cuisines": _options(CUISINES),
    }


@router.get("")
async def browse(
    tags: List[str] = Query(default=[]),
    user: User = Depends(get_current_user),
):
    """Catalogue recipes for the given filter tags (any cuisine, every other tag)."""
    unknown = discover_service.unknown_tags(tags)
    if unknown:
        raise HTTPException(status_code=422, detail=f"Unknown filter: {', '.join(unknown)}")

    recipes = discover_service.filter_recipes(tags)
    return {"count": len(recipes), "recipes": [r.to_dict() for r in recipes]}


@router.post("/meals", status_code=201)
async def log_catalogue_meal(
    payload: DiscoverMealRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    recipe = discover_service.get_recipe(payload.name)
    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")

    meal = tracker_service.log_meal(
        db, user.id, discover_service.as_tracker_recipe(recipe), servings=payload.servings
    )
    return serialize_meal(meal)
