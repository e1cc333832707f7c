"""Calorie and water tracker endpoints."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.schemas import LogMealRequest, WaterUpdate
from app.database import get_db
from app.models.meal_consumed import MealConsumed
from app.models.user import User
from app.services.auth.dependencies import get_current_user
from app.services.favorite_service import favorite_service
from app.services.scan_service import scan_service
from app.services.tracker_service import tracker_service

router = APIRouter(prefix="/tracker", tags=["tracker"])


def serialize_meal(meal: MealConsumed) -> dict:
    return {
        "id": meal.id,
        "recipe_id": meal.recipe_id,
        "recipe_name": meal.recipe_name,
        "calories": meal.calories,
        "protein": meal.protein,
        "carbs": meal.carbs,
        "fat": meal.fat,
        "servings": meal.servings,
        "created_at": meal.created_at.isoformat() if meal.created_at else None,
    }


def _resolve_recipe(db: Session, user: User, payload: LogMealRequest) -> dict:
    """Recipe dict from one of the user's scans, or from their favorites."""
    if payload.scan_id is not None:
        scan = scan_service.get_scan(db, payload.scan_id)
        if not scan:
            raise HTTPException(status_code=404, detail="Scan not found")
        if scan.user_id != user.id:
            raise HTTPException(status_code=403, detail="Access denied")
        recipe = scan_service.find_recipe(scan, payload.recipe_id)
    else:
        favorite = favorite_service.get_favorite(db, user.id, payload.recipe_id)
        recipe = favorite.recipe if favorite else None

    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@router.post("/meals", status_code=201)
async def log_meal(
    payload: LogMealRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Log servings of a recipe as eaten now."""
    recipe = _resolve_recipe(db, user, payload)
    meal = tracker_service.log_meal(db, user.id, recipe, servings=payload.servings)
    return serialize_meal(meal)


@router.delete("/meals/{meal_id}")
async def delete_meal(
    meal_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    meal = tracker_service.get_meal(db, meal_id)
    if not meal:
        raise HTTPException(status_code=404, detail="Meal not found")
    if meal.user_id != user.id:
        raise HTTPException(status_code=403, detail="Access denied")

    tracker_service.delete_meal(db, meal_id)
    return {"success": True}


@router.get("/daily")
async def daily_summary(
    day: Optional[date] = Query(None, alias="date"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Calories eaten against the goal, macro totals, meals and water for a day."""
    summary = tracker_service.get_daily_summary(db, user, day or date.today())
    summary["meals"] = [serialize_meal(m) for m in summary["meals"]]
    return summary


@router.get("/week")
async def week_history(
    end: Optional[date] = Query(None),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return {"days": tracker_service.get_week_history(db, user, end or date.today())}


@router.get("/water")
async def get_water(
    day: Optional[date] = Query(None, alias="date"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return tracker_service.get_water(db, user.id, day or date.today())


@router.post("/water")
async def adjust_water(
    payload: WaterUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Add or remove glasses of water; the count never drops below zero."""
    return tracker_service.adjust_water(
        db, user.id, payload.day or date.today(), payload.delta
    )
