"""Favorite recipe endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.schemas import FavoriteRequest
from app.database import get_db
from app.models.favorite import Favorite
from app.models.user import User
from app.services.auth.dependencies import get_current_user
from app.services.favorite_service import favorite_service
from app.services.scan_service import scan_service

router = APIRouter(prefix="/favorites", tags=["favorites"])


def serialize_favorite(favorite: Favorite) -> dict:
    return {
        "recipe_id": favorite.recipe_id,
        "scan_id": favorite.scan_id,
        "recipe": favorite.recipe,
        "created_at": favorite.created_at.isoformat() if favorite.created_at else None,
    }


@router.get("")
async def list_favorites(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return [serialize_favorite(f) for f in favorite_service.list_favorites(db, user.id)]


@router.post("", status_code=201)
async def add_favorite(
    payload: FavoriteRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Save a recipe from one of the user's scans."""
    scan = scan_service.get_scan(db, payload.scan_id)
    if not scan:
        raise HTTPException(status_code=404, detail="Scan not found")
    if scan.user_id != user.id:
        raise HTTPException(status_code=403, detail="Access denied")

    recipe = scan_service.find_recipe(scan, payload.recipe_id)
    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")

    favorite = favorite_service.add_favorite(db, user.id, scan, recipe)
    return serialize_favorite(favorite)


@router.delete("/{recipe_id}")
async def remove_favorite(
    recipe_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    if not favorite_service.remove_favorite(db, user.id, recipe_id):
        raise HTTPException(status_code=404, detail="Favorite not found")
    return {"success": True}
