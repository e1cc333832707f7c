"""Saved recipes."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from app.models.favorite import Favorite
from app.models.scan import Scan


def favorite_key(scan_id: int, recipe_id: str) -> str:
    """Recipe ids restart at "1" for every scan, so favorites key on both."""
    return f"{scan_id}-{recipe_id}"


class FavoriteService:
    """Service for favorite recipes."""

    @staticmethod
    def list_favorites(db: Session, user_id: UUID) -> List[Favorite]:
        return (
            db.query(Favorite)
            .filter(Favorite.user_id == user_id)
            .order_by(Favorite.created_at.desc(), Favorite.id.desc())
            .all()
        )

    @staticmethod
    def get_favorite(db: Session, user_id: UUID, recipe_id: str) -> Optional[Favorite]:
        return (
            db.query(Favorite)
            .filter(Favorite.user_id == user_id, Favorite.recipe_id == recipe_id)
            .first()
        )

    @staticmethod
    def add_favorite(db: Session, user_id: UUID, scan: Scan, recipe: dict) -> Favorite:
        """
        Save a snapshot of a scan's recipe. Saving the same recipe twice
        returns the existing favorite.
        """
        key = favorite_key(scan.id, recipe["id"])
        existing = FavoriteService.get_favorite(db, user_id, key)
        if existing:
            return existing

        favorite = Favorite(
            user_id=user_id,
            recipe_id=key,
            scan_id=scan.id,
            recipe={**recipe, "id": key},
        )
        db.add(favorite)
        db.commit()
        db.refresh(favorite)
        return favorite

    @staticmethod
    def remove_favorite(db: Session, user_id: UUID, recipe_id: str) -> bool:
        """
        Remove a favorite.

        Returns:
            True if deleted, False if not found
        """
        favorite = FavoriteService.get_favorite(db, user_id, recipe_id)
        if not favorite:
            return False
        db.delete(favorite)
        db.commit()
        return True


# Singleton instance
favorite_service = FavoriteService()
