"""Business logic for ingredient scans and the daily scanning streak."""

from datetime import date, datetime, timedelta, timezone
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy.orm import Session

from app.models.scan import Scan
from app.models.user import User
from app.services.recipe_types import Recipe, ScannedIngredient

RECENT_SCANS_LIMIT = 10


def next_streak(current_streak: int, last_scan_date: Optional[date], today: date) -> int:
    """
    Streak after scanning on `today`.

    Same day keeps the streak, the day after the last scan extends it,
    anything else starts over at 1.
    """
    if last_scan_date == today:
        return max(current_streak or 0, 1)
    if last_scan_date == today - timedelta(days=1):
        return (current_streak or 0) + 1
    return 1


class ScanService:
    """Service for scan-related operations."""

    @staticmethod
    def create_scan(
        db: Session,
        user: User,
        ingredients: Sequence[ScannedIngredient],
        image_path: Optional[str] = None,
        ai_raw_response: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Scan:
        """
        Store a scanned ingredient pool and bump the user's streak.

        Args:
            db: Database session
            user: Owner of the scan
            ingredients: Ingredients recognised in the photo
            image_path: Path to the uploaded photo
            ai_raw_response: Raw vision model reply, kept for debugging
            today: Streak date (defaults to today)

        Returns:
            Created Scan object
        """
        today = today or date.today()
        scan = Scan(
            user_id=user.id,
            image_path=image_path,
            ingredients=[item.to_dict() for item in ingredients],
            ai_raw_response=ai_raw_response,
            created_at=datetime.now(timezone.utc),
        )
        db.add(scan)

        user.current_streak = next_streak(user.current_streak, user.last_scan_date, today)
        user.last_scan_date = today

        db.commit()
        db.refresh(scan)
        return scan

    @staticmethod
    def get_scan(db: Session, scan_id: int) -> Optional[Scan]:
        """Get a scan by ID. Callers check ownership."""
        return db.query(Scan).filter(Scan.id == scan_id).first()

    @staticmethod
    def get_recent_scans(
        db: Session, user_id: UUID, limit: int = RECENT_SCANS_LIMIT
    ) -> List[Scan]:
        """Most recent scans first."""
        return (
            db.query(Scan)
            .filter(Scan.user_id == user_id)
            .order_by(Scan.created_at.desc(), Scan.id.desc())
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_pool(scan: Scan) -> List[ScannedIngredient]:
        """The scan's stored ingredients as ScannedIngredient values."""
        return [ScannedIngredient.from_dict(item) for item in scan.ingredients or []]

    @staticmethod
    def update_ingredients(
        db: Session, scan_id: int, ingredients: Sequence[ScannedIngredient]
    ) -> Optional[Scan]:
        """
        Replace the ingredient pool with the user's edited list.

        Previously generated recipes were scored against the old pool, so
        they are cleared.

        Returns:
            Updated Scan object or None if not found
        """
        scan = db.query(Scan).filter(Scan.id == scan_id).first()
        if not scan:
            return None

        scan.ingredients = [item.to_dict() for item in ingredients]
        scan.recipes = None
        db.commit()
        db.refresh(scan)
        return scan

    @staticmethod
    def store_recipes(
        db: Session, scan_id: int, recipes: Sequence[Recipe]
    ) -> Optional[Scan]:
        """Store ranked recipes on the scan, replacing any earlier batch."""
        scan = db.query(Scan).filter(Scan.id == scan_id).first()
        if not scan:
            return None

        scan.recipes = [recipe.to_dict() for recipe in recipes]
        db.commit()
        db.refresh(scan)
        return scan

    @staticmethod
    def find_recipe(scan: Scan, recipe_id: str) -> Optional[dict]:
        """Stored recipe dict with the given id, if any."""
        for recipe in scan.recipes or []:
            if recipe.get("id") == recipe_id:
                return recipe
        return None

    @staticmethod
    def delete_scan(db: Session, scan_id: int) -> bool:
        """
        Delete a scan.

        Returns:
            True if deleted, False if not found
        """
        scan = db.query(Scan).filter(Scan.id == scan_id).first()
        if not scan:
            return False

        db.delete(scan)
        db.commit()
        return True


# Singleton instance
scan_service = ScanService()
