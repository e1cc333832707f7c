"""Profile and onboarding endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.auth import serialize_user
from app.api.schemas import ProfileUpdate
from app.database import get_db
from app.models.user import User
from app.services.ai_usage_service import AIUsageService
from app.services.auth.dependencies import get_current_user
from app.services.profile_service import profile_service

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("")
async def get_profile(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Profile fields plus free-tier usage."""
    return {
        **serialize_user(user),
        "usage": AIUsageService(db).get_usage_stats(user.id),
    }


@router.put("")
async def update_profile(
    payload: ProfileUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Update profile fields sent in the body.

    The daily calorie goal is recomputed once gender, height, weight, birth
    date, activity level and fitness goal are all known.
    """
    updated = profile_service.update_profile(db, user, payload.model_dump(exclude_unset=True))
    return serialize_user(updated)
