"""Authentication routes: registration, login, logout, token refresh."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.api.schemas import LoginRequest, RegisterRequest
from app.config import settings
from app.database import get_db
from app.models.user import User
from app.services.auth import get_auth_provider
from app.services.auth.dependencies import get_current_user
from app.services.auth.local_provider import get_request_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def serialize_user(user: User) -> dict:
    return {
        "id": str(user.id),
        "email": user.email,
        "name": user.name,
        "gender": user.gender,
        "height_cm": user.height_cm,
        "weight_kg": user.weight_kg,
        "birth_date": user.birth_date.isoformat() if user.birth_date else None,
        "activity_level": user.activity_level,
        "fitness_goal": user.fitness_goal,
        "target_weight_kg": user.target_weight_kg,
        "target_weeks": user.target_weeks,
        "cuisine_preferences": user.cuisine_preferences or [],
        "taste_preferences": user.taste_preferences or [],
        "daily_calorie_goal": user.daily_calorie_goal,
        "current_streak": user.current_streak or 0,
    }


def _session_response(user: User, token: str, status_code: int = 200) -> JSONResponse:
    """Token in the body for mobile clients, HttpOnly cookie for browsers."""
    response = JSONResponse(
        status_code=status_code,
        content={"token": token, "user": serialize_user(user)},
    )
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    return response


@router.post("/register")
async def register(
    request: Request,
    payload: RegisterRequest,
    db: Session = Depends(get_db),
):
    """Create an account and start a session."""
    auth_provider = get_auth_provider()
    try:
        user = await auth_provider.create_user(
            db, payload.email, payload.password, name=payload.name
        )
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))

    token = await auth_provider.create_session(db, user, request)
    return _session_response(user, token, status_code=201)


@router.post("/login")
async def login(
    request: Request,
    payload: LoginRequest,
    db: Session = Depends(get_db),
):
    """Exchange email and password for a session token."""
    auth_provider = get_auth_provider()
    user = await auth_provider.authenticate(db, payload.email, payload.password)

    if not user:
        logger.warning("Failed login attempt")
        raise HTTPException(status_code=401, detail="Invalid email or password")

    token = await auth_provider.create_session(db, user, request)
    return _session_response(user, token)


@router.post("/logout")
async def logout(request: Request, db: Session = Depends(get_db)):
    """Revoke the current session and clear the cookie."""
    auth_provider = get_auth_provider()

    token = get_request_token(request)
    if token:
        await auth_provider.revoke_session(db, token)

    response = JSONResponse(content={"success": True})
    response.delete_cookie(settings.session_cookie_name)
    return response


@router.post("/refresh")
async def refresh(request: Request, db: Session = Depends(get_db)):
    """Rotate the session token."""
    token = get_request_token(request)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    auth_provider = get_auth_provider()
    new_token = await auth_provider.refresh_session(db, token, request)
    if not new_token:
        raise HTTPException(status_code=401, detail="Session expired")

    user = await auth_provider.get_user_from_token(db, new_token)
    return _session_response(user, new_token)


@router.get("/me")
async def me(user: User = Depends(get_current_user)):
    return serialize_user(user)
