"""API endpoints for ingredient scans, recipe generation and suggestions."""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from sqlalchemy.orm import Session

from app.api.errors import ai_http_error
from app.api.schemas import IngredientsUpdate, SuggestionRequest
from app.database import get_db
from app.models.scan import Scan
from app.models.user import User
from app.services.ai_service import (
    ClaudeService,
    ConfigError,
    ParseError,
    UpstreamError,
)
from app.services.ai_usage_service import (
    AIUsageService,
    RECIPE_GENERATION_ACTION,
    SCAN_ACTION,
)
from app.services.auth.dependencies import get_current_user
from app.services.file_service import file_service
from app.services.recipe_service import RecipeService
from app.services.recipe_types import ScannedIngredient
from app.services.scan_service import scan_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scans", tags=["scans"])
ingredients_router = APIRouter(prefix="/ingredients", tags=["ingredients"])

# Initialize AI service
claude_service = ClaudeService()

AI_ERRORS = (ConfigError, UpstreamError, ParseError)


def serialize_scan(scan: Scan) -> dict:
    return {
        "id": scan.id,
        "image_url": file_service.get_file_url(scan.image_path),
        "ingredients": scan.ingredients or [],
        "recipes": scan.recipes,
        "created_at": scan.created_at.isoformat() if scan.created_at else None,
    }


def _get_owned_scan(db: Session, scan_id: int, user: User) -> Scan:
    scan = scan_service.get_scan(db, scan_id)
    if not scan:
        raise HTTPException(status_code=404, detail="Scan not found")

    # Verify ownership
    if scan.user_id != user.id:
        raise HTTPException(status_code=403, detail="Access denied")
    return scan


def _require_allowed(db: Session, user: User, action: str):
    allowed, message = AIUsageService(db).check_action_allowed(user.id, action)
    if not allowed:
        logger.warning("User %s refused %s: %s", user.id, action, message)
        raise HTTPException(status_code=429, detail=message)


@router.post("", status_code=201)
async def create_scan(
    image: UploadFile = File(...),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Upload a fridge/pantry photo and detect the ingredients in it.

    Returns: the stored scan with its ingredient pool
    """
    _require_allowed(db, user, SCAN_ACTION)

    try:
        image_path = await file_service.save_scan_image(image)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    usage_service = AIUsageService(db)
    try:
        result = await claude_service.analyze_ingredient_image(image_path)
    except AI_ERRORS as e:
        file_service.delete_file(image_path)
        usage_service.log_usage(
            service_type="ingredient_scan",
            model=claude_service.vision_model,
            user_id=user.id,
            request_type="scan",
            success=False,
            error_message=str(e)[:500],
        )
        raise ai_http_error(e)

    ingredients = [
        ScannedIngredient.from_dict({**item, "id": f"ingredient-{i}"})
        for i, item in enumerate(result["ingredients"])
    ]
    scan = scan_service.create_scan(
        db,
        user,
        ingredients,
        image_path=image_path,
        ai_raw_response=result["raw_response"],
    )

    usage_service.log_usage(
        service_type="ingredient_scan",
        model=result["model"],
        input_tokens=result["usage_stats"]["input_tokens"],
        output_tokens=result["usage_stats"]["output_tokens"],
        user_id=user.id,
        request_id=str(scan.id),
        request_type="scan",
    )

    return serialize_scan(scan)


@router.get("")
async def list_scans(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """The user's ten most recent scans."""
    return [serialize_scan(scan) for scan in scan_service.get_recent_scans(db, user.id)]


@router.get("/{scan_id}")
async def get_scan(
    scan_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return serialize_scan(_get_owned_scan(db, scan_id, user))


@router.delete("/{scan_id}")
async def delete_scan(
    scan_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete a scan and its photo."""
    scan = _get_owned_scan(db, scan_id, user)
    image_path = scan.image_path

    scan_service.delete_scan(db, scan_id)
    file_service.delete_file(image_path)

    return {"success": True}


@router.put("/{scan_id}/ingredients")
async def update_ingredients(
    scan_id: int,
    payload: IngredientsUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Replace the pool with the user's edits. Stored recipes are cleared."""
    _get_owned_scan(db, scan_id, user)

    ingredients = [
        ScannedIngredient.from_dict(
            {
                **item.model_dump(by_alias=True),
                "id": item.id or f"ingredient-{i}",
            }
        )
        for i, item in enumerate(payload.ingredients)
    ]
    scan = scan_service.update_ingredients(db, scan_id, ingredients)
    return serialize_scan(scan)


@router.post("/{scan_id}/recipes")
async def generate_recipes(
    scan_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Generate recipes for the scan's pool, ranked by how much of it they use.

    Macros, match score, meal timing and tags are computed server-side from
    the pool; the batch replaces any earlier recipes on the scan.
    """
    scan = _get_owned_scan(db, scan_id, user)
    _require_allowed(db, user, RECIPE_GENERATION_ACTION)

    pool = scan_service.get_pool(scan)
    usage_service = AIUsageService(db)
    try:
        recipes, usage = await RecipeService(claude_service).generate_with_usage(pool)
    except AI_ERRORS as e:
        if not isinstance(e, ConfigError):
            usage_service.log_usage(
                service_type=RECIPE_GENERATION_ACTION,
                model=claude_service.recipe_model,
                user_id=user.id,
                request_id=str(scan.id),
                request_type="scan",
                success=False,
                error_message=str(e)[:500],
            )
        raise ai_http_error(e)

    usage_service.log_usage(
        service_type=RECIPE_GENERATION_ACTION,
        model=usage.get("model") or claude_service.recipe_model,
        input_tokens=usage.get("input_tokens", 0),
        output_tokens=usage.get("output_tokens", 0),
        user_id=user.id,
        request_id=str(scan.id),
        request_type="scan",
    )

    scan = scan_service.store_recipes(db, scan_id, recipes)
    return {"scan_id": scan.id, "recipes": scan.recipes}


@router.get("/{scan_id}/recipes")
async def list_recipes(
    scan_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    scan = _get_owned_scan(db, scan_id, user)
    return {"scan_id": scan.id, "recipes": scan.recipes or []}


@router.get("/{scan_id}/recipes/{recipe_id}")
async def get_recipe(
    scan_id: int,
    recipe_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    scan = _get_owned_scan(db, scan_id, user)
    recipe = scan_service.find_recipe(scan, recipe_id)
    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@ingredients_router.post("/suggestions")
async def suggest_ingredients(
    payload: SuggestionRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Extra ingredients that would go well with the current pool."""
    try:
        result = await claude_service.suggest_extra_ingredients(
            payload.ingredients,
            cuisine_preferences=user.cuisine_preferences,
            taste_preferences=user.taste_preferences,
            fitness_goal=user.fitness_goal,
        )
    except AI_ERRORS as e:
        raise ai_http_error(e)

    AIUsageService(db).log_usage(
        service_type="ingredient_suggestion",
        model=result["model"],
        input_tokens=result["usage_stats"]["input_tokens"],
        output_tokens=result["usage_stats"]["output_tokens"],
        user_id=user.id,
    )

    return {"suggestions": result["suggestions"]}
