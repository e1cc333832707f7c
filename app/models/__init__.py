"""
Database models for FridgeChef.

Import all models here so Alembic can detect them for migrations.
"""

from app.database import Base
from app.models.user import User
from app.models.session import Session
from app.models.scan import Scan
from app.models.meal_consumed import MealConsumed
from app.models.water_intake import WaterIntake
from app.models.favorite import Favorite
from app.models.ai_usage_log import AIUsageLog

__all__ = [
    "Base",
    "User",
    "Session",
    "Scan",
    "MealConsumed",
    "WaterIntake",
    "Favorite",
    "AIUsageLog",
]
