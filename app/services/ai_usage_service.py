"""
AI Usage tracking service for monitoring API costs and free-tier limits.

Logs all AI API calls with token usage and calculates estimated costs. The
same log backs the "may this user generate recipes right now" check that
routes run before calling the recipe pipeline.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.config import settings
from app.models import AIUsageLog, Scan

SCAN_ACTION = "scan"
RECIPE_GENERATION_ACTION = "recipe_generation"

SCAN_WINDOW = timedelta(days=30)
RECIPE_GENERATION_WINDOW = timedelta(hours=1)


class AIUsageService:
    """Service for logging and calculating AI API usage costs."""

    def __init__(self, db: Session):
        self.db = db

    def calculate_cost_cents(
        self, model: str, input_tokens: int, output_tokens: int
    ) -> Decimal:
        """
        Calculate estimated cost in cents for an API call.

        All current models are billed at Sonnet rates from settings.
        """
        input_cost = settings.sonnet_input_cost_per_1k
        output_cost = settings.sonnet_output_cost_per_1k

        total_cost = (input_tokens / 1000) * input_cost + (output_tokens / 1000) * output_cost

        return Decimal(str(round(total_cost, 4)))

    def log_usage(
        self,
        service_type: str,
        model: str,
        input_tokens: int = 0,
        output_tokens: int = 0,
        user_id: Optional[UUID] = None,
        request_id: Optional[str] = None,
        request_type: Optional[str] = None,
        success: bool = True,
        error_message: Optional[str] = None,
    ) -> AIUsageLog:
        """
        Log an AI API usage event.

        Args:
            service_type: 'ingredient_scan', 'recipe_generation', 'ingredient_suggestion'
            model: Model name used
            input_tokens: Number of input tokens
            output_tokens: Number of output tokens
            user_id: Optional user ID
            request_id: Optional request ID for linking (e.g., scan.id)
            request_type: Optional request type ('scan')
            success: Whether the call succeeded
            error_message: Error message if failed

        Returns:
            Created AIUsageLog record
        """
        cost_cents = self.calculate_cost_cents(
            model=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )

        log_entry = AIUsageLog(
            user_id=user_id,
            timestamp=datetime.utcnow(),
            service_type=service_type,
            model=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            estimated_cost_cents=cost_cents,
            request_id=request_id,
            request_type=request_type,
            success=success,
            error_message=error_message,
        )

        self.db.add(log_entry)
        self.db.commit()
        self.db.refresh(log_entry)

        return log_entry

    def count_recent_calls(self, user_id: UUID, service_type: str, window: timedelta) -> int:
        """Successful calls of `service_type` by the user inside the window."""
        cutoff = datetime.utcnow() - window
        return (
            self.db.query(func.count(AIUsageLog.id))
            .filter(
                AIUsageLog.user_id == user_id,
                AIUsageLog.service_type == service_type,
                AIUsageLog.success.is_(True),
                AIUsageLog.timestamp >= cutoff,
            )
            .scalar()
            or 0
        )

    def count_recent_scans(self, user_id: UUID, window: timedelta = SCAN_WINDOW) -> int:
        cutoff = datetime.now(timezone.utc) - window
        return (
            self.db.query(func.count(Scan.id))
            .filter(Scan.user_id == user_id, Scan.created_at >= cutoff)
            .scalar()
            or 0
        )

    def check_action_allowed(self, user_id: UUID, action: str) -> tuple[bool, str]:
        """
        Free-tier precondition for AI actions.

        Returns (allowed, message). The message tells the user how many uses
        remain, or why they were refused.
        """
        if action == SCAN_ACTION:
            limit = settings.free_scans_per_month
            used = self.count_recent_scans(user_id)
            if used >= limit:
                return False, f"You have used all {limit} free scans this month."
            return True, f"{limit - used} free scans remaining this month"

        if action == RECIPE_GENERATION_ACTION:
            limit = settings.free_recipe_generations_per_hour
            used = self.count_recent_calls(user_id, RECIPE_GENERATION_ACTION, RECIPE_GENERATION_WINDOW)
            if used >= limit:
                return False, f"You have used all {limit} free recipe generations this hour."
            return True, f"{limit - used} free generations remaining this hour"

        return True, ""

    def get_usage_stats(self, user_id: UUID) -> dict:
        """Counts and limits shown on the profile screen."""
        return {
            "scans_this_month": self.count_recent_scans(user_id),
            "recipes_this_hour": self.count_recent_calls(
                user_id, RECIPE_GENERATION_ACTION, RECIPE_GENERATION_WINDOW
            ),
            "scan_limit": settings.free_scans_per_month,
            "recipe_limit": settings.free_recipe_generations_per_hour,
        }

    def get_usage_summary(self, user_id: Optional[UUID] = None, days: int = 30) -> dict:
        """
        Get usage summary for a user over the past N days.

        Args:
            user_id: Optional user ID to filter by
            days: Number of days to look back

        Returns:
            Dict with usage statistics
        """
        cutoff = datetime.utcnow() - timedelta(days=days)

        query = self.db.query(
            func.count(AIUsageLog.id).label("total_calls"),
            func.sum(AIUsageLog.input_tokens).label("total_input_tokens"),
            func.sum(AIUsageLog.output_tokens).label("total_output_tokens"),
            func.sum(AIUsageLog.estimated_cost_cents).label("total_cost_cents"),
        ).filter(AIUsageLog.timestamp >= cutoff)

        if user_id:
            query = query.filter(AIUsageLog.user_id == user_id)

        result = query.first()

        return {
            "total_calls": result.total_calls or 0,
            "total_input_tokens": result.total_input_tokens or 0,
            "total_output_tokens": result.total_output_tokens or 0,
            "total_cost_cents": float(result.total_cost_cents or 0),
            "total_cost_dollars": round(float(result.total_cost_cents or 0) / 100, 2),
            "period_days": days,
        }
