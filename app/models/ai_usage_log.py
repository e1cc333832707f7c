"""AIUsageLog model for tracking AI API usage and costs."""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Boolean, Text, Numeric, ForeignKey, Uuid
from app.database import Base


class AIUsageLog(Base):
    """Tracks all AI API calls for cost monitoring and free-tier limits."""

    __tablename__ = "ai_usage_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    timestamp = Column(DateTime, default=datetime.utcnow, index=True)

    # Service identification
    service_type = Column(String, nullable=False)  # 'ingredient_scan', 'recipe_generation', 'ingredient_suggestion'
    model = Column(String, nullable=False)

    # Token usage
    input_tokens = Column(Integer, nullable=False, default=0)
    output_tokens = Column(Integer, nullable=False, default=0)

    # Cost tracking (in cents for precision)
    estimated_cost_cents = Column(Numeric(10, 4), nullable=False, default=0)

    # Request linking
    request_id = Column(String, index=True, nullable=True)  # scan.id
    request_type = Column(String, nullable=True)  # 'scan'

    # Status
    success = Column(Boolean, default=True)
    error_message = Column(Text, nullable=True)

    def __repr__(self):
        return f"<AIUsageLog(id={self.id}, service={self.service_type}, cost={self.estimated_cost_cents}c)>"
