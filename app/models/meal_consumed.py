from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index, Float, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.database import Base


class MealConsumed(Base):
    """A recipe the user ate; macros are already multiplied by servings."""

    __tablename__ = "meals_consumed"

    id = Column(Integer, primary_key=True)
    user_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    recipe_id = Column(String(64))
    recipe_name = Column(String(255), nullable=False)
    calories = Column(Integer, nullable=False, default=0)
    protein = Column(Integer, nullable=False, default=0)
    carbs = Column(Integer, nullable=False, default=0)
    fat = Column(Integer, nullable=False, default=0)
    servings = Column(Float, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="meals_consumed")

    __table_args__ = (
        Index("idx_meals_consumed_user_created", "user_id", "created_at"),
    )
