from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index, JSON, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.database import Base

JSONType = JSON().with_variant(JSONB(), "postgresql")


class Scan(Base):
    """
    One photographed ingredient pool and the recipes generated from it.

    `ingredients` holds ScannedIngredient.to_dict() entries and `recipes`
    holds Recipe.to_dict() entries, ranked by match score.
    """

    __tablename__ = "scans"

    id = Column(Integer, primary_key=True)
    user_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    image_path = Column(String(512))
    ingredients = Column(JSONType, nullable=False, default=list)
    recipes = Column(JSONType)  # None until generated
    ai_raw_response = Column(String)  # Raw vision response for debugging
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    user = relationship("User", back_populates="scans")

    __table_args__ = (
        Index("idx_scans_user_id", "user_id"),
        Index("idx_scans_created_at", "created_at"),
    )
