from sqlalchemy import Column, Integer, Date, DateTime, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.database import Base


class WaterIntake(Base):
    """Glasses of water per user per day."""

    __tablename__ = "water_intake"

    id = Column(Integer, primary_key=True)
    user_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    date = Column(Date, nullable=False)
    glasses = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="water_intake")

    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_water_intake_user_date"),
    )
