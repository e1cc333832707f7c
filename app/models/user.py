from sqlalchemy import Column, String, DateTime, Date, Float, Integer, JSON, Uuid
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import uuid

from app.database import Base


class User(Base):
    """User account plus the onboarding profile that drives the calorie goal."""

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=True)
    name = Column(String(50))

    # Onboarding profile
    gender = Column(String(10))  # 'male', 'female', 'other'
    height_cm = Column(Float)
    weight_kg = Column(Float)
    birth_date = Column(Date)
    activity_level = Column(String(30))  # key of ACTIVITY_MULTIPLIERS
    fitness_goal = Column(String(30))  # 'gym', 'lose_weight', 'gain_weight', 'maintain_weight'
    target_weight_kg = Column(Float)
    target_weeks = Column(Integer)
    cuisine_preferences = Column(JSON, default=list)
    taste_preferences = Column(JSON, default=list)
    daily_calorie_goal = Column(Integer)  # Recomputed whenever profile changes

    # Daily scanning streak
    current_streak = Column(Integer, nullable=False, default=0)
    last_scan_date = Column(Date)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    sessions = relationship(
        "Session", back_populates="user", cascade="all, delete-orphan"
    )
    scans = relationship("Scan", back_populates="user", cascade="all, delete-orphan")
    meals_consumed = relationship(
        "MealConsumed", back_populates="user", cascade="all, delete-orphan"
    )
    water_intake = relationship(
        "WaterIntake", back_populates="user", cascade="all, delete-orphan"
    )
    favorites = relationship(
        "Favorite", back_populates="user", cascade="all, delete-orphan"
    )
