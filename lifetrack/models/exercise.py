from sqlalchemy import Column, Integer, String, DateTime, Float, Date, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship

from lifetrack.db.base import Base
from lifetrack.utils.timezone import utcnow_naive


class Exercise(Base):
    """Reusable exercise definition referenced by logged activities"""
    __tablename__ = "exercises"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(128), nullable=False, unique=True, index=True)  # stored lowercase
    exercise_type = Column(String(32), nullable=False, index=True)  # ExerciseType value
    pmg = Column(String(32), nullable=False, index=True)  # MuscleGroup value
    exercise_intensity = Column(String(16), nullable=False, index=True)  # ExerciseIntensity value

    created_at = Column(DateTime, default=utcnow_naive, nullable=False)
    updated_at = Column(DateTime, default=utcnow_naive, onupdate=utcnow_naive, nullable=False)


class Activity(Base):
    """One logged performance of an exercise by a user on a calendar day"""
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # Nulled when the exercise definition is deleted
    exercise_id = Column(Integer, ForeignKey("exercises.id", ondelete="SET NULL"), nullable=True, index=True)

    duration = Column(Float, nullable=True)  # minutes
    reps = Column(Integer, nullable=True)
    weight = Column(Float, nullable=True)  # kilograms
    distance = Column(Float, nullable=True)  # metres
    laps = Column(Integer, nullable=True)  # typically swimming
    sets = Column(Integer, nullable=True)

    date = Column(Date, nullable=False, index=True)

    created_at = Column(DateTime, default=utcnow_naive, nullable=False)
    updated_at = Column(DateTime, default=utcnow_naive, onupdate=utcnow_naive, nullable=False)

    exercise = relationship("Exercise", lazy="joined")

    __table_args__ = (
        UniqueConstraint("user_id", "exercise_id", "date", name="uq_activity_user_exercise_date"),
        Index("idx_activity_user_date", "user_id", "date"),
    )
