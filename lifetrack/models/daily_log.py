from sqlalchemy import Column, Integer, String, Float, Boolean, Date, DateTime, ForeignKey, UniqueConstraint

from lifetrack.db.base import Base
from lifetrack.utils.timezone import utcnow_naive


class Nutrition(Base):
    """Self-reported intake levels for one day (Level values)"""
    __tablename__ = "nutrition"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)

    protein_intake = Column(String(16), nullable=False)
    fruit_intake = Column(String(16), nullable=False)
    green_intake = Column(String(16), nullable=False)
    sugar_intake = Column(String(16), nullable=False)
    junk_intake = Column(String(16), nullable=False)
    water_intake = Column(String(16), nullable=False)
    tobacco_intake = Column(String(16), nullable=False)
    alcohol_intake = Column(String(16), nullable=False)
    pot_intake = Column(String(16), nullable=False)

    created_at = Column(DateTime, default=utcnow_naive, nullable=False)
    updated_at = Column(DateTime, default=utcnow_naive, onupdate=utcnow_naive, nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_nutrition_user_date"),
    )


class LifeParam(Base):
    """Sleep, office productivity and stress for one day"""
    __tablename__ = "lifeparams"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)

    sleep = Column(Float, nullable=False)  # hours
    office_productivity = Column(String(16), nullable=False)
    stress = Column(String(16), nullable=False)

    created_at = Column(DateTime, default=utcnow_naive, nullable=False)
    updated_at = Column(DateTime, default=utcnow_naive, onupdate=utcnow_naive, nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_lifeparam_user_date"),
    )


class Interest(Base):
    """Which hobbies were pursued on a day.

    write: blogs, articles, scripts, stories
    video: editing video or learning about it
    read: books, not newspapers or magazines
    cook: preparing your own meals
    travel: planned or impromptu trips
    social: any meaningful social interaction
    """
    __tablename__ = "interests"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)

    write = Column(Boolean, nullable=True)
    video = Column(Boolean, nullable=True)
    read = Column(Boolean, nullable=True)
    cook = Column(Boolean, nullable=True)
    travel = Column(Boolean, nullable=True)
    social = Column(Boolean, nullable=True)

    created_at = Column(DateTime, default=utcnow_naive, nullable=False)
    updated_at = Column(DateTime, default=utcnow_naive, onupdate=utcnow_naive, nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_interest_user_date"),
    )
