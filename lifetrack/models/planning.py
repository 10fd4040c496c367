from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, Text

from lifetrack.db.base import Base
from lifetrack.utils.timezone import utcnow_naive


class Goal(Base):
    __tablename__ = "goals"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    aspiration = Column(Text, nullable=False)
    aspired_at = Column(DateTime, nullable=False)
    milestones = Column(DateTime, nullable=False)
    red_line = Column(DateTime, nullable=False)  # hard deadline
    category = Column(String(64), nullable=False, index=True)

    created_at = Column(DateTime, default=utcnow_naive, nullable=False)
    updated_at = Column(DateTime, default=utcnow_naive, onupdate=utcnow_naive, nullable=False)


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    definition = Column(Text, nullable=False)
    start_at = Column(DateTime, nullable=False)
    red_line = Column(DateTime, nullable=False)
    effort = Column(Float, nullable=False)  # hours
    consequence = Column(String(16), nullable=False)  # Level value
    category = Column(String(64), nullable=False, index=True)

    created_at = Column(DateTime, default=utcnow_naive, nullable=False)
    updated_at = Column(DateTime, default=utcnow_naive, onupdate=utcnow_naive, nullable=False)
