from datetime import date as date_type

from pydantic import BaseModel, Field

from .engine import Rating


class ActivityRatingResponse(BaseModel):
    points: int = Field(..., ge=0)
    rating: Rating


class ActivityRatingDetail(ActivityRatingResponse):
    date: date_type
    volume: int
    intensity: int
    variety: int
    activity_count: int
