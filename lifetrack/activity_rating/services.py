from __future__ import annotations

import logging
from datetime import date
from typing import List

from sqlalchemy.orm import Session

from lifetrack.crud import activity as crud_activity
from lifetrack.models import Activity
from .engine import ActivityFacts, RatingResult, compute_rating

logger = logging.getLogger(__name__)


def facts_from_activity(activity: Activity) -> ActivityFacts:
    exercise = activity.exercise
    if exercise is None:
        return ActivityFacts()
    return ActivityFacts(
        exercise_type=exercise.exercise_type,
        exercise_intensity=exercise.exercise_intensity,
    )


class ActivityRatingService:
    def __init__(self, db: Session):
        self.db = db

    def load_daily_activities(self, user_id: int, day: date) -> List[ActivityFacts]:
        activities = crud_activity.list_for_day(self.db, user_id=user_id, day=day)
        return [facts_from_activity(a) for a in activities]

    def rate_day(self, user_id: int, day: date) -> RatingResult:
        facts = self.load_daily_activities(user_id, day)
        result = compute_rating(facts)
        logger.info(
            f"Activity rating for user {user_id} on {day.isoformat()}: "
            f"{result.points} points ({result.rating.value}) from {result.activity_count} activities"
        )
        return result
