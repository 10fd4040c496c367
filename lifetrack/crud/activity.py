from datetime import date
from typing import List, Optional
from sqlalchemy import and_
from sqlalchemy.orm import Session, joinedload

from lifetrack.crud.base import CRUDDailyEntry
from lifetrack.models.exercise import Activity
from lifetrack.schemas.exercise import ActivityCreate, ActivityUpdate


class CRUDActivity(CRUDDailyEntry[Activity, ActivityCreate, ActivityUpdate]):
    """Activities are the one day-scoped document with many rows per day."""

    def list_for_day(self, db: Session, *, user_id: int, day: date) -> List[Activity]:
        return (
            db.query(Activity)
            .options(joinedload(Activity.exercise))
            .filter(and_(Activity.user_id == user_id, Activity.date == day))
            .order_by(Activity.id)
            .all()
        )

    def list_in_range(self, db: Session, *, user_id: int, start: date, end: date) -> List[Activity]:
        return (
            db.query(Activity)
            .options(joinedload(Activity.exercise))
            .filter(Activity.user_id == user_id)
            .filter(Activity.date >= start)
            .filter(Activity.date <= end)
            .order_by(Activity.date, Activity.id)
            .all()
        )

    def get_for_exercise_on_day(
        self, db: Session, *, user_id: int, exercise_id: int, day: date
    ) -> Optional[Activity]:
        return (
            db.query(Activity)
            .filter(
                and_(
                    Activity.user_id == user_id,
                    Activity.exercise_id == exercise_id,
                    Activity.date == day,
                )
            )
            .first()
        )


activity = CRUDActivity(Activity)
