import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from lifetrack.activity_rating.schemas import ActivityRatingDetail, ActivityRatingResponse
from lifetrack.activity_rating.services import ActivityRatingService
from lifetrack.api import deps
from lifetrack.models import User

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/test")
def rating_test():
    return {"msg": "Rating works"}


@router.get("/activity/today", response_model=ActivityRatingResponse)
def get_today_activity_rating(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
    as_of_day: date = Depends(deps.get_as_of_day),
):
    try:
        result = ActivityRatingService(db).rate_day(user_id=current_user.id, day=as_of_day)
    except Exception as e:
        logger.error(f"Activity rating failed for user {current_user.id} on {as_of_day}: {e}")
        raise HTTPException(status_code=500, detail="Server error")
    return ActivityRatingResponse(points=result.points, rating=result.rating)


@router.get("/activity/date/{day}", response_model=ActivityRatingDetail)
def get_activity_rating_for_date(
    day: date,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    try:
        result = ActivityRatingService(db).rate_day(user_id=current_user.id, day=day)
    except Exception as e:
        logger.error(f"Activity rating failed for user {current_user.id} on {day}: {e}")
        raise HTTPException(status_code=500, detail="Server error")
    return ActivityRatingDetail(
        date=day,
        points=result.points,
        rating=result.rating,
        volume=result.volume,
        intensity=result.intensity,
        variety=result.variety,
        activity_count=result.activity_count,
    )
