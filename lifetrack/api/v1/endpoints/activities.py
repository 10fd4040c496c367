import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from lifetrack import crud
from lifetrack.api import deps
from lifetrack.models import User
from lifetrack.schemas.exercise import ActivityCreate, ActivityUpdate, ActivityResponse

logger = logging.getLogger(__name__)

router = APIRouter()

DUPLICATE_ACTIVITY_MSG = (
    "An activity with the same exercise has already been entered for the day. Please edit that activity."
)


@router.get("/test")
def activities_test():
    return {"msg": "Activities works"}


@router.get("/today", response_model=List[ActivityResponse])
def list_activities_today(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
    as_of_day: date = Depends(deps.get_as_of_day),
):
    return crud.activity.list_for_day(db, user_id=current_user.id, day=as_of_day)


@router.get("/date/{day}", response_model=List[ActivityResponse])
def list_activities_for_date(
    day: date,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    return crud.activity.list_for_day(db, user_id=current_user.id, day=day)


@router.get("/date/from/{start}/to/{end}", response_model=List[ActivityResponse])
def list_activities_in_range(
    start: date,
    end: date,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    if end < start:
        raise HTTPException(status_code=400, detail="End date must not be before start date")
    return crud.activity.list_in_range(db, user_id=current_user.id, start=start, end=end)


@router.post("/", response_model=ActivityResponse, status_code=201)
def create_activity(
    *,
    body: ActivityCreate,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
    as_of_day: date = Depends(deps.get_as_of_day),
):
    day = body.date or as_of_day
    if not crud.exercise.get(db, id=body.exercise_id):
        raise HTTPException(status_code=404, detail="Exercise not found")
    existing = crud.activity.get_for_exercise_on_day(
        db, user_id=current_user.id, exercise_id=body.exercise_id, day=day
    )
    if existing:
        raise HTTPException(status_code=400, detail=DUPLICATE_ACTIVITY_MSG)
    created = crud.activity.create_with_user(db, obj_in=body, user_id=current_user.id, date=day)
    logger.info(f"Activity {created.id} (exercise {created.exercise_id}) logged for user {current_user.id} on {day}")
    return created


@router.patch("/id/{activity_id}", response_model=ActivityResponse)
def update_activity(
    *,
    activity_id: int,
    body: ActivityUpdate,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    activity = crud.activity.get_for_user(db, id=activity_id, user_id=current_user.id)
    if not activity:
        raise HTTPException(status_code=404, detail="Activity not found")

    exercise_id = body.exercise_id or activity.exercise_id
    day = body.date or activity.date
    if body.exercise_id and not crud.exercise.get(db, id=body.exercise_id):
        raise HTTPException(status_code=404, detail="Exercise not found")
    if exercise_id is not None and (exercise_id, day) != (activity.exercise_id, activity.date):
        clash = crud.activity.get_for_exercise_on_day(
            db, user_id=current_user.id, exercise_id=exercise_id, day=day
        )
        if clash and clash.id != activity.id:
            raise HTTPException(status_code=400, detail=DUPLICATE_ACTIVITY_MSG)

    return crud.activity.update(db, db_obj=activity, obj_in=body)


@router.delete("/id/{activity_id}", response_model=ActivityResponse)
def delete_activity(
    *,
    activity_id: int,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    activity = crud.activity.get_for_user(db, id=activity_id, user_id=current_user.id)
    if not activity:
        raise HTTPException(status_code=404, detail="Activity not found")
    return crud.activity.remove(db, db_obj=activity)
