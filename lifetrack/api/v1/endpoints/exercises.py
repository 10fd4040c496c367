import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from lifetrack import crud
from lifetrack.api import deps
from lifetrack.models import User
from lifetrack.models.enums import ExerciseType, ExerciseIntensity, MuscleGroup
from lifetrack.schemas.exercise import ExerciseCreate, ExerciseUpdate, ExerciseResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/test")
def exercises_test():
    return {"msg": "Exercises works"}


@router.post("/", response_model=ExerciseResponse)
def create_exercise(
    *,
    db: Session = Depends(deps.get_db),
    body: ExerciseCreate,
    current_user: User = Depends(deps.get_current_active_user),
):
    if crud.exercise.get_by_name(db, name=body.name):
        raise HTTPException(status_code=400, detail="Exercise already exists")
    created = crud.exercise.create(db, obj_in=body)
    logger.info(f"Exercise '{created.name}' ({created.exercise_type}/{created.exercise_intensity}) created by user {current_user.id}")
    return created


@router.get("/", response_model=List[ExerciseResponse])
def list_exercises(db: Session = Depends(deps.get_db)):
    return crud.exercise.list_all(db)


@router.get("/name/{name}", response_model=ExerciseResponse)
def get_exercise_by_name(name: str, db: Session = Depends(deps.get_db)):
    exercise = crud.exercise.get_by_name(db, name=name)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.get("/id/{exercise_id}", response_model=ExerciseResponse)
def get_exercise(exercise_id: int, db: Session = Depends(deps.get_db)):
    exercise = crud.exercise.get(db, id=exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.get("/type/{exercise_type}", response_model=List[ExerciseResponse])
def list_exercises_by_type(exercise_type: ExerciseType, db: Session = Depends(deps.get_db)):
    return crud.exercise.list_by_type(db, exercise_type=exercise_type)


@router.get("/pmg/{pmg}", response_model=List[ExerciseResponse])
def list_exercises_by_pmg(pmg: MuscleGroup, db: Session = Depends(deps.get_db)):
    return crud.exercise.list_by_pmg(db, pmg=pmg)


@router.get("/intensity/{exercise_intensity}", response_model=List[ExerciseResponse])
def list_exercises_by_intensity(exercise_intensity: ExerciseIntensity, db: Session = Depends(deps.get_db)):
    return crud.exercise.list_by_intensity(db, exercise_intensity=exercise_intensity)


@router.patch("/id/{exercise_id}", response_model=ExerciseResponse)
def update_exercise(
    *,
    exercise_id: int,
    body: ExerciseUpdate,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    exercise = crud.exercise.get(db, id=exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    if body.name and body.name != exercise.name and crud.exercise.get_by_name(db, name=body.name):
        raise HTTPException(status_code=400, detail="Exercise already exists")
    return crud.exercise.update(db, db_obj=exercise, obj_in=body)


@router.delete("/id/{exercise_id}", response_model=ExerciseResponse)
def delete_exercise(
    *,
    exercise_id: int,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    exercise = crud.exercise.get(db, id=exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    logger.info(f"Exercise {exercise_id} deleted by user {current_user.id}")
    return crud.exercise.remove(db, db_obj=exercise)
