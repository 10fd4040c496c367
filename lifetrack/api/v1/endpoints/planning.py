from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from lifetrack import crud
from lifetrack.api import deps
from lifetrack.models import User
from lifetrack.schemas.planning import (
    GoalCreate,
    GoalUpdate,
    GoalResponse,
    TaskCreate,
    TaskUpdate,
    TaskResponse,
)

goal_router = APIRouter()
task_router = APIRouter()


# --- Goals ---

@goal_router.get("/test")
def goal_test():
    return {"msg": "Goal works"}


@goal_router.post("/", response_model=GoalResponse, status_code=201)
def create_goal(
    *,
    body: GoalCreate,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    return crud.goal.create_with_user(db, obj_in=body, user_id=current_user.id)


@goal_router.get("/", response_model=List[GoalResponse])
def list_goals(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    return crud.goal.list_for_user(db, user_id=current_user.id, skip=skip, limit=limit)


@goal_router.get("/id/{goal_id}", response_model=GoalResponse)
def get_goal(
    goal_id: int,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    goal = crud.goal.get_for_user(db, id=goal_id, user_id=current_user.id)
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")
    return goal


@goal_router.patch("/id/{goal_id}", response_model=GoalResponse)
def update_goal(
    *,
    goal_id: int,
    body: GoalUpdate,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    goal = crud.goal.get_for_user(db, id=goal_id, user_id=current_user.id)
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")
    return crud.goal.update(db, db_obj=goal, obj_in=body)


@goal_router.delete("/id/{goal_id}", response_model=GoalResponse)
def delete_goal(
    *,
    goal_id: int,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    goal = crud.goal.get_for_user(db, id=goal_id, user_id=current_user.id)
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")
    return crud.goal.remove(db, db_obj=goal)


# --- Tasks ---

@task_router.get("/test")
def task_test():
    return {"msg": "Task works"}


@task_router.post("/", response_model=TaskResponse, status_code=201)
def create_task(
    *,
    body: TaskCreate,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    return crud.task.create_with_user(db, obj_in=body, user_id=current_user.id)


@task_router.get("/", response_model=List[TaskResponse])
def list_tasks(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    return crud.task.list_for_user(db, user_id=current_user.id, skip=skip, limit=limit)


@task_router.get("/id/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: int,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    task = crud.task.get_for_user(db, id=task_id, user_id=current_user.id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@task_router.patch("/id/{task_id}", response_model=TaskResponse)
def update_task(
    *,
    task_id: int,
    body: TaskUpdate,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    task = crud.task.get_for_user(db, id=task_id, user_id=current_user.id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    start_at = body.start_at or task.start_at
    red_line = body.red_line or task.red_line
    if red_line < start_at:
        raise HTTPException(status_code=400, detail="red_line must not be before start_at")
    return crud.task.update(db, db_obj=task, obj_in=body)


@task_router.delete("/id/{task_id}", response_model=TaskResponse)
def delete_task(
    *,
    task_id: int,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    task = crud.task.get_for_user(db, id=task_id, user_id=current_user.id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return crud.task.remove(db, db_obj=task)
