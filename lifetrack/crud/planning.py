from typing import List
from sqlalchemy.orm import Session

from lifetrack.crud.base import CRUDUserOwned
from lifetrack.models.planning import Goal, Task
from lifetrack.schemas.planning import GoalCreate, GoalUpdate, TaskCreate, TaskUpdate


class CRUDGoal(CRUDUserOwned[Goal, GoalCreate, GoalUpdate]):
    def list_for_user(self, db: Session, *, user_id: int, skip: int = 0, limit: int = 100) -> List[Goal]:
        return (
            db.query(Goal)
            .filter(Goal.user_id == user_id)
            .order_by(Goal.red_line, Goal.id)
            .offset(skip)
            .limit(limit)
            .all()
        )


class CRUDTask(CRUDUserOwned[Task, TaskCreate, TaskUpdate]):
    def list_for_user(self, db: Session, *, user_id: int, skip: int = 0, limit: int = 100) -> List[Task]:
        return (
            db.query(Task)
            .filter(Task.user_id == user_id)
            .order_by(Task.start_at, Task.id)
            .offset(skip)
            .limit(limit)
            .all()
        )


goal = CRUDGoal(Goal)
task = CRUDTask(Task)
