from typing import List, Optional
from sqlalchemy.orm import Session

from lifetrack.crud.base import CRUDBase
from lifetrack.models.enums import ExerciseType, ExerciseIntensity, MuscleGroup
from lifetrack.models.exercise import Activity, Exercise
from lifetrack.schemas.exercise import ExerciseCreate, ExerciseUpdate


class CRUDExercise(CRUDBase[Exercise, ExerciseCreate, ExerciseUpdate]):
    def get_by_name(self, db: Session, *, name: str) -> Optional[Exercise]:
        return db.query(Exercise).filter(Exercise.name == name.strip().lower()).first()

    def list_all(self, db: Session) -> List[Exercise]:
        return db.query(Exercise).order_by(Exercise.name).all()

    def list_by_type(self, db: Session, *, exercise_type: ExerciseType) -> List[Exercise]:
        return db.query(Exercise).filter(Exercise.exercise_type == exercise_type.value).order_by(Exercise.name).all()

    def list_by_pmg(self, db: Session, *, pmg: MuscleGroup) -> List[Exercise]:
        return db.query(Exercise).filter(Exercise.pmg == pmg.value).order_by(Exercise.name).all()

    def list_by_intensity(self, db: Session, *, exercise_intensity: ExerciseIntensity) -> List[Exercise]:
        return (
            db.query(Exercise)
            .filter(Exercise.exercise_intensity == exercise_intensity.value)
            .order_by(Exercise.name)
            .all()
        )

    def remove(self, db: Session, *, db_obj: Exercise) -> Exercise:
        # Logged activities outlive the definition; their reference is cleared
        db.query(Activity).filter(Activity.exercise_id == db_obj.id).update(
            {Activity.exercise_id: None}, synchronize_session=False
        )
        db.delete(db_obj)
        db.commit()
        return db_obj


exercise = CRUDExercise(Exercise)
