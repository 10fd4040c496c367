from datetime import date
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy import and_
from sqlalchemy.orm import Session

from lifetrack.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return db.query(self.model).filter(self.model.id == id).first()

    def create(self, db: Session, *, obj_in: CreateSchemaType) -> ModelType:
        data = {k: _column_value(v) for k, v in obj_in.model_dump().items()}
        db_obj = self.model(**data)  # type: ignore
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(
        self, db: Session, *, db_obj: ModelType, obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        # Unset and null fields are left untouched
        if isinstance(obj_in, dict):
            update_data = {k: v for k, v in obj_in.items() if v is not None}
        else:
            update_data = obj_in.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(db_obj, field, _column_value(value))
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def remove(self, db: Session, *, db_obj: ModelType) -> ModelType:
        db.delete(db_obj)
        db.commit()
        return db_obj


class CRUDUserOwned(CRUDBase[ModelType, CreateSchemaType, UpdateSchemaType]):
    """Documents that belong to a single user and are only visible to them."""

    def get_for_user(self, db: Session, *, id: int, user_id: int) -> Optional[ModelType]:
        return (
            db.query(self.model)
            .filter(and_(self.model.id == id, self.model.user_id == user_id))
            .first()
        )

    def list_for_user(self, db: Session, *, user_id: int, skip: int = 0, limit: int = 100) -> List[ModelType]:
        return (
            db.query(self.model)
            .filter(self.model.user_id == user_id)
            .order_by(self.model.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def create_with_user(self, db: Session, *, obj_in: CreateSchemaType, user_id: int, **extra: Any) -> ModelType:
        data = {k: _column_value(v) for k, v in obj_in.model_dump().items()}
        data.update(extra)
        data["user_id"] = user_id
        db_obj = self.model(**data)  # type: ignore
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj


class CRUDDailyEntry(CRUDUserOwned[ModelType, CreateSchemaType, UpdateSchemaType]):
    """At most one document per user and calendar day."""

    def get_for_day(self, db: Session, *, user_id: int, day: date) -> Optional[ModelType]:
        return (
            db.query(self.model)
            .filter(and_(self.model.user_id == user_id, self.model.date == day))
            .first()
        )

    def list_in_range(self, db: Session, *, user_id: int, start: date, end: date) -> List[ModelType]:
        return (
            db.query(self.model)
            .filter(self.model.user_id == user_id)
            .filter(self.model.date >= start)
            .filter(self.model.date <= end)
            .order_by(self.model.date)
            .all()
        )


def _column_value(value: Any) -> Any:
    # Enum members are stored by value in plain string columns
    return getattr(value, "value", value)
