"""Router factory for documents kept once per user and calendar day.

Nutrition, lifestyle parameters and interests share the same surface: create
for today (once), read today / a date / a date range / an id, patch and delete.
"""

import logging
from datetime import date
from typing import List, Optional, Type

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from lifetrack.api import deps
from lifetrack.crud.base import CRUDDailyEntry
from lifetrack.models import User

logger = logging.getLogger(__name__)


def build_daily_entry_router(
    *,
    crud_entry: CRUDDailyEntry,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
    label: str,
) -> APIRouter:
    router = APIRouter()
    not_found = f"{label} not found"

    @router.get("/test")
    def entry_test():
        return {"msg": f"{label} works"}

    @router.post("/", response_model=response_schema, status_code=201)
    def create_entry(
        *,
        body: create_schema,  # type: ignore[valid-type]
        db: Session = Depends(deps.get_db),
        current_user: User = Depends(deps.get_current_active_user),
        as_of_day: date = Depends(deps.get_as_of_day),
    ):
        if crud_entry.get_for_day(db, user_id=current_user.id, day=as_of_day):
            raise HTTPException(
                status_code=400,
                detail=f"{label} details have already been entered for the day. Please edit the same.",
            )
        created = crud_entry.create_with_user(db, obj_in=body, user_id=current_user.id, date=as_of_day)
        logger.info(f"{label} {created.id} saved for user {current_user.id} on {as_of_day}")
        return created

    @router.get("/today", response_model=Optional[response_schema])
    def get_entry_today(
        db: Session = Depends(deps.get_db),
        current_user: User = Depends(deps.get_current_active_user),
        as_of_day: date = Depends(deps.get_as_of_day),
    ):
        return crud_entry.get_for_day(db, user_id=current_user.id, day=as_of_day)

    @router.get("/date/{day}", response_model=Optional[response_schema])
    def get_entry_for_date(
        day: date,
        db: Session = Depends(deps.get_db),
        current_user: User = Depends(deps.get_current_active_user),
    ):
        return crud_entry.get_for_day(db, user_id=current_user.id, day=day)

    @router.get("/date/from/{start}/to/{end}", response_model=List[response_schema])
    def list_entries_in_range(
        start: date,
        end: date,
        db: Session = Depends(deps.get_db),
        current_user: User = Depends(deps.get_current_active_user),
    ):
        if end < start:
            raise HTTPException(status_code=400, detail="End date must not be before start date")
        return crud_entry.list_in_range(db, user_id=current_user.id, start=start, end=end)

    @router.get("/id/{entry_id}", response_model=response_schema)
    def get_entry(
        entry_id: int,
        db: Session = Depends(deps.get_db),
        current_user: User = Depends(deps.get_current_active_user),
    ):
        entry = crud_entry.get_for_user(db, id=entry_id, user_id=current_user.id)
        if not entry:
            raise HTTPException(status_code=404, detail=not_found)
        return entry

    @router.patch("/id/{entry_id}", response_model=response_schema)
    def update_entry(
        *,
        entry_id: int,
        body: update_schema,  # type: ignore[valid-type]
        db: Session = Depends(deps.get_db),
        current_user: User = Depends(deps.get_current_active_user),
    ):
        entry = crud_entry.get_for_user(db, id=entry_id, user_id=current_user.id)
        if not entry:
            raise HTTPException(status_code=404, detail=not_found)
        return crud_entry.update(db, db_obj=entry, obj_in=body)

    @router.delete("/id/{entry_id}", response_model=response_schema)
    def delete_entry(
        *,
        entry_id: int,
        db: Session = Depends(deps.get_db),
        current_user: User = Depends(deps.get_current_active_user),
    ):
        entry = crud_entry.get_for_user(db, id=entry_id, user_id=current_user.id)
        if not entry:
            raise HTTPException(status_code=404, detail=not_found)
        return crud_entry.remove(db, db_obj=entry)

    return router
