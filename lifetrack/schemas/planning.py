from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from lifetrack.models.enums import Level
from lifetrack.utils.timezone import to_utc_naive

GOAL_DATETIME_FIELDS = ("aspired_at", "milestones", "red_line")
TASK_DATETIME_FIELDS = ("start_at", "red_line")


def _lower(v: Any) -> Any:
    if isinstance(v, str):
        return v.strip().lower()
    return v


class GoalBase(BaseModel):
    aspiration: str = Field(..., min_length=1)
    aspired_at: datetime
    milestones: datetime
    red_line: datetime
    category: str = Field(..., min_length=1, max_length=64)

    # Stored in naive DateTime columns as UTC
    @field_validator(*GOAL_DATETIME_FIELDS, mode="after")
    @classmethod
    def utc_naive(cls, v: datetime) -> datetime:
        return to_utc_naive(v)


class GoalCreate(GoalBase):
    pass


class GoalUpdate(BaseModel):
    aspiration: Optional[str] = Field(None, min_length=1)
    aspired_at: Optional[datetime] = None
    milestones: Optional[datetime] = None
    red_line: Optional[datetime] = None
    category: Optional[str] = Field(None, min_length=1, max_length=64)

    @field_validator(*GOAL_DATETIME_FIELDS, mode="after")
    @classmethod
    def utc_naive(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_utc_naive(v)


class GoalResponse(GoalBase):
    id: int
    user_id: int

    class Config:
        from_attributes = True


class TaskBase(BaseModel):
    definition: str = Field(..., min_length=1)
    start_at: datetime
    red_line: datetime
    effort: float = Field(..., ge=0)  # hours
    consequence: Level
    category: str = Field(..., min_length=1, max_length=64)

    @field_validator("consequence", mode="before")
    @classmethod
    def lowercase(cls, v: Any) -> Any:
        return _lower(v)

    @field_validator(*TASK_DATETIME_FIELDS, mode="after")
    @classmethod
    def utc_naive(cls, v: datetime) -> datetime:
        return to_utc_naive(v)


class TaskCreate(TaskBase):
    @model_validator(mode="after")
    def red_line_after_start(self) -> "TaskCreate":
        if self.red_line < self.start_at:
            raise ValueError("red_line must not be before start_at")
        return self


class TaskUpdate(BaseModel):
    definition: Optional[str] = Field(None, min_length=1)
    start_at: Optional[datetime] = None
    red_line: Optional[datetime] = None
    effort: Optional[float] = Field(None, ge=0)
    consequence: Optional[Level] = None
    category: Optional[str] = Field(None, min_length=1, max_length=64)

    @field_validator("consequence", mode="before")
    @classmethod
    def lowercase(cls, v: Any) -> Any:
        return _lower(v)

    @field_validator(*TASK_DATETIME_FIELDS, mode="after")
    @classmethod
    def utc_naive(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_utc_naive(v)


class TaskResponse(TaskBase):
    id: int
    user_id: int

    class Config:
        from_attributes = True
