from datetime import date as date_type
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

from lifetrack.models.enums import ExerciseType, ExerciseIntensity, MuscleGroup


def _lower(v: Any) -> Any:
    if isinstance(v, str):
        return v.strip().lower()
    return v


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)
    exercise_type: ExerciseType
    pmg: MuscleGroup
    exercise_intensity: ExerciseIntensity

    @field_validator("name", "exercise_type", "pmg", "exercise_intensity", mode="before")
    @classmethod
    def lowercase(cls, v: Any) -> Any:
        return _lower(v)


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=128)
    exercise_type: Optional[ExerciseType] = None
    pmg: Optional[MuscleGroup] = None
    exercise_intensity: Optional[ExerciseIntensity] = None

    @field_validator("name", "exercise_type", "pmg", "exercise_intensity", mode="before")
    @classmethod
    def lowercase(cls, v: Any) -> Any:
        return _lower(v)


class ExerciseResponse(ExerciseBase):
    id: int

    class Config:
        from_attributes = True


class ActivityMeasures(BaseModel):
    duration: Optional[float] = Field(None, ge=0)  # minutes
    reps: Optional[int] = Field(None, ge=0)
    weight: Optional[float] = Field(None, ge=0)  # kilograms
    distance: Optional[float] = Field(None, ge=0)  # metres
    laps: Optional[int] = Field(None, ge=0)
    sets: Optional[int] = Field(None, ge=0)


class ActivityCreate(ActivityMeasures):
    exercise_id: int = Field(..., ge=1)
    # Defaults to the current day when omitted
    date: Optional[date_type] = None


class ActivityUpdate(ActivityMeasures):
    exercise_id: Optional[int] = Field(None, ge=1)
    date: Optional[date_type] = None


class ActivityResponse(ActivityMeasures):
    id: int
    user_id: int
    exercise_id: Optional[int] = None
    exercise: Optional[ExerciseResponse] = None
    date: date_type

    class Config:
        from_attributes = True
