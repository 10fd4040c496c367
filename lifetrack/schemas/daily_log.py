from datetime import date as date_type
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

from lifetrack.models.enums import Level


def _lower(v: Any) -> Any:
    if isinstance(v, str):
        return v.strip().lower()
    return v


NUTRITION_FIELDS = (
    "protein_intake",
    "fruit_intake",
    "green_intake",
    "sugar_intake",
    "junk_intake",
    "water_intake",
    "tobacco_intake",
    "alcohol_intake",
    "pot_intake",
)


class NutritionBase(BaseModel):
    protein_intake: Level
    fruit_intake: Level
    green_intake: Level
    sugar_intake: Level
    junk_intake: Level
    water_intake: Level
    tobacco_intake: Level
    alcohol_intake: Level
    pot_intake: Level

    @field_validator(*NUTRITION_FIELDS, mode="before")
    @classmethod
    def lowercase(cls, v: Any) -> Any:
        return _lower(v)


class NutritionCreate(NutritionBase):
    pass


class NutritionUpdate(BaseModel):
    protein_intake: Optional[Level] = None
    fruit_intake: Optional[Level] = None
    green_intake: Optional[Level] = None
    sugar_intake: Optional[Level] = None
    junk_intake: Optional[Level] = None
    water_intake: Optional[Level] = None
    tobacco_intake: Optional[Level] = None
    alcohol_intake: Optional[Level] = None
    pot_intake: Optional[Level] = None

    @field_validator(*NUTRITION_FIELDS, mode="before")
    @classmethod
    def lowercase(cls, v: Any) -> Any:
        return _lower(v)


class NutritionResponse(NutritionBase):
    id: int
    user_id: int
    date: date_type

    class Config:
        from_attributes = True


class LifeParamBase(BaseModel):
    sleep: float = Field(..., ge=0, le=24)  # hours
    office_productivity: Level
    stress: Level

    @field_validator("office_productivity", "stress", mode="before")
    @classmethod
    def lowercase(cls, v: Any) -> Any:
        return _lower(v)


class LifeParamCreate(LifeParamBase):
    pass


class LifeParamUpdate(BaseModel):
    sleep: Optional[float] = Field(None, ge=0, le=24)
    office_productivity: Optional[Level] = None
    stress: Optional[Level] = None

    @field_validator("office_productivity", "stress", mode="before")
    @classmethod
    def lowercase(cls, v: Any) -> Any:
        return _lower(v)


class LifeParamResponse(LifeParamBase):
    id: int
    user_id: int
    date: date_type

    class Config:
        from_attributes = True


class InterestBase(BaseModel):
    write: Optional[bool] = None
    video: Optional[bool] = None
    read: Optional[bool] = None
    cook: Optional[bool] = None
    travel: Optional[bool] = None
    social: Optional[bool] = None


class InterestCreate(InterestBase):
    pass


class InterestUpdate(InterestBase):
    pass


class InterestResponse(InterestBase):
    id: int
    user_id: int
    date: date_type

    class Config:
        from_attributes = True
