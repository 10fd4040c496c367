from lifetrack.crud.base import CRUDDailyEntry
from lifetrack.models.daily_log import Interest, LifeParam, Nutrition
from lifetrack.schemas.daily_log import (
    InterestCreate,
    InterestUpdate,
    LifeParamCreate,
    LifeParamUpdate,
    NutritionCreate,
    NutritionUpdate,
)


class CRUDNutrition(CRUDDailyEntry[Nutrition, NutritionCreate, NutritionUpdate]):
    pass


class CRUDLifeParam(CRUDDailyEntry[LifeParam, LifeParamCreate, LifeParamUpdate]):
    pass


class CRUDInterest(CRUDDailyEntry[Interest, InterestCreate, InterestUpdate]):
    pass


nutrition = CRUDNutrition(Nutrition)
lifeparam = CRUDLifeParam(LifeParam)
interest = CRUDInterest(Interest)
