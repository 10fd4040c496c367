from lifetrack import crud
from lifetrack.api.v1.endpoints.daily_entries import build_daily_entry_router
from lifetrack.schemas.daily_log import NutritionCreate, NutritionUpdate, NutritionResponse

router = build_daily_entry_router(
    crud_entry=crud.nutrition,
    create_schema=NutritionCreate,
    update_schema=NutritionUpdate,
    response_schema=NutritionResponse,
    label="Nutrition",
)
