from lifetrack import crud
from lifetrack.api.v1.endpoints.daily_entries import build_daily_entry_router
from lifetrack.schemas.daily_log import LifeParamCreate, LifeParamUpdate, LifeParamResponse

router = build_daily_entry_router(
    crud_entry=crud.lifeparam,
    create_schema=LifeParamCreate,
    update_schema=LifeParamUpdate,
    response_schema=LifeParamResponse,
    label="Lifeparam",
)
