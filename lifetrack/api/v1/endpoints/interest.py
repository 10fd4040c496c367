from lifetrack import crud
from lifetrack.api.v1.endpoints.daily_entries import build_daily_entry_router
from lifetrack.schemas.daily_log import InterestCreate, InterestUpdate, InterestResponse

router = build_daily_entry_router(
    crud_entry=crud.interest,
    create_schema=InterestCreate,
    update_schema=InterestUpdate,
    response_schema=InterestResponse,
    label="Interest",
)
