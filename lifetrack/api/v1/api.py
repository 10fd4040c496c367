from fastapi import APIRouter

from lifetrack.api.v1.endpoints import exercises
from lifetrack.api.v1.endpoints import activities
from lifetrack.api.v1.endpoints import rating
from lifetrack.api.v1.endpoints import nutrition
from lifetrack.api.v1.endpoints import lifeparam
from lifetrack.api.v1.endpoints import interest
from lifetrack.api.v1.endpoints import planning

api_router = APIRouter()

api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(activities.router, prefix="/activities", tags=["activities"])
api_router.include_router(rating.router, prefix="/rating", tags=["rating"])
api_router.include_router(nutrition.router, prefix="/nutrition", tags=["nutrition"])
api_router.include_router(lifeparam.router, prefix="/lifeparam", tags=["lifeparam"])
api_router.include_router(interest.router, prefix="/interest", tags=["interest"])
api_router.include_router(planning.task_router, prefix="/task", tags=["task"])
api_router.include_router(planning.goal_router, prefix="/goal", tags=["goal"])
