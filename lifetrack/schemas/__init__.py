from .token import TokenPayload
from .exercise import (
    ExerciseCreate,
    ExerciseUpdate,
    ExerciseResponse,
    ActivityCreate,
    ActivityUpdate,
    ActivityResponse,
)
from .daily_log import (
    NutritionCreate,
    NutritionUpdate,
    NutritionResponse,
    LifeParamCreate,
    LifeParamUpdate,
    LifeParamResponse,
    InterestCreate,
    InterestUpdate,
    InterestResponse,
)
from .planning import GoalCreate, GoalUpdate, GoalResponse, TaskCreate, TaskUpdate, TaskResponse
