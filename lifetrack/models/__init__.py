from .enums import ExerciseType, ExerciseIntensity, MuscleGroup, Level
from .user import User
from .exercise import Exercise, Activity
from .daily_log import Nutrition, LifeParam, Interest
from .planning import Goal, Task
