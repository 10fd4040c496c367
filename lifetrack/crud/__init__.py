from .user import user
from .exercise import exercise
from .activity import activity
from .daily_log import nutrition, lifeparam, interest
from .planning import goal, task

__all__ = [
    "user", "exercise", "activity", "nutrition", "lifeparam", "interest", "goal", "task"
]
