from .goal import Goal, GoalStatus
from .key_result import KeyResult

__all__ = ["Goal", "GoalStatus", "KeyResult"]
