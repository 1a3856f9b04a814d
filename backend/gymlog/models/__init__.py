from gymlog.models.user import User
from gymlog.models.exercise_set import ExerciseSet

__all__ = ["User", "ExerciseSet"]
