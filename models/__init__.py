# models/__init__.py
from .user import User, RoleEnum
from .body_weight import BodyWeight, WeightType
from .muscle import Muscle, MuscleSize, SizeType
from .equipment import Equipment
from .exercise import Exercise, ExerciseType, exercise_muscles, exercise_equipments
from .workout import Workout
from .exercise_record import ExerciseRecord

__all__ = [
    "User",
    "RoleEnum",
    "BodyWeight",
    "WeightType",
    "Muscle",
    "MuscleSize",
    "SizeType",
    "Equipment",
    "Exercise",
    "ExerciseType",
    "exercise_muscles",
    "exercise_equipments",
    "Workout",
    "ExerciseRecord",
]
