# repositories/__init__.py
from .base import DbModelRepository, BaseWorkoutRepository
from .user_repository import UserRepository
from .body_weight_repository import BodyWeightRepository
from .muscle_repository import MuscleRepository, MuscleSizeRepository
from .equipment_repository import EquipmentRepository
from .exercise_repository import ExerciseRepository
from .workout_repository import WorkoutRepository
from .exercise_record_repository import ExerciseRecordRepository

__all__ = [
    "DbModelRepository",
    "BaseWorkoutRepository",
    "UserRepository",
    "BodyWeightRepository",
    "MuscleRepository",
    "MuscleSizeRepository",
    "EquipmentRepository",
    "ExerciseRepository",
    "WorkoutRepository",
    "ExerciseRecordRepository",
]
