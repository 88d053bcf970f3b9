# services/__init__.py
from .base import ServiceResult, BaseService, service_action
from .account_service import AccountService
from .user_service import UserService
from .body_weight_service import BodyWeightService
from .muscle_service import MuscleService
from .muscle_size_service import MuscleSizeService
from .equipment_service import EquipmentService
from .exercise_service import ExerciseService
from .workout_service import WorkoutService
from .exercise_record_service import ExerciseRecordService


__all__ = [
    # Results
    "ServiceResult",
    "BaseService",
    "service_action",

    # Auth and users
    "AccountService",
    "UserService",

    # Entities
    "BodyWeightService",
    "MuscleService",
    "MuscleSizeService",
    "EquipmentService",
    "ExerciseService",
    "WorkoutService",
    "ExerciseRecordService",
]
