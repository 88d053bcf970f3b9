# schemas/__init__.py
from .common import CamelModel, ApiResult
from .account import RegisterIn, LoginIn, TokenOut, AuthResultOut
from .user import UserOut, UserCreate, UserUpdate, PasswordChange, RoleIn
from .body_weight import BodyWeightIn, BodyWeightOut
from .muscle import MuscleIn, MuscleOut, MuscleSizeIn, MuscleSizeOut
from .equipment import EquipmentIn, EquipmentOut
from .exercise import ExerciseIn, ExerciseOut, NamedRef
from .workout import WorkoutIn, WorkoutOut
from .exercise_record import ExerciseRecordIn, ExerciseRecordOut

__all__ = [
    "CamelModel",
    "ApiResult",
    "RegisterIn",
    "LoginIn",
    "TokenOut",
    "AuthResultOut",
    "UserOut",
    "UserCreate",
    "UserUpdate",
    "PasswordChange",
    "RoleIn",
    "BodyWeightIn",
    "BodyWeightOut",
    "MuscleIn",
    "MuscleOut",
    "MuscleSizeIn",
    "MuscleSizeOut",
    "EquipmentIn",
    "EquipmentOut",
    "ExerciseIn",
    "ExerciseOut",
    "NamedRef",
    "WorkoutIn",
    "WorkoutOut",
    "ExerciseRecordIn",
    "ExerciseRecordOut",
]
