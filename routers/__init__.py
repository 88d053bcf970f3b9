# routers/__init__.py

from .account import router as account_router
from .users import router as users_router
from .body_weights import router as body_weights_router
from .muscles import router as muscles_router
from .muscle_sizes import router as muscle_sizes_router
from .equipments import router as equipments_router
from .exercises import router as exercises_router
from .workouts import router as workouts_router
from .exercise_records import router as exercise_records_router

__all__ = [
    "account_router",
    "users_router",
    "body_weights_router",
    "muscles_router",
    "muscle_sizes_router",
    "equipments_router",
    "exercises_router",
    "workouts_router",
    "exercise_records_router",
]
