# routers/users.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from config.database import get_db
from models.user import User
from schemas.body_weight import BodyWeightOut
from schemas.common import ApiResult
from schemas.exercise import ExerciseOut
from schemas.exercise_record import ExerciseRecordOut
from schemas.muscle import MuscleSizeOut
from schemas.user import PasswordChange, RoleIn, UserCreate, UserOut, UserUpdate
from schemas.workout import WorkoutOut
from services.body_weight_service import BodyWeightService
from services.exercise_record_service import ExerciseRecordService
from services.exercise_service import ExerciseService
from services.muscle_size_service import MuscleSizeService
from services.pagination import PageRequest
from services.user_service import UserService
from services.workout_service import WorkoutService
from routers.common import check_ids_match, page_params, unwrap, unwrap_found, unwrap_page
from utils.dependencies import get_current_user, require_admin

router = APIRouter(prefix="/api/users", tags=["users"])


def get_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


# ============================================================
# Current user
# ============================================================
@router.get("/current-user", response_model=UserOut)
def current_user(current: User = Depends(get_current_user), service: UserService = Depends(get_service)):
    return unwrap_found(service.get_by_id(current.id), "User")


@router.get("/roles", response_model=List[str])
def my_roles(current: User = Depends(get_current_user), service: UserService = Depends(get_service)):
    return unwrap(service.get_roles(current.id))


@router.put("/password", status_code=status.HTTP_204_NO_CONTENT)
def change_password(
    body: PasswordChange,
    current: User = Depends(get_current_user),
    service: UserService = Depends(get_service),
):
    unwrap(service.change_password(current.id, body))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/user-body-weights", response_model=ApiResult[BodyWeightOut])
def user_body_weights(
    page: PageRequest = Depends(page_params),
    current: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return unwrap_page(BodyWeightService(db).get_user_body_weights(current.id), page, BodyWeightOut)


@router.get("/user-muscle-sizes", response_model=ApiResult[MuscleSizeOut])
def user_muscle_sizes(
    page: PageRequest = Depends(page_params),
    current: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return unwrap_page(MuscleSizeService(db).get_user_muscle_sizes(current.id), page, MuscleSizeOut)


@router.get("/user-workouts", response_model=ApiResult[WorkoutOut])
def user_workouts(
    page: PageRequest = Depends(page_params),
    current: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return unwrap_page(WorkoutService(db).get_user_workouts(current.id), page, WorkoutOut)


@router.get("/user-exercises", response_model=ApiResult[ExerciseOut])
def user_exercises(
    page: PageRequest = Depends(page_params),
    current: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return unwrap_page(ExerciseService(db).get_user_exercises(current.id), page, ExerciseOut)


@router.get("/user-exercise-records", response_model=ApiResult[ExerciseRecordOut])
def user_exercise_records(
    page: PageRequest = Depends(page_params),
    current: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return unwrap_page(ExerciseRecordService(db).get_user_exercise_records(current.id), page, ExerciseRecordOut)


# ============================================================
# Lookups
# ============================================================
@router.get("/user-exists/{user_id}", response_model=bool)
def user_exists(user_id: str, _: User = Depends(get_current_user), service: UserService = Depends(get_service)):
    return unwrap(service.user_exists(user_id))


@router.get("/user-exists-by-username/{user_name}", response_model=bool)
def user_exists_by_user_name(
    user_name: str, _: User = Depends(get_current_user), service: UserService = Depends(get_service)
):
    return unwrap(service.user_exists_by_user_name(user_name))


# ============================================================
# Administration
# ============================================================
@router.get("", response_model=ApiResult[UserOut])
def list_users(
    page: PageRequest = Depends(page_params),
    _: User = Depends(require_admin),
    service: UserService = Depends(get_service),
):
    return unwrap_page(service.get_users(), page, UserOut)


@router.get("/users-by-role/{role}", response_model=List[UserOut])
def users_by_role(role: str, _: User = Depends(require_admin), service: UserService = Depends(get_service)):
    return unwrap(service.get_users_by_role(role))


@router.get("/userid-by-name/{user_name}", response_model=str)
def user_id_by_name(user_name: str, _: User = Depends(require_admin), service: UserService = Depends(get_service)):
    return unwrap_found(service.get_user_id_by_user_name(user_name), "User")


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(body: UserCreate, _: User = Depends(require_admin), service: UserService = Depends(get_service)):
    return unwrap(service.create(body))


@router.put("/{user_id}/role", response_model=UserOut)
def set_role(
    user_id: str,
    body: RoleIn,
    _: User = Depends(require_admin),
    service: UserService = Depends(get_service),
):
    return unwrap(service.set_role(user_id, body.role))


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: str, _: User = Depends(require_admin), service: UserService = Depends(get_service)):
    return unwrap_found(service.get_by_id(user_id), "User")


@router.put("/{user_id}", response_model=UserOut)
def update_user(
    user_id: str,
    body: UserUpdate,
    current: User = Depends(get_current_user),
    service: UserService = Depends(get_service),
):
    check_ids_match(user_id, body.id, "User")
    return unwrap(service.update(current, body))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: str, _: User = Depends(require_admin), service: UserService = Depends(get_service)):
    unwrap(service.delete(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
