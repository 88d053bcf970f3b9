# routers/exercises.py
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query, Response, status
from sqlalchemy.orm import Session

from config.database import get_db
from models.exercise import ExerciseType
from models.user import User
from schemas.common import ApiResult
from schemas.exercise import ExerciseIn, ExerciseOut
from services.exercise_service import ExerciseService
from services.pagination import PageRequest
from routers.common import check_ids_match, page_params, unwrap, unwrap_found, unwrap_page
from utils.dependencies import get_current_user, require_admin

router = APIRouter(prefix="/api/exercises", tags=["exercises"])


def get_service(db: Session = Depends(get_db)) -> ExerciseService:
    return ExerciseService(db)


# ============================================================
# Lists
# ============================================================
@router.get("/internal-exercises", response_model=ApiResult[ExerciseOut])
def internal_exercises(
    page: PageRequest = Depends(page_params),
    exercise_type: Optional[ExerciseType] = Query(None, alias="type"),
    _: User = Depends(get_current_user),
    service: ExerciseService = Depends(get_service),
):
    return unwrap_page(service.get_internal_exercises(exercise_type), page, ExerciseOut)


@router.get("/user-exercises", response_model=ApiResult[ExerciseOut])
def user_exercises(
    page: PageRequest = Depends(page_params),
    exercise_type: Optional[ExerciseType] = Query(None, alias="type"),
    current: User = Depends(get_current_user),
    service: ExerciseService = Depends(get_service),
):
    return unwrap_page(service.get_user_exercises(current.id, exercise_type), page, ExerciseOut)


@router.get("/all-exercises", response_model=ApiResult[ExerciseOut])
def all_exercises(
    page: PageRequest = Depends(page_params),
    exercise_type: Optional[ExerciseType] = Query(None, alias="type"),
    current: User = Depends(get_current_user),
    service: ExerciseService = Depends(get_service),
):
    return unwrap_page(service.get_all_exercises(current.id, exercise_type), page, ExerciseOut)


@router.get("/used-exercises", response_model=ApiResult[ExerciseOut])
def used_exercises(
    page: PageRequest = Depends(page_params),
    exercise_type: Optional[ExerciseType] = Query(None, alias="type"),
    current: User = Depends(get_current_user),
    service: ExerciseService = Depends(get_service),
):
    return unwrap_page(service.get_used_exercises(current.id, exercise_type), page, ExerciseOut)


# ============================================================
# Internal exercises
# ============================================================
@router.get("/internal-exercises/by-name/{name}", response_model=ExerciseOut)
def internal_by_name(name: str, _: User = Depends(get_current_user), service: ExerciseService = Depends(get_service)):
    return unwrap_found(service.get_internal_by_name(name), "Exercise")


@router.get("/internal-exercises/{exercise_id}", response_model=ExerciseOut)
def internal_by_id(exercise_id: int, _: User = Depends(get_current_user), service: ExerciseService = Depends(get_service)):
    return unwrap_found(service.get_internal_by_id(exercise_id), "Exercise")


@router.get("/internal-exercise-exists/{exercise_id}", response_model=bool)
def internal_exists(exercise_id: int, _: User = Depends(get_current_user), service: ExerciseService = Depends(get_service)):
    return unwrap(service.internal_exists(exercise_id))


@router.get("/internal-exercise-exists-by-name/{name}", response_model=bool)
def internal_exists_by_name(name: str, _: User = Depends(get_current_user), service: ExerciseService = Depends(get_service)):
    return unwrap(service.internal_exists_by_name(name))


@router.post("/internal-exercises", response_model=ExerciseOut, status_code=status.HTTP_201_CREATED)
def add_internal(body: ExerciseIn, _: User = Depends(require_admin), service: ExerciseService = Depends(get_service)):
    return unwrap(service.add_internal(body))


@router.put("/internal-exercises/{exercise_id}", response_model=ExerciseOut)
def update_internal(
    exercise_id: int,
    body: ExerciseIn,
    _: User = Depends(require_admin),
    service: ExerciseService = Depends(get_service),
):
    check_ids_match(exercise_id, body.id, "Exercise")
    return unwrap(service.update_internal(body.model_copy(update={"id": exercise_id})))


@router.delete("/internal-exercises/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_internal(exercise_id: int, _: User = Depends(require_admin), service: ExerciseService = Depends(get_service)):
    unwrap(service.delete_internal(exercise_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================
# User exercises
# ============================================================
@router.get("/user-exercises/by-name/{name}", response_model=ExerciseOut)
def user_by_name(name: str, current: User = Depends(get_current_user), service: ExerciseService = Depends(get_service)):
    return unwrap_found(service.get_user_by_name(current.id, name), "Exercise")


@router.get("/user-exercises/{exercise_id}", response_model=ExerciseOut)
def user_by_id(exercise_id: int, current: User = Depends(get_current_user), service: ExerciseService = Depends(get_service)):
    return unwrap_found(service.get_user_by_id(current.id, exercise_id), "Exercise")


@router.get("/user-exercise-exists/{exercise_id}", response_model=bool)
def user_exists(exercise_id: int, current: User = Depends(get_current_user), service: ExerciseService = Depends(get_service)):
    return unwrap(service.user_exists(current.id, exercise_id))


@router.get("/user-exercise-exists-by-name/{name}", response_model=bool)
def user_exists_by_name(name: str, current: User = Depends(get_current_user), service: ExerciseService = Depends(get_service)):
    return unwrap(service.user_exists_by_name(current.id, name))


@router.post("/user-exercises", response_model=ExerciseOut, status_code=status.HTTP_201_CREATED)
def add_user(body: ExerciseIn, current: User = Depends(get_current_user), service: ExerciseService = Depends(get_service)):
    return unwrap(service.add_user(current.id, body))


@router.put("/user-exercises/{exercise_id}", response_model=ExerciseOut)
def update_user(
    exercise_id: int,
    body: ExerciseIn,
    current: User = Depends(get_current_user),
    service: ExerciseService = Depends(get_service),
):
    check_ids_match(exercise_id, body.id, "Exercise")
    return unwrap(service.update_user(current.id, body.model_copy(update={"id": exercise_id})))


@router.delete("/user-exercises/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(exercise_id: int, current: User = Depends(get_current_user), service: ExerciseService = Depends(get_service)):
    unwrap(service.delete_user(current.id, exercise_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================
# Any visible exercise
# ============================================================
@router.put("/{exercise_id}/muscles", response_model=ExerciseOut)
def update_muscles(
    exercise_id: int,
    muscle_ids: List[int] = Body(...),
    current: User = Depends(get_current_user),
    service: ExerciseService = Depends(get_service),
):
    return unwrap(service.update_exercise_muscles(current.id, exercise_id, muscle_ids, current.is_admin()))


@router.put("/{exercise_id}/equipments", response_model=ExerciseOut)
def update_equipments(
    exercise_id: int,
    equipment_ids: List[int] = Body(...),
    current: User = Depends(get_current_user),
    service: ExerciseService = Depends(get_service),
):
    return unwrap(service.update_exercise_equipments(current.id, exercise_id, equipment_ids, current.is_admin()))


@router.get("/by-name/{name}", response_model=ExerciseOut)
def exercise_by_name(name: str, current: User = Depends(get_current_user), service: ExerciseService = Depends(get_service)):
    return unwrap_found(service.get_by_name(current.id, name), "Exercise")


@router.get("/{exercise_id}", response_model=ExerciseOut)
def get_exercise(exercise_id: int, current: User = Depends(get_current_user), service: ExerciseService = Depends(get_service)):
    return unwrap_found(service.get_by_id(current.id, exercise_id), "Exercise")
