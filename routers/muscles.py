# routers/muscles.py
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query, Response, status
from sqlalchemy.orm import Session

from config.database import get_db
from models.user import User
from schemas.common import ApiResult
from schemas.exercise import ExerciseOut
from schemas.muscle import MuscleIn, MuscleOut
from services.muscle_service import MuscleService
from services.pagination import PageRequest
from routers.common import check_ids_match, page_params, unwrap, unwrap_found, unwrap_page
from utils.dependencies import get_current_user, require_admin

router = APIRouter(prefix="/api/muscles", tags=["muscles"])


def get_service(db: Session = Depends(get_db)) -> MuscleService:
    return MuscleService(db)


# ============================================================
# Reads
# ============================================================
@router.get("", response_model=ApiResult[MuscleOut])
def list_muscles(
    page: PageRequest = Depends(page_params),
    is_measurable: Optional[bool] = Query(None, alias="isMeasurable"),
    _: User = Depends(get_current_user),
    service: MuscleService = Depends(get_service),
):
    return unwrap_page(service.get_muscles(is_measurable), page, MuscleOut)


@router.get("/parent-muscles", response_model=ApiResult[MuscleOut])
def parent_muscles(
    page: PageRequest = Depends(page_params),
    _: User = Depends(get_current_user),
    service: MuscleService = Depends(get_service),
):
    return unwrap_page(service.get_parent_muscles(), page, MuscleOut)


@router.get("/child-muscles/{parent_id}", response_model=ApiResult[MuscleOut])
def child_muscles(
    parent_id: int,
    page: PageRequest = Depends(page_params),
    _: User = Depends(get_current_user),
    service: MuscleService = Depends(get_service),
):
    return unwrap_page(service.get_child_muscles(parent_id), page, MuscleOut)


@router.get("/muscle-exists/{muscle_id}", response_model=bool)
def muscle_exists(muscle_id: int, _: User = Depends(get_current_user), service: MuscleService = Depends(get_service)):
    return unwrap(service.exists(muscle_id))


@router.get("/muscle-exists-by-name/{name}", response_model=bool)
def muscle_exists_by_name(name: str, _: User = Depends(get_current_user), service: MuscleService = Depends(get_service)):
    return unwrap(service.exists_by_name(name))


@router.get("/by-name/{name}", response_model=MuscleOut)
def muscle_by_name(name: str, _: User = Depends(get_current_user), service: MuscleService = Depends(get_service)):
    return unwrap_found(service.get_by_name(name), "Muscle")


@router.get("/{muscle_id}/exercises", response_model=ApiResult[ExerciseOut])
def muscle_exercises(
    muscle_id: int,
    page: PageRequest = Depends(page_params),
    current: User = Depends(get_current_user),
    service: MuscleService = Depends(get_service),
):
    return unwrap_page(service.get_muscle_exercises(current.id, muscle_id), page, ExerciseOut)


@router.get("/{muscle_id}", response_model=MuscleOut)
def get_muscle(muscle_id: int, _: User = Depends(get_current_user), service: MuscleService = Depends(get_service)):
    return unwrap_found(service.get_by_id(muscle_id), "Muscle")


# ============================================================
# Administration
# ============================================================
@router.post("", response_model=MuscleOut, status_code=status.HTTP_201_CREATED)
def add_muscle(body: MuscleIn, _: User = Depends(require_admin), service: MuscleService = Depends(get_service)):
    return unwrap(service.add(body))


@router.put("/{muscle_id}/children", response_model=List[MuscleOut])
def update_children(
    muscle_id: int,
    child_ids: List[int] = Body(...),
    _: User = Depends(require_admin),
    service: MuscleService = Depends(get_service),
):
    return unwrap(service.update_children(muscle_id, child_ids))


@router.put("/{muscle_id}", response_model=MuscleOut)
def update_muscle(
    muscle_id: int,
    body: MuscleIn,
    _: User = Depends(require_admin),
    service: MuscleService = Depends(get_service),
):
    check_ids_match(muscle_id, body.id, "Muscle")
    return unwrap(service.update(body.model_copy(update={"id": muscle_id})))


@router.delete("/{muscle_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_muscle(muscle_id: int, _: User = Depends(require_admin), service: MuscleService = Depends(get_service)):
    unwrap(service.delete(muscle_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
