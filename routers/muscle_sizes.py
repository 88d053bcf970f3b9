# routers/muscle_sizes.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from config.database import get_db
from models.user import User
from schemas.common import ApiResult
from schemas.muscle import MuscleSizeIn, MuscleSizeOut
from services.muscle_size_service import MuscleSizeService
from services.pagination import PageRequest
from routers.common import check_ids_match, date_range_params, page_params, unwrap, unwrap_found, unwrap_page
from utils.dependencies import get_current_user
from utils.units import DateTimeRange

router = APIRouter(prefix="/api/muscle-sizes", tags=["muscle-sizes"])


def get_service(db: Session = Depends(get_db)) -> MuscleSizeService:
    return MuscleSizeService(db)


@router.get("/in-centimeters", response_model=ApiResult[MuscleSizeOut])
def in_centimeters(
    page: PageRequest = Depends(page_params),
    muscle_id: Optional[int] = Query(None, alias="muscleId"),
    date_range: Optional[DateTimeRange] = Depends(date_range_params),
    current: User = Depends(get_current_user),
    service: MuscleSizeService = Depends(get_service),
):
    result = service.get_user_muscle_sizes_in_centimeters(current.id, muscle_id, date_range)
    return unwrap_page(result, page, MuscleSizeOut)


@router.get("/in-inches", response_model=ApiResult[MuscleSizeOut])
def in_inches(
    page: PageRequest = Depends(page_params),
    muscle_id: Optional[int] = Query(None, alias="muscleId"),
    date_range: Optional[DateTimeRange] = Depends(date_range_params),
    current: User = Depends(get_current_user),
    service: MuscleSizeService = Depends(get_service),
):
    result = service.get_user_muscle_sizes_in_inches(current.id, muscle_id, date_range)
    return unwrap_page(result, page, MuscleSizeOut)


@router.get("/min/{muscle_id}", response_model=MuscleSizeOut)
def min_muscle_size(
    muscle_id: int,
    current: User = Depends(get_current_user),
    service: MuscleSizeService = Depends(get_service),
):
    return unwrap_found(service.get_min(current.id, muscle_id), "Muscle size")


@router.get("/max/{muscle_id}", response_model=MuscleSizeOut)
def max_muscle_size(
    muscle_id: int,
    current: User = Depends(get_current_user),
    service: MuscleSizeService = Depends(get_service),
):
    return unwrap_found(service.get_max(current.id, muscle_id), "Muscle size")


@router.get("/{muscle_size_id}", response_model=MuscleSizeOut)
def get_muscle_size(
    muscle_size_id: int,
    current: User = Depends(get_current_user),
    service: MuscleSizeService = Depends(get_service),
):
    return unwrap_found(service.get_by_id(current.id, muscle_size_id), "Muscle size")


@router.post("", response_model=MuscleSizeOut, status_code=status.HTTP_201_CREATED)
def add_muscle_size(
    body: MuscleSizeIn,
    current: User = Depends(get_current_user),
    service: MuscleSizeService = Depends(get_service),
):
    return unwrap(service.add(current.id, body))


@router.put("/{muscle_size_id}", response_model=MuscleSizeOut)
def update_muscle_size(
    muscle_size_id: int,
    body: MuscleSizeIn,
    current: User = Depends(get_current_user),
    service: MuscleSizeService = Depends(get_service),
):
    check_ids_match(muscle_size_id, body.id, "Muscle size")
    return unwrap(service.update(current.id, body.model_copy(update={"id": muscle_size_id})))


@router.delete("/{muscle_size_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_muscle_size(
    muscle_size_id: int,
    current: User = Depends(get_current_user),
    service: MuscleSizeService = Depends(get_service),
):
    unwrap(service.delete(current.id, muscle_size_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
