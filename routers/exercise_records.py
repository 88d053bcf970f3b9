# routers/exercise_records.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from config.database import get_db
from models.exercise import ExerciseType
from models.user import User
from schemas.common import ApiResult
from schemas.exercise_record import ExerciseRecordIn, ExerciseRecordOut
from services.exercise_record_service import ExerciseRecordService
from services.pagination import PageRequest
from routers.common import check_ids_match, date_range_params, page_params, unwrap, unwrap_found, unwrap_page
from utils.dependencies import get_current_user
from utils.units import DateTimeRange

router = APIRouter(prefix="/api/exercise-records", tags=["exercise-records"])


def get_service(db: Session = Depends(get_db)) -> ExerciseRecordService:
    return ExerciseRecordService(db)


@router.get("", response_model=ApiResult[ExerciseRecordOut])
def list_records(
    page: PageRequest = Depends(page_params),
    exercise_id: Optional[int] = Query(None, alias="exerciseId"),
    exercise_type: Optional[ExerciseType] = Query(None, alias="exerciseType"),
    date_range: Optional[DateTimeRange] = Depends(date_range_params),
    current: User = Depends(get_current_user),
    service: ExerciseRecordService = Depends(get_service),
):
    result = service.get_user_exercise_records(current.id, exercise_id, exercise_type, date_range)
    return unwrap_page(result, page, ExerciseRecordOut)


@router.get("/{record_id}", response_model=ExerciseRecordOut)
def get_record(record_id: int, current: User = Depends(get_current_user), service: ExerciseRecordService = Depends(get_service)):
    return unwrap_found(service.get_by_id(current.id, record_id), "Exercise record")


@router.post("", response_model=ExerciseRecordOut, status_code=status.HTTP_201_CREATED)
def add_record(
    body: ExerciseRecordIn,
    current: User = Depends(get_current_user),
    service: ExerciseRecordService = Depends(get_service),
):
    return unwrap(service.add(current.id, body))


@router.put("/{record_id}", response_model=ExerciseRecordOut)
def update_record(
    record_id: int,
    body: ExerciseRecordIn,
    current: User = Depends(get_current_user),
    service: ExerciseRecordService = Depends(get_service),
):
    check_ids_match(record_id, body.id, "Exercise record")
    return unwrap(service.update(current.id, body.model_copy(update={"id": record_id})))


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_record(record_id: int, current: User = Depends(get_current_user), service: ExerciseRecordService = Depends(get_service)):
    unwrap(service.delete(current.id, record_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
