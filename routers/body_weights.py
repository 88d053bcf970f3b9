# routers/body_weights.py
from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from config.database import get_db
from models.user import User
from schemas.body_weight import BodyWeightIn, BodyWeightOut
from schemas.common import ApiResult
from services.body_weight_service import BodyWeightService
from services.pagination import PageRequest
from routers.common import check_ids_match, date_range_params, page_params, unwrap, unwrap_found, unwrap_page
from utils.dependencies import get_current_user
from utils.units import DateTimeRange

router = APIRouter(prefix="/api/body-weights", tags=["body-weights"])


def get_service(db: Session = Depends(get_db)) -> BodyWeightService:
    return BodyWeightService(db)


@router.get("/in-kilograms", response_model=ApiResult[BodyWeightOut])
def in_kilograms(
    page: PageRequest = Depends(page_params),
    date_range: Optional[DateTimeRange] = Depends(date_range_params),
    current: User = Depends(get_current_user),
    service: BodyWeightService = Depends(get_service),
):
    return unwrap_page(service.get_user_body_weights_in_kilograms(current.id, date_range), page, BodyWeightOut)


@router.get("/in-pounds", response_model=ApiResult[BodyWeightOut])
def in_pounds(
    page: PageRequest = Depends(page_params),
    date_range: Optional[DateTimeRange] = Depends(date_range_params),
    current: User = Depends(get_current_user),
    service: BodyWeightService = Depends(get_service),
):
    return unwrap_page(service.get_user_body_weights_in_pounds(current.id, date_range), page, BodyWeightOut)


@router.get("/current", response_model=BodyWeightOut)
def current_body_weight(current: User = Depends(get_current_user), service: BodyWeightService = Depends(get_service)):
    return unwrap_found(service.get_current(current.id), "Body weight")


@router.get("/min", response_model=BodyWeightOut)
def min_body_weight(current: User = Depends(get_current_user), service: BodyWeightService = Depends(get_service)):
    return unwrap_found(service.get_min(current.id), "Body weight")


@router.get("/max", response_model=BodyWeightOut)
def max_body_weight(current: User = Depends(get_current_user), service: BodyWeightService = Depends(get_service)):
    return unwrap_found(service.get_max(current.id), "Body weight")


@router.get("/{body_weight_id}", response_model=BodyWeightOut)
def get_body_weight(
    body_weight_id: int,
    current: User = Depends(get_current_user),
    service: BodyWeightService = Depends(get_service),
):
    return unwrap_found(service.get_by_id(current.id, body_weight_id), "Body weight")


@router.post("", response_model=BodyWeightOut, status_code=status.HTTP_201_CREATED)
def add_body_weight(
    body: BodyWeightIn,
    current: User = Depends(get_current_user),
    service: BodyWeightService = Depends(get_service),
):
    return unwrap(service.add(current.id, body))


@router.put("/{body_weight_id}", response_model=BodyWeightOut)
def update_body_weight(
    body_weight_id: int,
    body: BodyWeightIn,
    current: User = Depends(get_current_user),
    service: BodyWeightService = Depends(get_service),
):
    check_ids_match(body_weight_id, body.id, "Body weight")
    body = body.model_copy(update={"id": body_weight_id})
    return unwrap(service.update(current.id, body))


@router.delete("/{body_weight_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_body_weight(
    body_weight_id: int,
    current: User = Depends(get_current_user),
    service: BodyWeightService = Depends(get_service),
):
    unwrap(service.delete(current.id, body_weight_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
