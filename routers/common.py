# routers/common.py
from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence, Type, TypeVar

from fastapi import HTTPException, Query, status
from pydantic import BaseModel

from schemas.common import ApiResult
from services.base import ServiceResult
from services.pagination import PageRequest, paginate
from utils.errors import ValidationError
from utils.units import DateTimeRange, build_range

ModelT = TypeVar("ModelT", bound=BaseModel)


# -------------------------------
# Query parameters
# -------------------------------
def page_params(
    page_index: int = Query(0, alias="pageIndex"),
    page_size: int = Query(10, alias="pageSize"),
    sort_column: Optional[str] = Query(None, alias="sortColumn"),
    sort_order: Optional[str] = Query(None, alias="sortOrder"),
    filter_column: Optional[str] = Query(None, alias="filterColumn"),
    filter_query: Optional[str] = Query(None, alias="filterQuery"),
) -> PageRequest:
    request = PageRequest(page_index, page_size, sort_column, sort_order, filter_column, filter_query)
    if not request.is_valid():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid page index or page size.")
    return request


def date_range_params(
    first_date: Optional[date] = Query(None, alias="firstDate"),
    last_date: Optional[date] = Query(None, alias="lastDate"),
) -> Optional[DateTimeRange]:
    try:
        return build_range(first_date, last_date)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)


# -------------------------------
# Result unwrapping
# -------------------------------
def unwrap(result: ServiceResult) -> Any:
    """Return the model of a successful result, 400 otherwise."""
    if not result.success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error_message)
    return result.model


def unwrap_found(result: ServiceResult, entry: str) -> Any:
    model = unwrap(result)
    if model is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{entry} not found.")
    return model


def unwrap_page(result: ServiceResult, request: PageRequest, model_cls: Type[ModelT]) -> ApiResult[ModelT]:
    items: Sequence[ModelT] = unwrap(result) or []
    try:
        return paginate(items, request, model_cls)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)


def check_ids_match(path_id: Any, body_id: Any, entry: str) -> None:
    if body_id is not None and path_id != body_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{entry} IDs do not match.")
