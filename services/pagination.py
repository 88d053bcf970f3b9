# services/pagination.py
from __future__ import annotations

import enum
import math
import types
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional, Sequence, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from schemas.common import ApiResult
from utils.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

SORT_ASC = "ASC"
SORT_DESC = "DESC"


@dataclass
class PageRequest:
    page_index: int = 0
    page_size: int = 10
    sort_column: Optional[str] = None
    sort_order: Optional[str] = None
    filter_column: Optional[str] = None
    filter_query: Optional[str] = None

    def is_valid(self) -> bool:
        return self.page_index >= 0 and self.page_size > 0


def normalize_sort_order(sort_order: Optional[str]) -> str:
    if sort_order and sort_order.upper() == SORT_DESC:
        return SORT_DESC
    return SORT_ASC


def _is_scalar(annotation: Any) -> bool:
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        return all(_is_scalar(arg) for arg in get_args(annotation) if arg is not type(None))
    if origin is not None:
        return False
    return not (isinstance(annotation, type) and issubclass(annotation, BaseModel))


def resolve_field(model_cls: type[BaseModel], column: str) -> str:
    """
    Map a camelCase or snake_case column name to a scalar DTO field name.

    List and nested model fields cannot be sorted or filtered on.
    """
    wanted = column.strip().lower()
    for name, field in model_cls.model_fields.items():
        if wanted in (name.lower(), to_camel(name).lower()) and _is_scalar(field.annotation):
            return name
    raise ValidationError(f"ERROR: Property '{column}' doesn't exist.")


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, enum.Enum):
        return str(value.value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def _sort_key(value: Any):
    if isinstance(value, enum.Enum):
        value = value.value
    # None first when ascending
    return (value is not None, value if value is not None else 0)


def paginate(items: Sequence[ModelT], request: PageRequest, model_cls: type[ModelT]) -> ApiResult[ModelT]:
    """
    Filter, sort and slice an in-memory list of DTOs.

    Raises ValidationError for an invalid page request or an unknown column.
    """
    if not request.is_valid():
        raise ValidationError("Invalid page index or page size.")

    rows = list(items)

    if request.filter_column:
        field = resolve_field(model_cls, request.filter_column)
    if request.filter_column and request.filter_query:
        query = request.filter_query.lower()
        rows = [r for r in rows if query in _as_text(getattr(r, field)).lower()]

    sort_order = None
    if request.sort_column:
        sort_order = normalize_sort_order(request.sort_order)
        field = resolve_field(model_cls, request.sort_column)
        rows.sort(key=lambda r: _sort_key(getattr(r, field)), reverse=sort_order == SORT_DESC)

    total_count = len(rows)
    total_pages = math.ceil(total_count / request.page_size)
    start = request.page_index * request.page_size
    page = rows[start:start + request.page_size]

    return ApiResult[model_cls](
        data=page,
        page_index=request.page_index,
        page_size=request.page_size,
        total_count=total_count,
        total_pages=total_pages,
        has_previous_page=request.page_index > 0,
        has_next_page=request.page_index + 1 < total_pages,
        sort_column=request.sort_column,
        sort_order=sort_order,
        filter_column=request.filter_column,
        filter_query=request.filter_query,
    )
