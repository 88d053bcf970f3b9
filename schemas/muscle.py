# schemas/muscle.py
from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import Field

from models.muscle import SizeType
from schemas.common import CamelModel


class MuscleIn(CamelModel):
    id: Optional[int] = None
    name: str = Field(min_length=1, max_length=255)
    image: Optional[str] = None
    is_measurable: bool = False
    parent_muscle_id: Optional[int] = None


class MuscleOut(CamelModel):
    id: int
    name: str
    image: Optional[str] = None
    is_measurable: bool
    parent_muscle_id: Optional[int] = None


class MuscleSizeIn(CamelModel):
    id: Optional[int] = None
    date: dt.date
    size: float = Field(gt=0)
    size_type: SizeType = SizeType.centimeter
    muscle_id: int


class MuscleSizeOut(CamelModel):
    id: int
    date: dt.date
    size: float
    size_type: SizeType
    muscle_id: int
    user_id: str
