# schemas/exercise_record.py
from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import Field

from models.body_weight import WeightType
from models.exercise import ExerciseType
from schemas.common import CamelModel


class ExerciseRecordIn(CamelModel):
    id: Optional[int] = None
    date: dt.date
    weight: Optional[float] = Field(default=None, ge=0)
    weight_type: WeightType = WeightType.kilogram
    time_seconds: Optional[int] = Field(default=None, ge=0)
    reps: Optional[int] = Field(default=None, ge=0)
    exercise_id: int


class ExerciseRecordOut(CamelModel):
    id: int
    date: dt.date
    weight: Optional[float] = None
    weight_type: WeightType
    time_seconds: Optional[int] = None
    reps: Optional[int] = None
    exercise_id: int
    exercise_name: Optional[str] = None
    exercise_type: Optional[ExerciseType] = None
    user_id: str
