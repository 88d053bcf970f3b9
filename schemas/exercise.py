# schemas/exercise.py
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from models.exercise import ExerciseType
from schemas.common import CamelModel


class ExerciseIn(CamelModel):
    id: Optional[int] = None
    name: str = Field(min_length=1, max_length=255)
    image: Optional[str] = None
    description: Optional[str] = None
    type: ExerciseType = ExerciseType.weight_and_reps
    muscle_ids: List[int] = []
    equipment_ids: List[int] = []


class NamedRef(CamelModel):
    id: int
    name: str


class ExerciseOut(CamelModel):
    id: int
    name: str
    image: Optional[str] = None
    description: Optional[str] = None
    type: ExerciseType
    created_by_user_id: Optional[str] = None
    working_muscles: List[NamedRef] = []
    equipments: List[NamedRef] = []
