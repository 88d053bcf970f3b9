# schemas/workout.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from schemas.common import CamelModel


class WorkoutIn(CamelModel):
    id: Optional[int] = None
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None


class WorkoutOut(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    created: datetime
    is_pinned: bool
    count_of_trainings: int
    user_id: str
