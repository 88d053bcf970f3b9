# schemas/body_weight.py
from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import Field

from models.body_weight import WeightType
from schemas.common import CamelModel


class BodyWeightIn(CamelModel):
    id: Optional[int] = None
    date: dt.date
    weight: float = Field(gt=0)
    weight_type: WeightType = WeightType.kilogram


class BodyWeightOut(CamelModel):
    id: int
    date: dt.date
    weight: float
    weight_type: WeightType
    user_id: str
