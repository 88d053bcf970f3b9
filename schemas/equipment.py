# schemas/equipment.py
from typing import Optional

from pydantic import Field

from schemas.common import CamelModel


class EquipmentIn(CamelModel):
    id: Optional[int] = None
    name: str = Field(min_length=1, max_length=255)
    image: Optional[str] = None


class EquipmentOut(CamelModel):
    id: int
    name: str
    image: Optional[str] = None
    owned_by_user_id: Optional[str] = None
