# schemas/user.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field

from schemas.common import CamelModel


class UserOut(CamelModel):
    id: str
    user_name: str
    email: str
    registered: Optional[datetime] = None
    started_working_out: Optional[datetime] = None
    count_of_trainings: int = 0
    roles: List[str] = []


class UserCreate(CamelModel):
    user_name: str = Field(min_length=1, max_length=256)
    email: EmailStr
    password: str = Field(min_length=6)


class UserUpdate(CamelModel):
    id: str
    user_name: str = Field(min_length=1, max_length=256)
    email: EmailStr


class PasswordChange(CamelModel):
    old_password: str
    new_password: str = Field(min_length=6)
    confirm_new_password: str


class RoleIn(CamelModel):
    role: str
