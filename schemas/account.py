# schemas/account.py
from __future__ import annotations

from typing import List, Optional

from pydantic import EmailStr, Field

from schemas.common import CamelModel


class RegisterIn(CamelModel):
    user_name: str = Field(min_length=1, max_length=256)
    email: EmailStr
    password: str = Field(min_length=6)
    confirm_password: str


class LoginIn(CamelModel):
    user_name: str
    password: str


class TokenOut(CamelModel):
    token_str: str
    expiration_days: int
    roles: List[str]


class AuthResultOut(CamelModel):
    success: bool
    message: Optional[str] = None
    token: Optional[TokenOut] = None
