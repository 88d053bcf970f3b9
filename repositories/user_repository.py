# repositories/user_repository.py
from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select

from models.user import User, RoleEnum
from repositories.base import DbModelRepository


class UserRepository(DbModelRepository[User]):
    model = User

    def get_by_user_name(self, user_name: str) -> Optional[User]:
        return self.first(User.user_name == user_name)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.first(User.email == email)

    def user_exists(self, user_id: str) -> bool:
        return self.exists(user_id)

    def user_exists_by_user_name(self, user_name: str) -> bool:
        return self.get_by_user_name(user_name) is not None

    def get_by_role(self, role: RoleEnum) -> Sequence[User]:
        # Admins also hold the User role
        if role == RoleEnum.user:
            return self.get_all()
        return self.db.scalars(select(User).where(User.role == role).order_by(User.user_name)).all()
