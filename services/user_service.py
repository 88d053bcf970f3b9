# services/user_service.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from models.user import User, RoleEnum
from schemas.user import PasswordChange, UserCreate, UserOut, UserUpdate
from services.base import BaseService, ServiceResult, service_action
from utils.errors import ArgumentNullOrEmptyError, EntryNullError, NotFoundError, PermissionDeniedError, ValidationError
from utils.security import hash_password, verify_password

ENTRY = "User"


def to_dto(user: User) -> UserOut:
    return UserOut.model_validate(user)


def parse_role(role: Optional[str]) -> RoleEnum:
    if not role:
        raise ArgumentNullOrEmptyError("Role")
    for member in RoleEnum:
        if member.value.lower() == role.strip().lower():
            return member
    raise NotFoundError.by_name("Role", role)


class UserService(BaseService):
    def __init__(self, db: Session):
        super().__init__(db)
        self.repository = self.user_repository

    def _get_existing(self, user_id: str) -> User:
        if not user_id:
            raise ArgumentNullOrEmptyError("User ID")
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError.by_id(ENTRY, user_id)
        return user

    def _check_unique(self, user_name: str, email: str, current_id: Optional[str] = None) -> None:
        by_name = self.repository.get_by_user_name(user_name)
        if by_name is not None and by_name.id != current_id:
            raise ValidationError("Name already registered.")
        by_email = self.repository.get_by_email(email)
        if by_email is not None and by_email.id != current_id:
            raise ValidationError("Email already registered.")

    # --- reads ---
    @service_action("get", "users")
    def get_users(self) -> ServiceResult[list[UserOut]]:
        return ServiceResult.ok([to_dto(u) for u in self.repository.get_all()])

    @service_action("get", "user")
    def get_by_id(self, user_id: str) -> ServiceResult[UserOut]:
        if not user_id:
            raise ArgumentNullOrEmptyError("User ID")
        user = self.repository.get_by_id(user_id)
        return ServiceResult.ok(to_dto(user) if user else None)

    @service_action("get", "user ID")
    def get_user_id_by_user_name(self, user_name: str) -> ServiceResult[str]:
        if not user_name:
            raise ArgumentNullOrEmptyError("User name")
        user = self.repository.get_by_user_name(user_name)
        return ServiceResult.ok(user.id if user else None)

    @service_action("check", "user")
    def user_exists(self, user_id: str) -> ServiceResult[bool]:
        if not user_id:
            raise ArgumentNullOrEmptyError("User ID")
        return ServiceResult.ok(self.repository.user_exists(user_id))

    @service_action("check", "user")
    def user_exists_by_user_name(self, user_name: str) -> ServiceResult[bool]:
        if not user_name:
            raise ArgumentNullOrEmptyError("User name")
        return ServiceResult.ok(self.repository.user_exists_by_user_name(user_name))

    @service_action("get", "user roles")
    def get_roles(self, user_id: str) -> ServiceResult[list[str]]:
        return ServiceResult.ok(self._get_existing(user_id).roles)

    @service_action("get", "users by role")
    def get_users_by_role(self, role: str) -> ServiceResult[list[UserOut]]:
        return ServiceResult.ok([to_dto(u) for u in self.repository.get_by_role(parse_role(role))])

    # --- writes ---
    @service_action("create", "user")
    def create(self, user: Optional[UserCreate]) -> ServiceResult[UserOut]:
        if user is None:
            raise EntryNullError(ENTRY)
        self._check_unique(user.user_name, user.email)
        entity = User(
            user_name=user.user_name,
            email=user.email,
            password_hash=hash_password(user.password),
            role=RoleEnum.user,
            registered=datetime.utcnow(),
        )
        return ServiceResult.ok(to_dto(self.repository.add(entity)))

    @service_action("update", "user")
    def update(self, acting_user: User, user: Optional[UserUpdate]) -> ServiceResult[UserOut]:
        """Users update their own profile; admins may update anyone."""
        if user is None:
            raise EntryNullError(ENTRY)
        entity = self._get_existing(user.id)
        if entity.id != acting_user.id and not acting_user.is_admin():
            raise PermissionDeniedError(self.user_not_have_permission("update", "user"))
        self._check_unique(user.user_name, user.email, entity.id)

        updated = self.repository.update(entity, {"user_name": user.user_name, "email": user.email})
        return ServiceResult.ok(to_dto(updated))

    @service_action("change", "password")
    def change_password(self, user_id: str, change: Optional[PasswordChange]) -> ServiceResult[None]:
        if change is None:
            raise EntryNullError("Password")
        entity = self._get_existing(user_id)
        if not verify_password(change.old_password, entity.password_hash):
            raise ValidationError("Incorrect password.")
        if change.new_password != change.confirm_new_password:
            raise ValidationError("Passwords do not match.")
        self.repository.update(entity, {"password_hash": hash_password(change.new_password)})
        return ServiceResult.ok()

    @service_action("set", "user role")
    def set_role(self, user_id: str, role: str) -> ServiceResult[UserOut]:
        entity = self._get_existing(user_id)
        updated = self.repository.update(entity, {"role": parse_role(role)})
        return ServiceResult.ok(to_dto(updated))

    @service_action("delete", "user")
    def delete(self, user_id: str) -> ServiceResult[None]:
        self._get_existing(user_id)
        self.repository.remove(user_id)
        return ServiceResult.ok()
