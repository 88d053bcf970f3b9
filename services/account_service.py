# services/account_service.py
from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from models.user import User, RoleEnum
from repositories.user_repository import UserRepository
from schemas.account import AuthResultOut, LoginIn, RegisterIn, TokenOut
from utils.errors import EntryNullError
from utils.security import JWT_EXPIRATION_DAYS, create_token, hash_password, verify_password

logger = logging.getLogger(__name__)


def build_token(user: User) -> TokenOut:
    """Sign a token carrying the user id, name and roles."""
    roles = user.roles
    token = create_token({"sub": user.id, "name": user.user_name, "roles": roles})
    return TokenOut(token_str=token, expiration_days=JWT_EXPIRATION_DAYS, roles=roles)


class AccountService:
    def __init__(self, db: Session):
        self.db = db
        self.user_repository = UserRepository(db)

    def login(self, login: LoginIn) -> AuthResultOut:
        if login is None:
            raise EntryNullError("Login")

        user = self.user_repository.get_by_user_name(login.user_name)
        if user is None or not verify_password(login.password, user.password_hash):
            logger.info("Failed login attempt for '%s'", login.user_name)
            return AuthResultOut(success=False, message="Password or/and login invalid")

        return AuthResultOut(success=True, message="Login successful", token=build_token(user))

    def register(self, register: RegisterIn) -> AuthResultOut:
        if register is None:
            raise EntryNullError("Register")

        if self.user_repository.get_by_user_name(register.user_name) is not None:
            return AuthResultOut(success=False, message="Name already registered.")
        if self.user_repository.get_by_email(register.email) is not None:
            return AuthResultOut(success=False, message="Email already registered.")
        if register.password != register.confirm_password:
            return AuthResultOut(success=False, message="Passwords do not match.")

        try:
            user = self.user_repository.add(User(
                user_name=register.user_name,
                email=register.email,
                password_hash=hash_password(register.password),
                role=RoleEnum.user,
                registered=datetime.utcnow(),
            ))
        except Exception as exc:
            self.db.rollback()
            logger.exception("Register failed for '%s'", register.user_name)
            return AuthResultOut(success=False, message=f"Register failed: {exc}")

        logger.info("Registered user '%s'", user.user_name)
        return AuthResultOut(success=True, message="Register successful", token=build_token(user))

    def get_token(self, user: User) -> TokenOut:
        return build_token(user)
