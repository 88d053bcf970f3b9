# services/base.py
from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from sqlalchemy.orm import Session

from repositories.user_repository import UserRepository
from utils.errors import ArgumentNullOrEmptyError, NotFoundError, WorkoutTrackerError

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass
class ServiceResult(Generic[T]):
    """Outcome of a service call: either a model or an error message."""

    success: bool
    model: Optional[T] = None
    error_message: Optional[str] = None

    @classmethod
    def ok(cls, model: Optional[T] = None) -> "ServiceResult[T]":
        return cls(success=True, model=model)

    @classmethod
    def fail(cls, error: Union[str, Exception]) -> "ServiceResult[T]":
        message = getattr(error, "message", None) or str(error)
        return cls(success=False, error_message=message)


class BaseService:
    """Shared message builders and checks for the entity services."""

    def __init__(self, db: Session):
        self.db = db
        self.user_repository = UserRepository(db)

    # --- messages ---
    @staticmethod
    def failed_to_action(model: str, action: str, detail: Optional[str] = None) -> str:
        if detail:
            return f"Failed to {action} {model}: {detail}."
        return f"Failed to {action} {model}."

    @staticmethod
    def invalid_entry_id_while_adding(entry: str, model: str) -> str:
        return f"{entry} ID must not be set when adding a new {model}."

    @staticmethod
    def user_not_have_permission(action: str, entry: str) -> str:
        return f"User does not have permission to {action} this {entry} entry."

    # --- checks ---
    def check_user_id(self, user_id: Optional[str]) -> None:
        if not user_id:
            raise ArgumentNullOrEmptyError("User ID")
        if not self.user_repository.user_exists(user_id):
            raise NotFoundError.by_id("User", user_id)

    def failed(self, model: str, action: str, exc: Exception) -> ServiceResult[Any]:
        """Log an unexpected error and wrap it into a failed result."""
        self.db.rollback()
        logger.exception("Failed to %s %s", action, model)
        return ServiceResult.fail(self.failed_to_action(model, action, str(exc)))


def service_action(action: str, model: str) -> Callable:
    """
    Wrap a service method so it always returns a ServiceResult.

    Application errors become ``ServiceResult.fail(message)``; anything else
    is logged and reported as ``Failed to <action> <model>: <detail>.``
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(self: BaseService, *args, **kwargs) -> ServiceResult[Any]:
            try:
                return func(self, *args, **kwargs)
            except WorkoutTrackerError as exc:
                self.db.rollback()
                return ServiceResult.fail(exc)
            except Exception as exc:
                return self.failed(model, action, exc)

        return wrapper

    return decorator
