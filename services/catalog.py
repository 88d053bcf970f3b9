# services/catalog.py
from __future__ import annotations

from typing import Any, Optional

from services.base import BaseService
from utils.errors import ArgumentNullOrEmptyError, InvalidIDError, NotFoundError, PermissionDeniedError, ValidationError


class CatalogService(BaseService):
    """
    Common rules for entries that are either internal (no owner, managed by
    admins) or owned by one user: equipment and exercises.

    Subclasses set ``entry``, ``model_name``, ``owner_attr`` and
    ``repository``.
    """

    entry: str
    model_name: str
    owner_attr: str

    def owner_of(self, entity: Any) -> Optional[str]:
        return getattr(entity, self.owner_attr)

    def check_id(self, entity_id: int) -> None:
        if entity_id < 1:
            raise InvalidIDError(self.entry)

    def check_name(self, name: Optional[str]) -> None:
        if not name:
            raise ArgumentNullOrEmptyError(f"{self.entry} name")

    def check_unique_name(self, name: str, current_id: Optional[int] = None) -> None:
        same_name = self.repository.get_by_name(name)
        if same_name is not None and same_name.id != current_id:
            raise ValidationError(f"{self.entry} name must be unique.")

    def get_internal_entity(self, entity_id: int, action: str) -> Any:
        self.check_id(entity_id)
        entity = self.repository.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError.by_id(self.entry, entity_id)
        if self.owner_of(entity) is not None:
            raise PermissionDeniedError(f"Cannot {action} a user {self.model_name} as an internal one.")
        return entity

    def get_user_entity(self, user_id: str, entity_id: int, action: str) -> Any:
        self.check_id(entity_id)
        entity = self.repository.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError.by_id(self.entry, entity_id)
        if self.owner_of(entity) != user_id:
            raise PermissionDeniedError(self.user_not_have_permission(action, self.model_name))
        return entity

    def is_visible_to(self, entity: Any, user_id: str) -> bool:
        owner = self.owner_of(entity)
        return owner is None or owner == user_id
