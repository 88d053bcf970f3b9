# repositories/base.py
from __future__ import annotations

from typing import Any, Generic, Iterable, Optional, Sequence, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from config.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class DbModelRepository(Generic[ModelT]):
    """
    Thin wrapper over the ORM operations for one mapped model.

    Write methods commit the session and refresh the instances they touch.
    """

    model: Type[ModelT]

    def __init__(self, db: Session, model: Optional[Type[ModelT]] = None):
        self.db = db
        if model is not None:
            self.model = model

    # --- writes ---
    def add(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def add_range(self, entities: Iterable[ModelT]) -> list[ModelT]:
        entities = list(entities)
        self.db.add_all(entities)
        self.db.commit()
        for entity in entities:
            self.db.refresh(entity)
        return entities

    def update(self, entity: ModelT, values: Optional[dict[str, Any]] = None) -> ModelT:
        for key, value in (values or {}).items():
            setattr(entity, key, value)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def remove(self, entity_id: Any) -> bool:
        entity = self.get_by_id(entity_id)
        if entity is None:
            return False
        self.db.delete(entity)
        self.db.commit()
        return True

    def remove_range(self, entities: Iterable[ModelT]) -> None:
        for entity in entities:
            self.db.delete(entity)
        self.db.commit()

    # --- reads ---
    def get_by_id(self, entity_id: Any) -> Optional[ModelT]:
        return self.db.get(self.model, entity_id)

    def get_all(self) -> Sequence[ModelT]:
        return self.db.scalars(select(self.model).order_by(self.model.id)).all()

    def find(self, *criteria) -> Sequence[ModelT]:
        return self.db.scalars(select(self.model).where(*criteria).order_by(self.model.id)).all()

    def first(self, *criteria) -> Optional[ModelT]:
        return self.db.scalars(select(self.model).where(*criteria).limit(1)).first()

    def exists(self, entity_id: Any) -> bool:
        return self.get_by_id(entity_id) is not None

    def count(self, *criteria) -> int:
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        return self.db.scalar(stmt) or 0


class BaseWorkoutRepository(DbModelRepository[ModelT]):
    """Repository for models identified by a ``name`` column."""

    def get_by_name(self, name: str) -> Optional[ModelT]:
        return self.first(self.model.name == name)

    def exists_by_name(self, name: str) -> bool:
        return self.get_by_name(name) is not None
