# services/muscle_service.py
from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from models.muscle import Muscle
from repositories.exercise_repository import ExerciseRepository
from repositories.muscle_repository import MuscleRepository
from schemas.exercise import ExerciseOut
from schemas.muscle import MuscleIn, MuscleOut
from services.base import BaseService, ServiceResult, service_action
from services.exercise_service import to_dto as exercise_to_dto
from utils.errors import ArgumentNullOrEmptyError, EntryNullError, InvalidIDError, NotFoundError, ValidationError

ENTRY = "Muscle"


def to_dto(muscle: Muscle) -> MuscleOut:
    return MuscleOut.model_validate(muscle)


class MuscleService(BaseService):
    def __init__(self, db: Session):
        super().__init__(db)
        self.repository = MuscleRepository(db)

    def _get_existing(self, muscle_id: int) -> Muscle:
        if muscle_id < 1:
            raise InvalidIDError(ENTRY)
        muscle = self.repository.get_by_id(muscle_id)
        if muscle is None:
            raise NotFoundError.by_id(ENTRY, muscle_id)
        return muscle

    def _check_parent(self, muscle_id: Optional[int], parent_id: Optional[int]) -> None:
        if parent_id is None:
            return
        if muscle_id and parent_id == muscle_id:
            raise ValidationError("Muscle cannot be its own parent.")
        if not self.repository.exists(parent_id):
            raise NotFoundError.by_id("Parent muscle", parent_id)
        if muscle_id and muscle_id in self._lineage(parent_id):
            raise ValidationError("Muscle cannot be a child of its own descendant.")

    def _lineage(self, muscle_id: int) -> set[int]:
        """``muscle_id`` and the ids of all its ancestors."""
        seen: set[int] = set()
        current = self.repository.get_by_id(muscle_id)
        while current is not None and current.id not in seen:
            seen.add(current.id)
            if current.parent_muscle_id is None:
                break
            current = self.repository.get_by_id(current.parent_muscle_id)
        return seen

    # --- reads ---
    @service_action("get", "muscles")
    def get_muscles(self, is_measurable: Optional[bool] = None) -> ServiceResult[list[MuscleOut]]:
        if is_measurable is None:
            rows = self.repository.get_all()
        else:
            rows = self.repository.find(Muscle.is_measurable.is_(is_measurable))
        return ServiceResult.ok([to_dto(m) for m in rows])

    @service_action("get", "parent muscles")
    def get_parent_muscles(self) -> ServiceResult[list[MuscleOut]]:
        return ServiceResult.ok([to_dto(m) for m in self.repository.get_parent_muscles()])

    @service_action("get", "child muscles")
    def get_child_muscles(self, parent_id: int) -> ServiceResult[list[MuscleOut]]:
        self._get_existing(parent_id)
        return ServiceResult.ok([to_dto(m) for m in self.repository.get_child_muscles(parent_id)])

    @service_action("get", "muscle")
    def get_by_id(self, muscle_id: int) -> ServiceResult[MuscleOut]:
        if muscle_id < 1:
            raise InvalidIDError(ENTRY)
        muscle = self.repository.get_by_id(muscle_id)
        return ServiceResult.ok(to_dto(muscle) if muscle else None)

    @service_action("get", "muscle")
    def get_by_name(self, name: str) -> ServiceResult[MuscleOut]:
        if not name:
            raise ArgumentNullOrEmptyError("Muscle name")
        muscle = self.repository.get_by_name(name)
        return ServiceResult.ok(to_dto(muscle) if muscle else None)

    @service_action("get", "muscle exercises")
    def get_muscle_exercises(self, user_id: str, muscle_id: int) -> ServiceResult[list[ExerciseOut]]:
        self.check_user_id(user_id)
        self._get_existing(muscle_id)
        rows = ExerciseRepository(self.db).get_by_muscle(muscle_id, user_id)
        return ServiceResult.ok([exercise_to_dto(e) for e in rows])

    @service_action("check", "muscle")
    def exists(self, muscle_id: int) -> ServiceResult[bool]:
        if muscle_id < 1:
            raise InvalidIDError(ENTRY)
        return ServiceResult.ok(self.repository.exists(muscle_id))

    @service_action("check", "muscle")
    def exists_by_name(self, name: str) -> ServiceResult[bool]:
        if not name:
            raise ArgumentNullOrEmptyError("Muscle name")
        return ServiceResult.ok(self.repository.exists_by_name(name))

    # --- writes (admin) ---
    @service_action("add", "muscle")
    def add(self, muscle: Optional[MuscleIn]) -> ServiceResult[MuscleOut]:
        if muscle is None:
            raise EntryNullError(ENTRY)
        if muscle.id:
            raise ValidationError(self.invalid_entry_id_while_adding(ENTRY, "muscle"))
        if self.repository.exists_by_name(muscle.name):
            raise ValidationError("Muscle name must be unique.")
        self._check_parent(None, muscle.parent_muscle_id)

        entity = Muscle(
            name=muscle.name,
            image=muscle.image,
            is_measurable=muscle.is_measurable,
            parent_muscle_id=muscle.parent_muscle_id,
        )
        return ServiceResult.ok(to_dto(self.repository.add(entity)))

    @service_action("update", "muscle")
    def update(self, muscle: Optional[MuscleIn]) -> ServiceResult[MuscleOut]:
        if muscle is None:
            raise EntryNullError(ENTRY)
        entity = self._get_existing(muscle.id or 0)
        same_name = self.repository.get_by_name(muscle.name)
        if same_name is not None and same_name.id != entity.id:
            raise ValidationError("Muscle name must be unique.")
        self._check_parent(entity.id, muscle.parent_muscle_id)

        updated = self.repository.update(entity, {
            "name": muscle.name,
            "image": muscle.image,
            "is_measurable": muscle.is_measurable,
            "parent_muscle_id": muscle.parent_muscle_id,
        })
        return ServiceResult.ok(to_dto(updated))

    @service_action("update", "muscle children")
    def update_children(self, muscle_id: int, child_ids: Optional[list[int]]) -> ServiceResult[list[MuscleOut]]:
        """Replace the child muscles of ``muscle_id`` with ``child_ids``."""
        parent = self._get_existing(muscle_id)
        child_ids = list(dict.fromkeys(child_ids or []))
        if muscle_id in child_ids:
            raise ValidationError("Muscle cannot be its own parent.")
        ancestors = self._lineage(parent.id) & set(child_ids)
        if ancestors:
            raise ValidationError(f"Muscle with ID {min(ancestors)} is an ancestor of muscle with ID {parent.id}.")

        children = self.repository.get_by_ids(child_ids)
        missing = set(child_ids) - {m.id for m in children}
        if missing:
            raise NotFoundError.by_id(ENTRY, sorted(missing)[0])

        for current in self.repository.get_child_muscles(parent.id):
            if current.id not in child_ids:
                current.parent_muscle_id = None
        for child in children:
            child.parent_muscle_id = parent.id
        self.db.commit()
        return ServiceResult.ok([to_dto(m) for m in self.repository.get_child_muscles(parent.id)])

    @service_action("delete", "muscle")
    def delete(self, muscle_id: int) -> ServiceResult[None]:
        self._get_existing(muscle_id)
        self.repository.remove(muscle_id)
        return ServiceResult.ok()
