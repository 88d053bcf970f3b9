# services/exercise_service.py
from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from models.exercise import Exercise, ExerciseType
from repositories.equipment_repository import EquipmentRepository
from repositories.exercise_repository import ExerciseRepository
from repositories.muscle_repository import MuscleRepository
from schemas.exercise import ExerciseIn, ExerciseOut
from services.base import ServiceResult, service_action
from services.catalog import CatalogService
from utils.errors import EntryNullError, NotFoundError, PermissionDeniedError, ValidationError


def to_dto(exercise: Exercise) -> ExerciseOut:
    return ExerciseOut.model_validate(exercise)


class ExerciseService(CatalogService):
    entry = "Exercise"
    model_name = "exercise"
    owner_attr = "created_by_user_id"

    def __init__(self, db: Session):
        super().__init__(db)
        self.repository = ExerciseRepository(db)
        self.muscle_repository = MuscleRepository(db)
        self.equipment_repository = EquipmentRepository(db)

    # --- helpers ---
    def _load_muscles(self, muscle_ids: list[int]):
        muscle_ids = list(dict.fromkeys(muscle_ids))
        muscles = self.muscle_repository.get_by_ids(muscle_ids)
        missing = set(muscle_ids) - {m.id for m in muscles}
        if missing:
            raise NotFoundError.by_id("Muscle", sorted(missing)[0])
        return list(muscles)

    def _load_equipments(self, equipment_ids: list[int], owner_id: Optional[str]):
        equipment_ids = list(dict.fromkeys(equipment_ids))
        equipments = self.equipment_repository.get_by_ids(equipment_ids)
        missing = set(equipment_ids) - {e.id for e in equipments}
        if missing:
            raise NotFoundError.by_id("Equipment", sorted(missing)[0])
        for equipment in equipments:
            # internal exercises may only use internal equipment
            if equipment.owned_by_user_id is not None and equipment.owned_by_user_id != owner_id:
                raise PermissionDeniedError(f"Equipment '{equipment.name}' is not available for this exercise.")
        return list(equipments)

    def _build(self, exercise: Optional[ExerciseIn], owner_id: Optional[str]) -> Exercise:
        if exercise is None:
            raise EntryNullError(self.entry)
        if exercise.id:
            raise ValidationError(self.invalid_entry_id_while_adding(self.entry, "exercise"))
        self.check_unique_name(exercise.name)
        entity = Exercise(
            name=exercise.name,
            image=exercise.image,
            description=exercise.description,
            type=exercise.type,
            created_by_user_id=owner_id,
        )
        entity.working_muscles = self._load_muscles(exercise.muscle_ids)
        entity.equipments = self._load_equipments(exercise.equipment_ids, owner_id)
        return entity

    def _apply(self, entity: Exercise, exercise: ExerciseIn) -> ExerciseOut:
        self.check_unique_name(exercise.name, entity.id)
        entity.working_muscles = self._load_muscles(exercise.muscle_ids)
        entity.equipments = self._load_equipments(exercise.equipment_ids, entity.created_by_user_id)
        updated = self.repository.update(entity, {
            "name": exercise.name,
            "image": exercise.image,
            "description": exercise.description,
            "type": exercise.type,
        })
        return to_dto(updated)

    def _get_editable(self, user_id: str, exercise_id: int, is_admin: bool) -> Exercise:
        self.check_id(exercise_id)
        entity = self.repository.get_by_id(exercise_id)
        if entity is None:
            raise NotFoundError.by_id(self.entry, exercise_id)
        owner = entity.created_by_user_id
        if (owner is None and not is_admin) or (owner is not None and owner != user_id):
            raise PermissionDeniedError(self.user_not_have_permission("update", "exercise"))
        return entity

    # ============================================================
    # Internal exercises
    # ============================================================
    @service_action("get", "internal exercises")
    def get_internal_exercises(self, exercise_type: Optional[ExerciseType] = None) -> ServiceResult[list[ExerciseOut]]:
        return ServiceResult.ok([to_dto(e) for e in self.repository.get_internal(exercise_type)])

    @service_action("get", "internal exercise")
    def get_internal_by_id(self, exercise_id: int) -> ServiceResult[ExerciseOut]:
        self.check_id(exercise_id)
        exercise = self.repository.get_by_id(exercise_id)
        if exercise is None or exercise.created_by_user_id is not None:
            return ServiceResult.ok(None)
        return ServiceResult.ok(to_dto(exercise))

    @service_action("get", "internal exercise")
    def get_internal_by_name(self, name: str) -> ServiceResult[ExerciseOut]:
        self.check_name(name)
        exercise = self.repository.get_by_name(name)
        if exercise is None or exercise.created_by_user_id is not None:
            return ServiceResult.ok(None)
        return ServiceResult.ok(to_dto(exercise))

    @service_action("check", "internal exercise")
    def internal_exists(self, exercise_id: int) -> ServiceResult[bool]:
        self.check_id(exercise_id)
        exercise = self.repository.get_by_id(exercise_id)
        return ServiceResult.ok(exercise is not None and exercise.created_by_user_id is None)

    @service_action("check", "internal exercise")
    def internal_exists_by_name(self, name: str) -> ServiceResult[bool]:
        self.check_name(name)
        exercise = self.repository.get_by_name(name)
        return ServiceResult.ok(exercise is not None and exercise.created_by_user_id is None)

    @service_action("add", "internal exercise")
    def add_internal(self, exercise: Optional[ExerciseIn]) -> ServiceResult[ExerciseOut]:
        entity = self._build(exercise, None)
        return ServiceResult.ok(to_dto(self.repository.add(entity)))

    @service_action("update", "internal exercise")
    def update_internal(self, exercise: Optional[ExerciseIn]) -> ServiceResult[ExerciseOut]:
        if exercise is None:
            raise EntryNullError(self.entry)
        entity = self.get_internal_entity(exercise.id or 0, "update")
        return ServiceResult.ok(self._apply(entity, exercise))

    @service_action("delete", "internal exercise")
    def delete_internal(self, exercise_id: int) -> ServiceResult[None]:
        self.get_internal_entity(exercise_id, "delete")
        self.repository.remove(exercise_id)
        return ServiceResult.ok()

    # ============================================================
    # User exercises
    # ============================================================
    @service_action("get", "user exercises")
    def get_user_exercises(self, user_id: str, exercise_type: Optional[ExerciseType] = None) -> ServiceResult[list[ExerciseOut]]:
        self.check_user_id(user_id)
        return ServiceResult.ok([to_dto(e) for e in self.repository.get_created_by(user_id, exercise_type)])

    @service_action("get", "exercises")
    def get_all_exercises(self, user_id: str, exercise_type: Optional[ExerciseType] = None) -> ServiceResult[list[ExerciseOut]]:
        self.check_user_id(user_id)
        return ServiceResult.ok([to_dto(e) for e in self.repository.get_visible_to(user_id, exercise_type)])

    @service_action("get", "used exercises")
    def get_used_exercises(self, user_id: str, exercise_type: Optional[ExerciseType] = None) -> ServiceResult[list[ExerciseOut]]:
        self.check_user_id(user_id)
        return ServiceResult.ok([to_dto(e) for e in self.repository.get_used_by(user_id, exercise_type)])

    @service_action("get", "exercise")
    def get_by_name(self, user_id: str, name: str) -> ServiceResult[ExerciseOut]:
        self.check_user_id(user_id)
        self.check_name(name)
        exercise = self.repository.get_by_name(name)
        if exercise is None:
            return ServiceResult.ok(None)
        if not self.is_visible_to(exercise, user_id):
            return ServiceResult.fail(self.user_not_have_permission("get", "exercise"))
        return ServiceResult.ok(to_dto(exercise))

    @service_action("get", "exercise")
    def get_by_id(self, user_id: str, exercise_id: int) -> ServiceResult[ExerciseOut]:
        """Any exercise the user can see: internal ones and their own."""
        self.check_user_id(user_id)
        self.check_id(exercise_id)
        exercise = self.repository.get_by_id(exercise_id)
        if exercise is None:
            return ServiceResult.ok(None)
        if not self.is_visible_to(exercise, user_id):
            return ServiceResult.fail(self.user_not_have_permission("get", "exercise"))
        return ServiceResult.ok(to_dto(exercise))

    @service_action("get", "user exercise")
    def get_user_by_id(self, user_id: str, exercise_id: int) -> ServiceResult[ExerciseOut]:
        self.check_user_id(user_id)
        self.check_id(exercise_id)
        exercise = self.repository.get_by_id(exercise_id)
        if exercise is None:
            return ServiceResult.ok(None)
        if exercise.created_by_user_id != user_id:
            return ServiceResult.fail(self.user_not_have_permission("get", "exercise"))
        return ServiceResult.ok(to_dto(exercise))

    @service_action("get", "user exercise")
    def get_user_by_name(self, user_id: str, name: str) -> ServiceResult[ExerciseOut]:
        self.check_user_id(user_id)
        self.check_name(name)
        exercise = self.repository.get_by_name(name)
        if exercise is None:
            return ServiceResult.ok(None)
        if exercise.created_by_user_id != user_id:
            return ServiceResult.fail(self.user_not_have_permission("get", "exercise"))
        return ServiceResult.ok(to_dto(exercise))

    @service_action("check", "user exercise")
    def user_exists(self, user_id: str, exercise_id: int) -> ServiceResult[bool]:
        self.check_user_id(user_id)
        self.check_id(exercise_id)
        exercise = self.repository.get_by_id(exercise_id)
        return ServiceResult.ok(exercise is not None and exercise.created_by_user_id == user_id)

    @service_action("check", "user exercise")
    def user_exists_by_name(self, user_id: str, name: str) -> ServiceResult[bool]:
        self.check_user_id(user_id)
        self.check_name(name)
        exercise = self.repository.get_by_name(name)
        return ServiceResult.ok(exercise is not None and exercise.created_by_user_id == user_id)

    @service_action("add", "user exercise")
    def add_user(self, user_id: str, exercise: Optional[ExerciseIn]) -> ServiceResult[ExerciseOut]:
        self.check_user_id(user_id)
        entity = self._build(exercise, user_id)
        return ServiceResult.ok(to_dto(self.repository.add(entity)))

    @service_action("update", "user exercise")
    def update_user(self, user_id: str, exercise: Optional[ExerciseIn]) -> ServiceResult[ExerciseOut]:
        self.check_user_id(user_id)
        if exercise is None:
            raise EntryNullError(self.entry)
        entity = self.get_user_entity(user_id, exercise.id or 0, "update")
        return ServiceResult.ok(self._apply(entity, exercise))

    @service_action("delete", "user exercise")
    def delete_user(self, user_id: str, exercise_id: int) -> ServiceResult[None]:
        self.check_user_id(user_id)
        self.get_user_entity(user_id, exercise_id, "delete")
        self.repository.remove(exercise_id)
        return ServiceResult.ok()

    # ============================================================
    # Muscles and equipment of an exercise
    # ============================================================
    @service_action("update", "exercise muscles")
    def update_exercise_muscles(
        self, user_id: str, exercise_id: int, muscle_ids: list[int], is_admin: bool = False
    ) -> ServiceResult[ExerciseOut]:
        self.check_user_id(user_id)
        entity = self._get_editable(user_id, exercise_id, is_admin)
        entity.working_muscles = self._load_muscles(muscle_ids or [])
        return ServiceResult.ok(to_dto(self.repository.update(entity)))

    @service_action("update", "exercise equipment")
    def update_exercise_equipments(
        self, user_id: str, exercise_id: int, equipment_ids: list[int], is_admin: bool = False
    ) -> ServiceResult[ExerciseOut]:
        self.check_user_id(user_id)
        entity = self._get_editable(user_id, exercise_id, is_admin)
        entity.equipments = self._load_equipments(equipment_ids or [], entity.created_by_user_id)
        return ServiceResult.ok(to_dto(self.repository.update(entity)))
