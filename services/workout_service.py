# services/workout_service.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from models.workout import Workout
from repositories.workout_repository import WorkoutRepository
from schemas.workout import WorkoutIn, WorkoutOut
from services.base import BaseService, ServiceResult, service_action
from utils.errors import ArgumentNullOrEmptyError, EntryNullError, InvalidIDError, NotFoundError, PermissionDeniedError, ValidationError

ENTRY = "Workout"


def to_dto(workout: Workout) -> WorkoutOut:
    return WorkoutOut.model_validate(workout)


class WorkoutService(BaseService):
    def __init__(self, db: Session):
        super().__init__(db)
        self.repository = WorkoutRepository(db)

    def _get_owned(self, user_id: str, workout_id: int, action: str) -> Workout:
        if workout_id < 1:
            raise InvalidIDError(ENTRY)
        workout = self.repository.get_by_id(workout_id)
        if workout is None:
            raise NotFoundError.by_id(ENTRY, workout_id)
        if workout.user_id != user_id:
            raise PermissionDeniedError(self.user_not_have_permission(action, "workout"))
        return workout

    def _check_unique_name(self, user_id: str, name: str, current_id: Optional[int] = None) -> None:
        same_name = self.repository.get_user_workout_by_name(user_id, name)
        if same_name is not None and same_name.id != current_id:
            raise ValidationError("Workout name must be unique.")

    # --- reads ---
    @service_action("get", "workouts")
    def get_user_workouts(self, user_id: str) -> ServiceResult[list[WorkoutOut]]:
        self.check_user_id(user_id)
        return ServiceResult.ok([to_dto(w) for w in self.repository.get_by_user(user_id)])

    @service_action("get", "workout")
    def get_by_id(self, user_id: str, workout_id: int) -> ServiceResult[WorkoutOut]:
        self.check_user_id(user_id)
        if workout_id < 1:
            raise InvalidIDError(ENTRY)
        workout = self.repository.get_by_id(workout_id)
        if workout is None:
            return ServiceResult.ok(None)
        if workout.user_id != user_id:
            return ServiceResult.fail(self.user_not_have_permission("get", "workout"))
        return ServiceResult.ok(to_dto(workout))

    @service_action("get", "workout")
    def get_by_name(self, user_id: str, name: str) -> ServiceResult[WorkoutOut]:
        self.check_user_id(user_id)
        if not name:
            raise ArgumentNullOrEmptyError("Workout name")
        workout = self.repository.get_user_workout_by_name(user_id, name)
        return ServiceResult.ok(to_dto(workout) if workout else None)

    @service_action("check", "workout")
    def exists(self, user_id: str, workout_id: int) -> ServiceResult[bool]:
        self.check_user_id(user_id)
        if workout_id < 1:
            raise InvalidIDError(ENTRY)
        workout = self.repository.get_by_id(workout_id)
        return ServiceResult.ok(workout is not None and workout.user_id == user_id)

    @service_action("check", "workout")
    def exists_by_name(self, user_id: str, name: str) -> ServiceResult[bool]:
        self.check_user_id(user_id)
        if not name:
            raise ArgumentNullOrEmptyError("Workout name")
        return ServiceResult.ok(self.repository.get_user_workout_by_name(user_id, name) is not None)

    # --- writes ---
    @service_action("add", "workout")
    def add(self, user_id: str, workout: Optional[WorkoutIn]) -> ServiceResult[WorkoutOut]:
        self.check_user_id(user_id)
        if workout is None:
            raise EntryNullError(ENTRY)
        if workout.id:
            raise ValidationError(self.invalid_entry_id_while_adding(ENTRY, "workout"))
        self._check_unique_name(user_id, workout.name)

        entity = Workout(
            name=workout.name,
            description=workout.description,
            created=datetime.utcnow(),
            is_pinned=False,
            count_of_trainings=0,
            user_id=user_id,
        )
        return ServiceResult.ok(to_dto(self.repository.add(entity)))

    @service_action("update", "workout")
    def update(self, user_id: str, workout: Optional[WorkoutIn]) -> ServiceResult[WorkoutOut]:
        self.check_user_id(user_id)
        if workout is None:
            raise EntryNullError(ENTRY)
        entity = self._get_owned(user_id, workout.id or 0, "update")
        self._check_unique_name(user_id, workout.name, entity.id)

        updated = self.repository.update(entity, {"name": workout.name, "description": workout.description})
        return ServiceResult.ok(to_dto(updated))

    @service_action("delete", "workout")
    def delete(self, user_id: str, workout_id: int) -> ServiceResult[None]:
        self.check_user_id(user_id)
        self._get_owned(user_id, workout_id, "delete")
        self.repository.remove(workout_id)
        return ServiceResult.ok()

    @service_action("pin", "workout")
    def pin(self, user_id: str, workout_id: int) -> ServiceResult[WorkoutOut]:
        self.check_user_id(user_id)
        entity = self._get_owned(user_id, workout_id, "pin")
        return ServiceResult.ok(to_dto(self.repository.update(entity, {"is_pinned": True})))

    @service_action("unpin", "workout")
    def unpin(self, user_id: str, workout_id: int) -> ServiceResult[WorkoutOut]:
        self.check_user_id(user_id)
        entity = self._get_owned(user_id, workout_id, "unpin")
        return ServiceResult.ok(to_dto(self.repository.update(entity, {"is_pinned": False})))

    @service_action("complete", "workout")
    def complete(self, user_id: str, workout_id: int) -> ServiceResult[WorkoutOut]:
        """Count one more training for the workout and for its user."""
        self.check_user_id(user_id)
        entity = self._get_owned(user_id, workout_id, "complete")
        user = self.user_repository.get_by_id(user_id)

        entity.count_of_trainings += 1
        user.count_of_trainings += 1
        if user.started_working_out is None:
            user.started_working_out = datetime.utcnow()
        self.db.commit()
        self.db.refresh(entity)
        return ServiceResult.ok(to_dto(entity))
