# services/exercise_record_service.py
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from models.exercise import Exercise, ExerciseType
from models.exercise_record import ExerciseRecord
from repositories.exercise_record_repository import ExerciseRecordRepository
from repositories.exercise_repository import ExerciseRepository
from schemas.exercise_record import ExerciseRecordIn, ExerciseRecordOut
from services.base import BaseService, ServiceResult, service_action
from utils.errors import EntryNullError, InvalidIDError, NotFoundError, PermissionDeniedError, ValidationError
from utils.units import DateTimeRange

ENTRY = "Exercise record"

# fields an exercise type requires on its records
REQUIRED_FIELDS = {
    ExerciseType.reps: ("reps",),
    ExerciseType.time: ("time_seconds",),
    ExerciseType.weight_and_reps: ("weight", "reps"),
    ExerciseType.weight_and_time: ("weight", "time_seconds"),
}


def to_dto(record: ExerciseRecord) -> ExerciseRecordOut:
    dto = ExerciseRecordOut.model_validate(record)
    if record.exercise is not None:
        dto = dto.model_copy(update={"exercise_name": record.exercise.name, "exercise_type": record.exercise.type})
    return dto


class ExerciseRecordService(BaseService):
    def __init__(self, db: Session):
        super().__init__(db)
        self.repository = ExerciseRecordRepository(db)
        self.exercise_repository = ExerciseRepository(db)

    def _get_owned(self, user_id: str, record_id: int, action: str) -> ExerciseRecord:
        if record_id < 1:
            raise InvalidIDError(ENTRY)
        record = self.repository.get_by_id(record_id)
        if record is None:
            raise NotFoundError.by_id(ENTRY, record_id)
        if record.user_id != user_id:
            raise PermissionDeniedError(self.user_not_have_permission(action, "exercise record"))
        return record

    def _check_input(self, user_id: str, record: ExerciseRecordIn) -> Exercise:
        if record.date > date.today():
            raise ValidationError("Incorrect date.")
        if record.exercise_id < 1:
            raise InvalidIDError("Exercise")
        exercise = self.exercise_repository.get_by_id(record.exercise_id)
        if exercise is None:
            raise NotFoundError.by_id("Exercise", record.exercise_id)
        if exercise.created_by_user_id is not None and exercise.created_by_user_id != user_id:
            raise PermissionDeniedError(self.user_not_have_permission("use", "exercise"))

        missing = [f for f in REQUIRED_FIELDS[exercise.type] if getattr(record, f) is None]
        if missing:
            raise ValidationError(
                f"Exercise of type '{exercise.type.value}' requires: {', '.join(missing)}."
            )
        return exercise

    @service_action("get", "exercise records")
    def get_user_exercise_records(
        self,
        user_id: str,
        exercise_id: Optional[int] = None,
        exercise_type: Optional[ExerciseType] = None,
        date_range: Optional[DateTimeRange] = None,
    ) -> ServiceResult[list[ExerciseRecordOut]]:
        self.check_user_id(user_id)
        if exercise_id is not None and exercise_id < 1:
            raise InvalidIDError("Exercise")
        if date_range is not None and date_range.last_date > date.today():
            raise ValidationError("Incorrect date.")
        rows = self.repository.get_by_user(user_id, exercise_id, exercise_type)
        if date_range is not None:
            rows = [r for r in rows if date_range.contains(r.date)]
        return ServiceResult.ok([to_dto(r) for r in rows])

    @service_action("get", "exercise record")
    def get_by_id(self, user_id: str, record_id: int) -> ServiceResult[ExerciseRecordOut]:
        self.check_user_id(user_id)
        if record_id < 1:
            raise InvalidIDError(ENTRY)
        record = self.repository.get_by_id(record_id)
        if record is None:
            return ServiceResult.ok(None)
        if record.user_id != user_id:
            return ServiceResult.fail(self.user_not_have_permission("get", "exercise record"))
        return ServiceResult.ok(to_dto(record))

    @service_action("add", "exercise record")
    def add(self, user_id: str, record: Optional[ExerciseRecordIn]) -> ServiceResult[ExerciseRecordOut]:
        self.check_user_id(user_id)
        if record is None:
            raise EntryNullError(ENTRY)
        if record.id:
            raise ValidationError(self.invalid_entry_id_while_adding("ExerciseRecord", "exercise record"))
        self._check_input(user_id, record)

        entity = ExerciseRecord(
            date=record.date,
            weight=record.weight,
            weight_type=record.weight_type,
            time_seconds=record.time_seconds,
            reps=record.reps,
            exercise_id=record.exercise_id,
            user_id=user_id,
        )
        return ServiceResult.ok(to_dto(self.repository.add(entity)))

    @service_action("update", "exercise record")
    def update(self, user_id: str, record: Optional[ExerciseRecordIn]) -> ServiceResult[ExerciseRecordOut]:
        self.check_user_id(user_id)
        if record is None:
            raise EntryNullError(ENTRY)
        entity = self._get_owned(user_id, record.id or 0, "update")
        self._check_input(user_id, record)

        updated = self.repository.update(entity, {
            "date": record.date,
            "weight": record.weight,
            "weight_type": record.weight_type,
            "time_seconds": record.time_seconds,
            "reps": record.reps,
            "exercise_id": record.exercise_id,
        })
        return ServiceResult.ok(to_dto(updated))

    @service_action("delete", "exercise record")
    def delete(self, user_id: str, record_id: int) -> ServiceResult[None]:
        self.check_user_id(user_id)
        self._get_owned(user_id, record_id, "delete")
        self.repository.remove(record_id)
        return ServiceResult.ok()
