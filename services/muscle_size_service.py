# services/muscle_size_service.py
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from models.muscle import MuscleSize, SizeType
from repositories.muscle_repository import MuscleRepository, MuscleSizeRepository
from schemas.muscle import MuscleSizeIn, MuscleSizeOut
from services.base import BaseService, ServiceResult, service_action
from utils.errors import EntryNullError, InvalidIDError, NotFoundError, PermissionDeniedError, ValidationError
from utils.units import DateTimeRange, centimeters_to_inches, inches_to_centimeters

ENTRY = "Muscle size"


def size_in_centimeters(size: float, size_type: SizeType) -> float:
    if size_type == SizeType.inch:
        return inches_to_centimeters(size)
    return size


def to_dto(muscle_size: MuscleSize, unit: Optional[SizeType] = None) -> MuscleSizeOut:
    dto = MuscleSizeOut.model_validate(muscle_size)
    if unit is None or dto.size_type == unit:
        return dto
    if unit == SizeType.centimeter:
        size = inches_to_centimeters(dto.size)
    else:
        size = centimeters_to_inches(dto.size)
    return dto.model_copy(update={"size": size, "size_type": unit})


class MuscleSizeService(BaseService):
    def __init__(self, db: Session):
        super().__init__(db)
        self.repository = MuscleSizeRepository(db)
        self.muscle_repository = MuscleRepository(db)

    def _get_owned(self, user_id: str, muscle_size_id: int, action: str) -> MuscleSize:
        if muscle_size_id < 1:
            raise InvalidIDError(ENTRY)
        muscle_size = self.repository.get_by_id(muscle_size_id)
        if muscle_size is None:
            raise NotFoundError.by_id(ENTRY, muscle_size_id)
        if muscle_size.user_id != user_id:
            raise PermissionDeniedError(self.user_not_have_permission(action, "muscle size"))
        return muscle_size

    def _check_muscle(self, muscle_id: int) -> None:
        if muscle_id < 1:
            raise InvalidIDError("Muscle")
        muscle = self.muscle_repository.get_by_id(muscle_id)
        if muscle is None:
            raise NotFoundError.by_id("Muscle", muscle_id)
        if not muscle.is_measurable:
            raise ValidationError(f"Muscle '{muscle.name}' is not measurable.")

    def _check_input(self, muscle_size: MuscleSizeIn) -> None:
        if muscle_size.date > date.today():
            raise ValidationError("Incorrect date.")
        self._check_muscle(muscle_size.muscle_id)

    @service_action("get", "muscle size")
    def get_by_id(self, user_id: str, muscle_size_id: int) -> ServiceResult[MuscleSizeOut]:
        self.check_user_id(user_id)
        if muscle_size_id < 1:
            raise InvalidIDError(ENTRY)
        muscle_size = self.repository.get_by_id(muscle_size_id)
        if muscle_size is None:
            return ServiceResult.ok(None)
        if muscle_size.user_id != user_id:
            return ServiceResult.fail(self.user_not_have_permission("get", "muscle size"))
        return ServiceResult.ok(to_dto(muscle_size))

    @service_action("get", "muscle sizes")
    def get_user_muscle_sizes(
        self,
        user_id: str,
        unit: Optional[SizeType] = None,
        muscle_id: Optional[int] = None,
        date_range: Optional[DateTimeRange] = None,
    ) -> ServiceResult[list[MuscleSizeOut]]:
        self.check_user_id(user_id)
        if muscle_id is not None and muscle_id < 1:
            raise InvalidIDError("Muscle")
        if date_range is not None and date_range.last_date > date.today():
            raise ValidationError("Incorrect date.")
        rows = self.repository.get_by_user(user_id, muscle_id)
        if date_range is not None:
            rows = [ms for ms in rows if date_range.contains(ms.date)]
        return ServiceResult.ok([to_dto(ms, unit) for ms in rows])

    def get_user_muscle_sizes_in_centimeters(self, user_id: str, muscle_id: Optional[int] = None,
                                             date_range: Optional[DateTimeRange] = None):
        return self.get_user_muscle_sizes(user_id, SizeType.centimeter, muscle_id, date_range)

    def get_user_muscle_sizes_in_inches(self, user_id: str, muscle_id: Optional[int] = None,
                                        date_range: Optional[DateTimeRange] = None):
        return self.get_user_muscle_sizes(user_id, SizeType.inch, muscle_id, date_range)

    def _extreme(self, user_id: str, muscle_id: int, pick) -> ServiceResult[MuscleSizeOut]:
        self.check_user_id(user_id)
        if muscle_id < 1:
            raise InvalidIDError("Muscle")
        if not self.muscle_repository.exists(muscle_id):
            raise NotFoundError.by_id("Muscle", muscle_id)
        rows = self.repository.get_by_user(user_id, muscle_id)
        if not rows:
            return ServiceResult.ok(None)
        chosen = pick(rows, key=lambda ms: size_in_centimeters(ms.size, ms.size_type))
        return ServiceResult.ok(to_dto(chosen))

    @service_action("get", "min muscle size")
    def get_min(self, user_id: str, muscle_id: int) -> ServiceResult[MuscleSizeOut]:
        return self._extreme(user_id, muscle_id, min)

    @service_action("get", "max muscle size")
    def get_max(self, user_id: str, muscle_id: int) -> ServiceResult[MuscleSizeOut]:
        return self._extreme(user_id, muscle_id, max)

    @service_action("add", "muscle size")
    def add(self, user_id: str, muscle_size: Optional[MuscleSizeIn]) -> ServiceResult[MuscleSizeOut]:
        self.check_user_id(user_id)
        if muscle_size is None:
            raise EntryNullError(ENTRY)
        if muscle_size.id:
            raise ValidationError(self.invalid_entry_id_while_adding("MuscleSize", "muscle size"))
        self._check_input(muscle_size)

        entity = MuscleSize(
            date=muscle_size.date,
            size=muscle_size.size,
            size_type=muscle_size.size_type,
            muscle_id=muscle_size.muscle_id,
            user_id=user_id,
        )
        return ServiceResult.ok(to_dto(self.repository.add(entity)))

    @service_action("update", "muscle size")
    def update(self, user_id: str, muscle_size: Optional[MuscleSizeIn]) -> ServiceResult[MuscleSizeOut]:
        self.check_user_id(user_id)
        if muscle_size is None:
            raise EntryNullError(ENTRY)
        entity = self._get_owned(user_id, muscle_size.id or 0, "update")
        self._check_input(muscle_size)

        updated = self.repository.update(entity, {
            "date": muscle_size.date,
            "size": muscle_size.size,
            "size_type": muscle_size.size_type,
            "muscle_id": muscle_size.muscle_id,
        })
        return ServiceResult.ok(to_dto(updated))

    @service_action("delete", "muscle size")
    def delete(self, user_id: str, muscle_size_id: int) -> ServiceResult[None]:
        self.check_user_id(user_id)
        self._get_owned(user_id, muscle_size_id, "delete")
        self.repository.remove(muscle_size_id)
        return ServiceResult.ok()
