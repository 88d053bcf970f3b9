# services/body_weight_service.py
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from models.body_weight import BodyWeight, WeightType
from repositories.body_weight_repository import BodyWeightRepository
from schemas.body_weight import BodyWeightIn, BodyWeightOut
from services.base import BaseService, ServiceResult, service_action
from utils.errors import EntryNullError, InvalidIDError, NotFoundError, PermissionDeniedError, ValidationError
from utils.units import DateTimeRange, kilograms_to_pounds, pounds_to_kilograms

ENTRY = "Body weight"


def weight_in_kilograms(weight: float, weight_type: WeightType) -> float:
    if weight_type == WeightType.pound:
        return pounds_to_kilograms(weight)
    return weight


def to_dto(body_weight: BodyWeight, unit: Optional[WeightType] = None) -> BodyWeightOut:
    """Map a row to its DTO, optionally expressed in ``unit``."""
    dto = BodyWeightOut.model_validate(body_weight)
    if unit is None or dto.weight_type == unit:
        return dto
    if unit == WeightType.kilogram:
        weight = pounds_to_kilograms(dto.weight)
    else:
        weight = kilograms_to_pounds(dto.weight)
    return dto.model_copy(update={"weight": weight, "weight_type": unit})


class BodyWeightService(BaseService):
    def __init__(self, db: Session):
        super().__init__(db)
        self.repository = BodyWeightRepository(db)

    def _get_owned(self, user_id: str, body_weight_id: int, action: str) -> BodyWeight:
        if body_weight_id < 1:
            raise InvalidIDError(ENTRY)
        body_weight = self.repository.get_by_id(body_weight_id)
        if body_weight is None:
            raise NotFoundError.by_id(ENTRY, body_weight_id)
        if body_weight.user_id != user_id:
            raise PermissionDeniedError(self.user_not_have_permission(action, "body weight"))
        return body_weight

    @staticmethod
    def _check_date(value: date) -> None:
        if value > date.today():
            raise ValidationError("Incorrect date.")

    # ============================================================
    # Reads
    # ============================================================
    @service_action("get", "body weight")
    def get_by_id(self, user_id: str, body_weight_id: int) -> ServiceResult[BodyWeightOut]:
        self.check_user_id(user_id)
        if body_weight_id < 1:
            raise InvalidIDError(ENTRY)
        body_weight = self.repository.get_by_id(body_weight_id)
        if body_weight is None:
            return ServiceResult.ok(None)
        if body_weight.user_id != user_id:
            return ServiceResult.fail(self.user_not_have_permission("get", "body weight"))
        return ServiceResult.ok(to_dto(body_weight))

    @service_action("get", "body weights")
    def get_user_body_weights(
        self,
        user_id: str,
        unit: Optional[WeightType] = None,
        date_range: Optional[DateTimeRange] = None,
    ) -> ServiceResult[list[BodyWeightOut]]:
        self.check_user_id(user_id)
        if date_range is not None and date_range.last_date > date.today():
            raise ValidationError("Incorrect date.")
        rows = self.repository.get_by_user(user_id)
        if date_range is not None:
            rows = [bw for bw in rows if date_range.contains(bw.date)]
        return ServiceResult.ok([to_dto(bw, unit) for bw in rows])

    def get_user_body_weights_in_kilograms(self, user_id: str, date_range: Optional[DateTimeRange] = None):
        return self.get_user_body_weights(user_id, WeightType.kilogram, date_range)

    def get_user_body_weights_in_pounds(self, user_id: str, date_range: Optional[DateTimeRange] = None):
        return self.get_user_body_weights(user_id, WeightType.pound, date_range)

    @service_action("get", "current body weight")
    def get_current(self, user_id: str) -> ServiceResult[BodyWeightOut]:
        self.check_user_id(user_id)
        rows = self.repository.get_by_user(user_id)
        return ServiceResult.ok(to_dto(rows[0]) if rows else None)

    @service_action("get", "min body weight")
    def get_min(self, user_id: str) -> ServiceResult[BodyWeightOut]:
        self.check_user_id(user_id)
        rows = self.repository.get_by_user(user_id)
        if not rows:
            return ServiceResult.ok(None)
        lightest = min(rows, key=lambda bw: weight_in_kilograms(bw.weight, bw.weight_type))
        return ServiceResult.ok(to_dto(lightest))

    @service_action("get", "max body weight")
    def get_max(self, user_id: str) -> ServiceResult[BodyWeightOut]:
        self.check_user_id(user_id)
        rows = self.repository.get_by_user(user_id)
        if not rows:
            return ServiceResult.ok(None)
        heaviest = max(rows, key=lambda bw: weight_in_kilograms(bw.weight, bw.weight_type))
        return ServiceResult.ok(to_dto(heaviest))

    # ============================================================
    # Writes
    # ============================================================
    @service_action("add", "body weight")
    def add(self, user_id: str, body_weight: Optional[BodyWeightIn]) -> ServiceResult[BodyWeightOut]:
        self.check_user_id(user_id)
        if body_weight is None:
            raise EntryNullError(ENTRY)
        if body_weight.id:
            raise ValidationError(self.invalid_entry_id_while_adding("BodyWeight", "body weight"))
        self._check_date(body_weight.date)

        entity = BodyWeight(
            date=body_weight.date,
            weight=body_weight.weight,
            weight_type=body_weight.weight_type,
            user_id=user_id,
        )
        return ServiceResult.ok(to_dto(self.repository.add(entity)))

    @service_action("update", "body weight")
    def update(self, user_id: str, body_weight: Optional[BodyWeightIn]) -> ServiceResult[BodyWeightOut]:
        self.check_user_id(user_id)
        if body_weight is None:
            raise EntryNullError(ENTRY)
        entity = self._get_owned(user_id, body_weight.id or 0, "update")
        self._check_date(body_weight.date)

        updated = self.repository.update(entity, {
            "date": body_weight.date,
            "weight": body_weight.weight,
            "weight_type": body_weight.weight_type,
        })
        return ServiceResult.ok(to_dto(updated))

    @service_action("delete", "body weight")
    def delete(self, user_id: str, body_weight_id: int) -> ServiceResult[None]:
        self.check_user_id(user_id)
        self._get_owned(user_id, body_weight_id, "delete")
        self.repository.remove(body_weight_id)
        return ServiceResult.ok()
