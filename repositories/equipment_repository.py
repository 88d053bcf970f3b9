# repositories/equipment_repository.py
from __future__ import annotations

from typing import Sequence

from sqlalchemy import or_, select

from models.equipment import Equipment
from models.exercise import exercise_equipments
from models.exercise_record import ExerciseRecord
from repositories.base import BaseWorkoutRepository


class EquipmentRepository(BaseWorkoutRepository[Equipment]):
    model = Equipment

    def get_internal(self) -> Sequence[Equipment]:
        return self.find(Equipment.owned_by_user_id.is_(None))

    def get_owned_by(self, user_id: str) -> Sequence[Equipment]:
        return self.find(Equipment.owned_by_user_id == user_id)

    def get_visible_to(self, user_id: str) -> Sequence[Equipment]:
        return self.find(or_(Equipment.owned_by_user_id.is_(None), Equipment.owned_by_user_id == user_id))

    def get_used_by(self, user_id: str) -> Sequence[Equipment]:
        """Equipment of the exercises the user has records for."""
        used_exercises = select(ExerciseRecord.exercise_id).where(ExerciseRecord.user_id == user_id)
        used = select(exercise_equipments.c.equipment_id).where(exercise_equipments.c.exercise_id.in_(used_exercises))
        return self.find(Equipment.id.in_(used))

    def get_by_ids(self, ids: list[int]) -> Sequence[Equipment]:
        if not ids:
            return []
        return self.find(Equipment.id.in_(ids))
