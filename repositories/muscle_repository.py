# repositories/muscle_repository.py
from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select

from models.muscle import Muscle, MuscleSize
from repositories.base import BaseWorkoutRepository, DbModelRepository


class MuscleRepository(BaseWorkoutRepository[Muscle]):
    model = Muscle

    def get_parent_muscles(self) -> Sequence[Muscle]:
        return self.find(Muscle.parent_muscle_id.is_(None))

    def get_child_muscles(self, parent_id: int) -> Sequence[Muscle]:
        return self.find(Muscle.parent_muscle_id == parent_id)

    def get_by_ids(self, ids: list[int]) -> Sequence[Muscle]:
        if not ids:
            return []
        return self.find(Muscle.id.in_(ids))


class MuscleSizeRepository(DbModelRepository[MuscleSize]):
    model = MuscleSize

    def get_by_user(self, user_id: str, muscle_id: Optional[int] = None) -> Sequence[MuscleSize]:
        stmt = select(MuscleSize).where(MuscleSize.user_id == user_id)
        if muscle_id is not None:
            stmt = stmt.where(MuscleSize.muscle_id == muscle_id)
        return self.db.scalars(stmt.order_by(MuscleSize.date.desc(), MuscleSize.id.desc())).all()
