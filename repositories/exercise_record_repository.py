# repositories/exercise_record_repository.py
from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select

from models.exercise import Exercise, ExerciseType
from models.exercise_record import ExerciseRecord
from repositories.base import DbModelRepository


class ExerciseRecordRepository(DbModelRepository[ExerciseRecord]):
    model = ExerciseRecord

    def get_by_user(
        self,
        user_id: str,
        exercise_id: Optional[int] = None,
        exercise_type: Optional[ExerciseType] = None,
    ) -> Sequence[ExerciseRecord]:
        stmt = select(ExerciseRecord).where(ExerciseRecord.user_id == user_id)
        if exercise_id is not None:
            stmt = stmt.where(ExerciseRecord.exercise_id == exercise_id)
        if exercise_type is not None:
            stmt = stmt.join(ExerciseRecord.exercise).where(Exercise.type == exercise_type)
        stmt = stmt.order_by(ExerciseRecord.date.desc(), ExerciseRecord.id.desc())
        return self.db.scalars(stmt).unique().all()
