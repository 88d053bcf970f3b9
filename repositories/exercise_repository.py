# repositories/exercise_repository.py
from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import or_, select

from models.exercise import Exercise, ExerciseType, exercise_muscles
from models.exercise_record import ExerciseRecord
from repositories.base import BaseWorkoutRepository


class ExerciseRepository(BaseWorkoutRepository[Exercise]):
    model = Exercise

    def get_internal(self, exercise_type: Optional[ExerciseType] = None) -> Sequence[Exercise]:
        criteria = [Exercise.created_by_user_id.is_(None)]
        if exercise_type is not None:
            criteria.append(Exercise.type == exercise_type)
        return self.find(*criteria)

    def get_created_by(self, user_id: str, exercise_type: Optional[ExerciseType] = None) -> Sequence[Exercise]:
        criteria = [Exercise.created_by_user_id == user_id]
        if exercise_type is not None:
            criteria.append(Exercise.type == exercise_type)
        return self.find(*criteria)

    def get_visible_to(self, user_id: str, exercise_type: Optional[ExerciseType] = None) -> Sequence[Exercise]:
        criteria = [or_(Exercise.created_by_user_id.is_(None), Exercise.created_by_user_id == user_id)]
        if exercise_type is not None:
            criteria.append(Exercise.type == exercise_type)
        return self.find(*criteria)

    def get_used_by(self, user_id: str, exercise_type: Optional[ExerciseType] = None) -> Sequence[Exercise]:
        """Exercises the user has at least one record for."""
        used = select(ExerciseRecord.exercise_id).where(ExerciseRecord.user_id == user_id)
        criteria = [Exercise.id.in_(used)]
        if exercise_type is not None:
            criteria.append(Exercise.type == exercise_type)
        return self.find(*criteria)

    def get_by_muscle(self, muscle_id: int, user_id: str) -> Sequence[Exercise]:
        working = select(exercise_muscles.c.exercise_id).where(exercise_muscles.c.muscle_id == muscle_id)
        return self.find(
            Exercise.id.in_(working),
            or_(Exercise.created_by_user_id.is_(None), Exercise.created_by_user_id == user_id),
        )
