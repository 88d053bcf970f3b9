# repositories/workout_repository.py
from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select

from models.workout import Workout
from repositories.base import BaseWorkoutRepository


class WorkoutRepository(BaseWorkoutRepository[Workout]):
    model = Workout

    def get_by_user(self, user_id: str) -> Sequence[Workout]:
        stmt = (
            select(Workout)
            .where(Workout.user_id == user_id)
            .order_by(Workout.is_pinned.desc(), Workout.created.desc(), Workout.id.desc())
        )
        return self.db.scalars(stmt).all()

    def get_user_workout_by_name(self, user_id: str, name: str) -> Optional[Workout]:
        return self.first(Workout.user_id == user_id, Workout.name == name)
