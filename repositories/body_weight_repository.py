# repositories/body_weight_repository.py
from __future__ import annotations

from typing import Sequence

from sqlalchemy import select

from models.body_weight import BodyWeight
from repositories.base import DbModelRepository


class BodyWeightRepository(DbModelRepository[BodyWeight]):
    model = BodyWeight

    def get_by_user(self, user_id: str) -> Sequence[BodyWeight]:
        stmt = (
            select(BodyWeight)
            .where(BodyWeight.user_id == user_id)
            .order_by(BodyWeight.date.desc(), BodyWeight.id.desc())
        )
        return self.db.scalars(stmt).all()
