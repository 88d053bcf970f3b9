# models/exercise_record.py
from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING

from sqlalchemy import Integer, String, Float, Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from config.database import Base
from models.body_weight import WeightType, weight_type_column

if TYPE_CHECKING:
    from models.exercise import Exercise
    from models.user import User


class ExerciseRecord(Base):
    __tablename__ = "exercise_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    weight_type: Mapped[WeightType] = mapped_column(weight_type_column(), nullable=False, default=WeightType.kilogram)
    time_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    exercise_id: Mapped[int] = mapped_column(Integer, ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    exercise: Mapped["Exercise"] = relationship(back_populates="exercise_records", lazy="joined")
    user: Mapped["User"] = relationship(back_populates="exercise_records")
