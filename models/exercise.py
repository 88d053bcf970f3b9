# models/exercise.py
from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Column, Integer, String, Text, ForeignKey, Table, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from config.database import Base

if TYPE_CHECKING:
    from models.equipment import Equipment
    from models.exercise_record import ExerciseRecord
    from models.muscle import Muscle
    from models.user import User


class ExerciseType(str, enum.Enum):
    reps = "Reps"
    time = "Time"
    weight_and_reps = "WeightAndReps"
    weight_and_time = "WeightAndTime"


exercise_muscles = Table(
    "exercise_muscles",
    Base.metadata,
    Column("exercise_id", Integer, ForeignKey("exercises.id", ondelete="CASCADE"), primary_key=True),
    Column("muscle_id", Integer, ForeignKey("muscles.id", ondelete="CASCADE"), primary_key=True),
)

exercise_equipments = Table(
    "exercise_equipments",
    Base.metadata,
    Column("exercise_id", Integer, ForeignKey("exercises.id", ondelete="CASCADE"), primary_key=True),
    Column("equipment_id", Integer, ForeignKey("equipments.id", ondelete="CASCADE"), primary_key=True),
)


class Exercise(Base):
    """Exercise catalogue entry; internal when ``created_by_user_id`` is empty."""
    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    type: Mapped[ExerciseType] = mapped_column(
        SAEnum(ExerciseType, name="exercisetype", native_enum=False, validate_strings=True,
               values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=ExerciseType.weight_and_reps,
    )
    created_by_user_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True
    )

    created_by_user: Mapped[Optional["User"]] = relationship(back_populates="created_exercises")
    working_muscles: Mapped[list["Muscle"]] = relationship(
        secondary=exercise_muscles, back_populates="exercises", lazy="selectin"
    )
    equipments: Mapped[list["Equipment"]] = relationship(
        secondary=exercise_equipments, back_populates="exercises", lazy="selectin"
    )
    exercise_records: Mapped[list["ExerciseRecord"]] = relationship(
        back_populates="exercise", cascade="all, delete-orphan"
    )
