# models/muscle.py
from __future__ import annotations

import enum
import datetime as dt
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Integer, String, Float, Date, Boolean, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from config.database import Base

if TYPE_CHECKING:
    from models.exercise import Exercise
    from models.user import User


class SizeType(str, enum.Enum):
    centimeter = "Centimeter"
    inch = "Inch"


class Muscle(Base):
    __tablename__ = "muscles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_measurable: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    parent_muscle_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("muscles.id", ondelete="SET NULL"), nullable=True, index=True
    )

    parent_muscle: Mapped[Optional["Muscle"]] = relationship(
        back_populates="child_muscles", remote_side="Muscle.id"
    )
    child_muscles: Mapped[list["Muscle"]] = relationship(back_populates="parent_muscle")
    muscle_sizes: Mapped[list["MuscleSize"]] = relationship(
        back_populates="muscle", cascade="all, delete-orphan"
    )
    exercises: Mapped[list["Exercise"]] = relationship(
        secondary="exercise_muscles", back_populates="working_muscles"
    )


class MuscleSize(Base):
    __tablename__ = "muscle_sizes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    size: Mapped[float] = mapped_column(Float, nullable=False)
    size_type: Mapped[SizeType] = mapped_column(
        SAEnum(SizeType, name="sizetype", native_enum=False, validate_strings=True,
               values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=SizeType.centimeter,
    )
    muscle_id: Mapped[int] = mapped_column(Integer, ForeignKey("muscles.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    muscle: Mapped["Muscle"] = relationship(back_populates="muscle_sizes")
    user: Mapped["User"] = relationship(back_populates="muscle_sizes")
