# models/user.py
from __future__ import annotations

import enum
import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Integer, String, DateTime, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from config.database import Base

if TYPE_CHECKING:
    from models.body_weight import BodyWeight
    from models.equipment import Equipment
    from models.exercise import Exercise
    from models.exercise_record import ExerciseRecord
    from models.muscle import MuscleSize
    from models.workout import Workout


class RoleEnum(str, enum.Enum):
    admin = "Admin"
    user = "User"


def _new_user_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_user_id)
    user_name: Mapped[str] = mapped_column(String(256), unique=True, index=True, nullable=False)
    email: Mapped[str] = mapped_column(String(256), unique=True, index=True, nullable=False)
    password_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)

    role: Mapped[RoleEnum] = mapped_column(
        SAEnum(RoleEnum, name="roleenum", native_enum=False, validate_strings=True,
               values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=RoleEnum.user,
    )

    registered: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), nullable=False)
    started_working_out: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    count_of_trainings: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Owned collections, removed together with the user
    body_weights: Mapped[list["BodyWeight"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    muscle_sizes: Mapped[list["MuscleSize"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    workouts: Mapped[list["Workout"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    exercise_records: Mapped[list["ExerciseRecord"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    created_exercises: Mapped[list["Exercise"]] = relationship(
        back_populates="created_by_user", cascade="all, delete-orphan"
    )
    owned_equipments: Mapped[list["Equipment"]] = relationship(
        back_populates="owned_by_user", cascade="all, delete-orphan"
    )

    @property
    def roles(self) -> list[str]:
        # Admins also hold the regular user role
        if self.role == RoleEnum.admin:
            return [RoleEnum.admin.value, RoleEnum.user.value]
        return [RoleEnum.user.value]

    def is_admin(self) -> bool:
        return self.role == RoleEnum.admin
