# models/equipment.py
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Integer, String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from config.database import Base

if TYPE_CHECKING:
    from models.exercise import Exercise
    from models.user import User


class Equipment(Base):
    """Gym equipment; internal when ``owned_by_user_id`` is empty."""
    __tablename__ = "equipments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    owned_by_user_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True
    )

    owned_by_user: Mapped[Optional["User"]] = relationship(back_populates="owned_equipments")
    exercises: Mapped[list["Exercise"]] = relationship(
        secondary="exercise_equipments", back_populates="equipments"
    )
