# models/body_weight.py
from __future__ import annotations

import enum
import datetime as dt
from typing import TYPE_CHECKING

from sqlalchemy import Integer, String, Float, Date, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from config.database import Base

if TYPE_CHECKING:
    from models.user import User


class WeightType(str, enum.Enum):
    kilogram = "Kilogram"
    pound = "Pound"


def weight_type_column() -> SAEnum:
    return SAEnum(WeightType, name="weighttype", native_enum=False, validate_strings=True,
                  values_callable=lambda e: [m.value for m in e])


class BodyWeight(Base):
    __tablename__ = "body_weights"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    weight: Mapped[float] = mapped_column(Float, nullable=False)
    weight_type: Mapped[WeightType] = mapped_column(weight_type_column(), nullable=False, default=WeightType.kilogram)
    user_id: Mapped[str] = mapped_column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    user: Mapped["User"] = relationship(back_populates="body_weights")
