# utils/units.py
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from utils.errors import ValidationError

POUNDS_TO_KILOGRAMS = 0.453592
KILOGRAMS_TO_POUNDS = 2.20462
CENTIMETERS_TO_INCHES = 0.393701
INCHES_TO_CENTIMETERS = 2.54


def pounds_to_kilograms(value: float) -> float:
    return value * POUNDS_TO_KILOGRAMS


def kilograms_to_pounds(value: float) -> float:
    return value * KILOGRAMS_TO_POUNDS


def centimeters_to_inches(value: float) -> float:
    return value * CENTIMETERS_TO_INCHES


def inches_to_centimeters(value: float) -> float:
    return value * INCHES_TO_CENTIMETERS


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


class DateTimeRange:
    """Inclusive range of calendar days."""

    def __init__(self, first_date: date | datetime, last_date: date | datetime):
        first, last = _as_date(first_date), _as_date(last_date)
        if first > last:
            raise ValidationError("First date must be earlier than or equal to the last date.")
        self.first_date = first
        self.last_date = last

    @property
    def count_of_days(self) -> int:
        return (self.last_date - self.first_date).days + 1

    def contains(self, value: date | datetime) -> bool:
        value = _as_date(value)
        return self.first_date <= value <= self.last_date

    def __repr__(self) -> str:
        return f"DateTimeRange({self.first_date.isoformat()}, {self.last_date.isoformat()})"


def build_range(first_date: Optional[date], last_date: Optional[date]) -> Optional[DateTimeRange]:
    """
    Build a range from optional query parameters.

    Returns None when neither bound is given. A missing first date opens the
    range at ``date.min``, a missing last date closes it today. A last date in
    the future is rejected with ``Incorrect date.``
    """
    if first_date is None and last_date is None:
        return None
    today = date.today()
    last = last_date or today
    if last > today:
        raise ValidationError("Incorrect date.")
    return DateTimeRange(first_date or date.min, last)
