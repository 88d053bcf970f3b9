from datetime import date

import pytest

from models.muscle import Muscle, SizeType
from schemas.muscle import MuscleSizeIn
from services.muscle_size_service import MuscleSizeService


@pytest.fixture
def service(db):
    return MuscleSizeService(db)


def _add(service, user, muscle, size, size_type=SizeType.centimeter):
    result = service.add(user.id, MuscleSizeIn(date=date.today(), size=size, size_type=size_type, muscle_id=muscle.id))
    assert result.success, result.error_message
    return result.model


def test_add_requires_measurable_muscle(service, user, db):
    abs_ = Muscle(name="Abs", is_measurable=False)
    db.add(abs_)
    db.commit()

    result = service.add(user.id, MuscleSizeIn(date=date.today(), size=30, muscle_id=abs_.id))
    assert result.error_message == "Muscle 'Abs' is not measurable."


def test_add_requires_existing_muscle(service, user):
    result = service.add(user.id, MuscleSizeIn(date=date.today(), size=30, muscle_id=77))
    assert result.error_message == "Muscle with ID 77 not found."


def test_min_max_compare_in_centimeters(service, user, measurable_muscle):
    _add(service, user, measurable_muscle, 38)
    biggest = _add(service, user, measurable_muscle, 16, SizeType.inch)  # 40.64 cm
    smallest = _add(service, user, measurable_muscle, 35)

    assert service.get_max(user.id, measurable_muscle.id).model.id == biggest.id
    assert service.get_min(user.id, measurable_muscle.id).model.id == smallest.id


def test_in_inches(service, user, measurable_muscle):
    _add(service, user, measurable_muscle, 100)
    result = service.get_user_muscle_sizes_in_inches(user.id, measurable_muscle.id)
    assert result.model[0].size == pytest.approx(39.3701)
    assert result.model[0].size_type == SizeType.inch


def test_in_centimeters(service, user, measurable_muscle):
    _add(service, user, measurable_muscle, 10, SizeType.inch)
    result = service.get_user_muscle_sizes_in_centimeters(user.id)
    assert result.model[0].size == pytest.approx(25.4)


def test_ownership(service, user, other_user, measurable_muscle):
    size = _add(service, user, measurable_muscle, 38)

    result = service.get_by_id(other_user.id, size.id)
    assert result.error_message == "User does not have permission to get this muscle size entry."

    result = service.delete(other_user.id, size.id)
    assert result.error_message == "User does not have permission to delete this muscle size entry."

    body = MuscleSizeIn(id=size.id, date=date.today(), size=39, muscle_id=measurable_muscle.id)
    assert service.update(user.id, body).model.size == 39
    assert service.delete(user.id, size.id).success
