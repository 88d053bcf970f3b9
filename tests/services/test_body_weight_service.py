from datetime import date, timedelta

import pytest

from models.body_weight import BodyWeight, WeightType
from schemas.body_weight import BodyWeightIn
from services.body_weight_service import BodyWeightService


@pytest.fixture
def service(db):
    return BodyWeightService(db)


def _add(service, user, weight, weight_type=WeightType.kilogram, day=None):
    result = service.add(user.id, BodyWeightIn(date=day or date.today(), weight=weight, weight_type=weight_type))
    assert result.success, result.error_message
    return result.model


def test_add_body_weight(service, user):
    added = _add(service, user, 80)
    assert added.id > 0
    assert added.user_id == user.id
    assert added.weight_type == WeightType.kilogram


def test_add_with_id_fails(service, user):
    result = service.add(user.id, BodyWeightIn(id=3, date=date.today(), weight=80))
    assert not result.success
    assert result.error_message == "BodyWeight ID must not be set when adding a new body weight."


def test_add_null_entry_fails(service, user):
    result = service.add(user.id, None)
    assert result.error_message == "Body weight entry is null."


def test_add_in_future_fails(service, user):
    result = service.add(user.id, BodyWeightIn(date=date.today() + timedelta(days=1), weight=80))
    assert result.error_message == "Incorrect date."


def test_unknown_user_fails(service):
    result = service.get_current("missing-user")
    assert not result.success
    assert result.error_message == "User with ID missing-user not found."


def test_empty_user_id_fails(service):
    result = service.get_current("")
    assert result.error_message == "User ID cannot be null or empty."


def test_get_by_id_checks_ownership(service, user, other_user):
    added = _add(service, user, 80)

    result = service.get_by_id(other_user.id, added.id)
    assert not result.success
    assert result.error_message == "User does not have permission to get this body weight entry."

    assert service.get_by_id(user.id, added.id).model.weight == 80


def test_get_by_id_missing_returns_none(service, user):
    result = service.get_by_id(user.id, 999)
    assert result.success
    assert result.model is None


def test_invalid_id(service, user):
    result = service.get_by_id(user.id, 0)
    assert result.error_message == "Invalid Body weight ID."


def test_min_and_max_compare_in_kilograms(service, user):
    _add(service, user, 80)
    heaviest = _add(service, user, 180, WeightType.pound)  # ~81.6 kg
    lightest = _add(service, user, 70)

    assert service.get_max(user.id).model.id == heaviest.id
    assert service.get_min(user.id).model.id == lightest.id


def test_min_without_entries_is_none(service, user):
    result = service.get_min(user.id)
    assert result.success
    assert result.model is None


def test_current_is_latest_by_date(service, user):
    _add(service, user, 82, day=date.today() - timedelta(days=10))
    latest = _add(service, user, 79, day=date.today() - timedelta(days=1))
    _add(service, user, 80, day=date.today() - timedelta(days=5))

    assert service.get_current(user.id).model.id == latest.id


def test_in_pounds_converts_without_touching_rows(service, user, db):
    added = _add(service, user, 100)

    result = service.get_user_body_weights_in_pounds(user.id)
    assert result.model[0].weight == pytest.approx(220.462)
    assert result.model[0].weight_type == WeightType.pound

    db.expire_all()
    stored = db.get(BodyWeight, added.id)
    assert stored.weight == 100
    assert stored.weight_type == WeightType.kilogram


def test_in_kilograms_converts_pounds(service, user):
    _add(service, user, 100, WeightType.pound)
    result = service.get_user_body_weights_in_kilograms(user.id)
    assert result.model[0].weight == pytest.approx(45.3592)


def test_range_filter(service, user):
    from utils.units import DateTimeRange

    _add(service, user, 80, day=date(2024, 1, 10))
    _add(service, user, 81, day=date(2024, 2, 10))

    result = service.get_user_body_weights(user.id, date_range=DateTimeRange(date(2024, 1, 1), date(2024, 1, 31)))
    assert [bw.weight for bw in result.model] == [80]


def test_update_and_delete_check_ownership(service, user, other_user):
    added = _add(service, user, 80)
    body = BodyWeightIn(id=added.id, date=date.today(), weight=85)

    result = service.update(other_user.id, body)
    assert result.error_message == "User does not have permission to update this body weight entry."

    result = service.delete(other_user.id, added.id)
    assert result.error_message == "User does not have permission to delete this body weight entry."

    assert service.update(user.id, body).model.weight == 85
    assert service.delete(user.id, added.id).success
    assert service.get_by_id(user.id, added.id).model is None


def test_delete_missing_fails(service, user):
    result = service.delete(user.id, 42)
    assert result.error_message == "Body weight with ID 42 not found."
