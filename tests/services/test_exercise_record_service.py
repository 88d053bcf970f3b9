from datetime import date, timedelta

import pytest

from models.exercise import Exercise, ExerciseType
from schemas.exercise_record import ExerciseRecordIn
from services.exercise_record_service import ExerciseRecordService
from utils.units import DateTimeRange


@pytest.fixture
def service(db):
    return ExerciseRecordService(db)


@pytest.fixture
def make_exercise(db):
    def _make_exercise(name, exercise_type=ExerciseType.weight_and_reps, owner=None):
        exercise = Exercise(name=name, type=exercise_type, created_by_user_id=owner.id if owner else None)
        db.add(exercise)
        db.commit()
        return exercise

    return _make_exercise


def test_add_record(service, user, make_exercise):
    bench = make_exercise("Bench press")
    result = service.add(user.id, ExerciseRecordIn(date=date.today(), weight=100, reps=5, exercise_id=bench.id))

    assert result.success, result.error_message
    assert result.model.exercise_name == "Bench press"
    assert result.model.exercise_type == ExerciseType.weight_and_reps


@pytest.mark.parametrize(
    "exercise_type,fields,missing",
    [
        (ExerciseType.reps, {}, "reps"),
        (ExerciseType.time, {"reps": 3}, "time_seconds"),
        (ExerciseType.weight_and_reps, {"reps": 5}, "weight"),
        (ExerciseType.weight_and_time, {"weight": 20}, "time_seconds"),
    ],
)
def test_fields_required_by_type(service, user, make_exercise, exercise_type, fields, missing):
    exercise = make_exercise("Exercise", exercise_type)
    result = service.add(user.id, ExerciseRecordIn(date=date.today(), exercise_id=exercise.id, **fields))
    assert not result.success
    assert missing in result.error_message


def test_future_date_fails(service, user, make_exercise):
    plank = make_exercise("Plank", ExerciseType.time)
    body = ExerciseRecordIn(date=date.today() + timedelta(days=2), time_seconds=60, exercise_id=plank.id)
    assert service.add(user.id, body).error_message == "Incorrect date."


def test_foreign_exercise_is_denied(service, user, other_user, make_exercise):
    foreign = make_exercise("Secret lift", ExerciseType.reps, owner=other_user)
    result = service.add(user.id, ExerciseRecordIn(date=date.today(), reps=5, exercise_id=foreign.id))
    assert result.error_message == "User does not have permission to use this exercise entry."


def test_filters(service, user, make_exercise):
    plank = make_exercise("Plank", ExerciseType.time)
    pushup = make_exercise("Push-up", ExerciseType.reps)
    service.add(user.id, ExerciseRecordIn(date=date(2024, 1, 5), time_seconds=60, exercise_id=plank.id))
    service.add(user.id, ExerciseRecordIn(date=date(2024, 3, 5), reps=20, exercise_id=pushup.id))

    by_exercise = service.get_user_exercise_records(user.id, exercise_id=plank.id).model
    assert [r.exercise_name for r in by_exercise] == ["Plank"]

    by_type = service.get_user_exercise_records(user.id, exercise_type=ExerciseType.reps).model
    assert [r.exercise_name for r in by_type] == ["Push-up"]

    in_range = service.get_user_exercise_records(
        user.id, date_range=DateTimeRange(date(2024, 3, 1), date(2024, 3, 31))
    ).model
    assert [r.reps for r in in_range] == [20]


def test_ownership(service, user, other_user, make_exercise):
    pushup = make_exercise("Push-up", ExerciseType.reps)
    record = service.add(user.id, ExerciseRecordIn(date=date.today(), reps=10, exercise_id=pushup.id)).model

    result = service.get_by_id(other_user.id, record.id)
    assert result.error_message == "User does not have permission to get this exercise record entry."

    body = ExerciseRecordIn(id=record.id, date=date.today(), reps=12, exercise_id=pushup.id)
    assert not service.update(other_user.id, body).success
    assert service.update(user.id, body).model.reps == 12

    assert service.delete(user.id, record.id).success
    assert service.get_by_id(user.id, record.id).model is None
