import pytest

from schemas.workout import WorkoutIn
from services.workout_service import WorkoutService


@pytest.fixture
def service(db):
    return WorkoutService(db)


def _add(service, user, name):
    result = service.add(user.id, WorkoutIn(name=name))
    assert result.success, result.error_message
    return result.model


def test_add_sets_server_fields(service, user):
    workout = _add(service, user, "Push day")
    assert workout.created is not None
    assert workout.is_pinned is False
    assert workout.count_of_trainings == 0


def test_name_unique_per_user(service, user, other_user):
    _add(service, user, "Push day")

    result = service.add(user.id, WorkoutIn(name="Push day"))
    assert result.error_message == "Workout name must be unique."

    # another user may reuse the name
    assert service.add(other_user.id, WorkoutIn(name="Push day")).success


def test_add_with_id_fails(service, user):
    result = service.add(user.id, WorkoutIn(id=1, name="Legs"))
    assert result.error_message == "Workout ID must not be set when adding a new workout."


def test_pinned_workouts_come_first(service, user):
    _add(service, user, "A")
    b = _add(service, user, "B")
    _add(service, user, "C")
    service.pin(user.id, b.id)

    names = [w.name for w in service.get_user_workouts(user.id).model]
    assert names[0] == "B"

    service.unpin(user.id, b.id)
    assert service.get_by_id(user.id, b.id).model.is_pinned is False


def test_complete_counts_trainings(service, user, db):
    workout = _add(service, user, "Full body")
    assert user.started_working_out is None

    service.complete(user.id, workout.id)
    result = service.complete(user.id, workout.id)

    assert result.model.count_of_trainings == 2
    db.refresh(user)
    assert user.count_of_trainings == 2
    assert user.started_working_out is not None


def test_complete_other_users_workout_fails(service, user, other_user):
    workout = _add(service, user, "Full body")
    result = service.complete(other_user.id, workout.id)
    assert result.error_message == "User does not have permission to complete this workout entry."


def test_update_rename(service, user):
    workout = _add(service, user, "Old")
    _add(service, user, "Taken")

    result = service.update(user.id, WorkoutIn(id=workout.id, name="Taken"))
    assert result.error_message == "Workout name must be unique."

    result = service.update(user.id, WorkoutIn(id=workout.id, name="New", description="desc"))
    assert result.model.name == "New"
    assert result.model.description == "desc"


def test_exists_and_by_name(service, user, other_user):
    workout = _add(service, user, "Arms")

    assert service.exists(user.id, workout.id).model is True
    assert service.exists(other_user.id, workout.id).model is False
    assert service.exists_by_name(user.id, "Arms").model is True
    assert service.get_by_name(user.id, "Arms").model.id == workout.id
    assert service.get_by_name(other_user.id, "Arms").model is None


def test_delete(service, user, other_user):
    workout = _add(service, user, "Arms")
    assert not service.delete(other_user.id, workout.id).success
    assert service.delete(user.id, workout.id).success
    assert service.get_user_workouts(user.id).model == []
