import pytest

from models.equipment import Equipment
from models.exercise import ExerciseType
from schemas.exercise import ExerciseIn
from services.exercise_service import ExerciseService


@pytest.fixture
def service(db):
    return ExerciseService(db)


@pytest.fixture
def barbell(db):
    equipment = Equipment(name="Barbell")
    db.add(equipment)
    db.commit()
    return equipment


def test_add_internal_with_muscles_and_equipment(service, measurable_muscle, barbell):
    body = ExerciseIn(
        name="Barbell curl",
        type=ExerciseType.weight_and_reps,
        muscle_ids=[measurable_muscle.id],
        equipment_ids=[barbell.id],
    )
    exercise = service.add_internal(body).model

    assert exercise.created_by_user_id is None
    assert [m.name for m in exercise.working_muscles] == ["Biceps"]
    assert [e.name for e in exercise.equipments] == ["Barbell"]


def test_unknown_muscle_fails(service):
    result = service.add_internal(ExerciseIn(name="Curl", muscle_ids=[404]))
    assert result.error_message == "Muscle with ID 404 not found."


def test_visibility(service, user, other_user):
    internal = service.add_internal(ExerciseIn(name="Squat")).model
    own = service.add_user(user.id, ExerciseIn(name="My squat")).model
    foreign = service.add_user(other_user.id, ExerciseIn(name="Their squat")).model

    assert service.get_by_id(user.id, internal.id).success
    assert service.get_by_id(user.id, own.id).model.name == "My squat"

    result = service.get_by_id(user.id, foreign.id)
    assert result.error_message == "User does not have permission to get this exercise entry."

    names = sorted(e.name for e in service.get_all_exercises(user.id).model)
    assert names == ["My squat", "Squat"]


def test_type_filter(service, user):
    service.add_internal(ExerciseIn(name="Plank", type=ExerciseType.time))
    service.add_internal(ExerciseIn(name="Push-up", type=ExerciseType.reps))

    result = service.get_all_exercises(user.id, ExerciseType.time)
    assert [e.name for e in result.model] == ["Plank"]
    assert [e.name for e in service.get_internal_exercises(ExerciseType.reps).model] == ["Push-up"]


def test_user_cannot_use_foreign_equipment(service, user, other_user, db):
    rings = Equipment(name="Rings", owned_by_user_id=other_user.id)
    db.add(rings)
    db.commit()

    result = service.add_user(user.id, ExerciseIn(name="Ring dip", equipment_ids=[rings.id]))
    assert result.error_message == "Equipment 'Rings' is not available for this exercise."


def test_set_muscles_requires_admin_for_internal(service, user, admin, measurable_muscle):
    internal = service.add_internal(ExerciseIn(name="Curl")).model

    result = service.update_exercise_muscles(user.id, internal.id, [measurable_muscle.id])
    assert result.error_message == "User does not have permission to update this exercise entry."

    result = service.update_exercise_muscles(admin.id, internal.id, [measurable_muscle.id], is_admin=True)
    assert [m.id for m in result.model.working_muscles] == [measurable_muscle.id]


def test_set_equipment_on_own_exercise(service, user, barbell):
    own = service.add_user(user.id, ExerciseIn(name="Row")).model
    result = service.update_exercise_equipments(user.id, own.id, [barbell.id])
    assert [e.name for e in result.model.equipments] == ["Barbell"]


def test_update_and_delete_user_exercise(service, user, other_user):
    own = service.add_user(user.id, ExerciseIn(name="Row")).model

    result = service.delete_user(other_user.id, own.id)
    assert result.error_message == "User does not have permission to delete this exercise entry."

    updated = service.update_user(user.id, ExerciseIn(id=own.id, name="Bent-over row", type=ExerciseType.reps))
    assert updated.model.name == "Bent-over row"
    assert updated.model.type == ExerciseType.reps

    assert service.delete_user(user.id, own.id).success
    assert service.get_user_by_id(user.id, own.id).model is None
