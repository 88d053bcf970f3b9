import pytest

from models import BodyWeight, RoleEnum, Workout
from schemas.user import PasswordChange, UserCreate, UserUpdate
from services.user_service import UserService
from utils.security import verify_password


@pytest.fixture
def service(db):
    return UserService(db)


def test_create_user(service):
    result = service.create(UserCreate(user_name="newbie", email="newbie@example.com", password="secret123"))
    assert result.success
    assert result.model.roles == ["User"]


def test_create_duplicate_name(service, user):
    result = service.create(UserCreate(user_name=user.user_name, email="x@example.com", password="secret123"))
    assert result.error_message == "Name already registered."


def test_update_own_profile(service, user):
    body = UserUpdate(id=user.id, user_name="john", email="john@example.com")
    assert service.update(user, body).model.user_name == "john"


def test_update_other_profile_requires_admin(service, user, other_user, admin):
    body = UserUpdate(id=other_user.id, user_name="jane", email="jane@example.com")

    result = service.update(user, body)
    assert result.error_message == "User does not have permission to update this user entry."

    assert service.update(admin, body).success


def test_update_email_must_stay_unique(service, user, other_user):
    body = UserUpdate(id=user.id, user_name=user.user_name, email=other_user.email)
    assert service.update(user, body).error_message == "Email already registered."


def test_change_password(service, user, db, password):
    wrong = PasswordChange(old_password="nope", new_password="another1", confirm_new_password="another1")
    assert service.change_password(user.id, wrong).error_message == "Incorrect password."

    mismatch = PasswordChange(old_password=password, new_password="another1", confirm_new_password="another2")
    assert service.change_password(user.id, mismatch).error_message == "Passwords do not match."

    ok = PasswordChange(old_password=password, new_password="another1", confirm_new_password="another1")
    assert service.change_password(user.id, ok).success
    db.refresh(user)
    assert verify_password("another1", user.password_hash)


def test_roles(service, user, admin):
    assert service.get_roles(admin.id).model == ["Admin", "User"]

    result = service.set_role(user.id, "admin")
    assert result.model.roles == ["Admin", "User"]

    admins = service.get_users_by_role("Admin").model
    assert sorted(u.user_name for u in admins) == ["admin", "johndoe"]

    assert service.set_role(user.id, "Coach").error_message == "Role with name 'Coach' not found."


def test_lookups(service, user):
    assert service.get_user_id_by_user_name("johndoe").model == user.id
    assert service.user_exists(user.id).model is True
    assert service.user_exists_by_user_name("nobody").model is False


def test_delete_cascades_owned_entries(service, user, db):
    from datetime import date

    db.add_all([
        BodyWeight(date=date.today(), weight=80, user_id=user.id),
        Workout(name="Push", user_id=user.id),
    ])
    db.commit()

    assert service.delete(user.id).success
    assert db.query(BodyWeight).count() == 0
    assert db.query(Workout).count() == 0
    assert service.get_by_id(user.id).model is None
