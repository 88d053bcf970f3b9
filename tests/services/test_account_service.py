import pytest

from schemas.account import LoginIn, RegisterIn
from services.account_service import AccountService
from utils.security import decode_token


@pytest.fixture
def service(db):
    return AccountService(db)


def _register(name="alice", email="alice@example.com", password="secret123", confirm=None):
    return RegisterIn(user_name=name, email=email, password=password, confirm_password=confirm or password)


def test_register_returns_token(service):
    result = service.register(_register())

    assert result.success
    assert result.message == "Register successful"
    assert result.token.roles == ["User"]
    assert result.token.expiration_days == 7

    claims = decode_token(result.token.token_str)
    assert claims["name"] == "alice"
    assert claims["roles"] == ["User"]


def test_register_duplicates(service):
    service.register(_register())

    assert service.register(_register(email="other@example.com")).message == "Name already registered."
    assert service.register(_register(name="bob")).message == "Email already registered."


def test_register_password_mismatch(service):
    result = service.register(_register(confirm="different"))
    assert not result.success
    assert result.message == "Passwords do not match."


def test_login(service, user, password):
    result = service.login(LoginIn(user_name=user.user_name, password=password))
    assert result.success
    assert decode_token(result.token.token_str)["sub"] == user.id


def test_login_bad_credentials(service, user):
    for login in (LoginIn(user_name=user.user_name, password="wrong"), LoginIn(user_name="ghost", password="x")):
        result = service.login(login)
        assert not result.success
        assert result.message == "Password or/and login invalid"
        assert result.token is None
