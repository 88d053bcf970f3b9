import os

# Settings must exist before the application modules are imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401
from config.database import Base, get_db
from main import app
from models import Muscle, RoleEnum, User
from services.account_service import build_token
from utils.security import hash_password

PASSWORD = "Pas$w0rd"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = TestingSession()
    yield session
    session.close()


@pytest.fixture
def client(db):
    """TestClient sharing the test session with the app"""
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(user_name: str, role: RoleEnum = RoleEnum.user) -> User:
        user = User(
            user_name=user_name,
            email=f"{user_name}@example.com",
            password_hash=hash_password(PASSWORD),
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def user(make_user):
    return make_user("johndoe")


@pytest.fixture
def other_user(make_user):
    return make_user("janedoe")


@pytest.fixture
def admin(make_user):
    return make_user("admin", RoleEnum.admin)


@pytest.fixture
def auth_headers():
    def _auth_headers(for_user: User) -> dict:
        return {"Authorization": f"Bearer {build_token(for_user).token_str}"}

    return _auth_headers


@pytest.fixture
def measurable_muscle(db):
    muscle = Muscle(name="Biceps", is_measurable=True)
    db.add(muscle)
    db.commit()
    db.refresh(muscle)
    return muscle


@pytest.fixture
def password():
    return PASSWORD
