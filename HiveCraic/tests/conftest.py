import os
import tempfile

# Settings are read at import time: point them at a throwaway SQLite file first
_DB_DIR = tempfile.mkdtemp(prefix="hivecraic-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["MAIL_USER"] = ""
os.environ["MAIL_PASS"] = ""

import pytest
from fastapi.testclient import TestClient

import models  # noqa: F401
from main import app
from models.user import UserProfile
from utils.db import Base, engine, SessionLocal
from utils.security import hash_password, create_access_token

DEFAULT_PASSWORD = "secret123"


@pytest.fixture(scope="session", autouse=True)
def create_schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(autouse=True)
def clean_data():
    yield
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


# Users / auth fixtures

@pytest.fixture
def user_factory(db_session):
    def _create(email: str, role: str = "User", status: str = "a", full_name: str | None = None,
                password: str = DEFAULT_PASSWORD):
        user = UserProfile(
            email=email,
            full_name=full_name or email.split("@")[0],
            password_hash=hash_password(password),
            role=role,
            status=status,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _create


def auth_headers(user: UserProfile) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.user_id, role=user.role)}"}


@pytest.fixture
def user(user_factory):
    return user_factory("beekeeper@example.com")


@pytest.fixture
def other_user(user_factory):
    return user_factory("neighbour@example.com")


@pytest.fixture
def admin(user_factory):
    return user_factory("admin@example.com", role="Admin")


@pytest.fixture
def headers(user):
    return auth_headers(user)


@pytest.fixture
def other_headers(other_user):
    return auth_headers(other_user)


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


# Record helpers (through the API, as a client would)

@pytest.fixture
def make_apiary(client):
    def _create(headers: dict, name: str = "Home Yard", **extra):
        r = client.post("/apiaries", json={"name": name, **extra}, headers=headers)
        assert r.status_code == 201, r.text
        return r.json()
    return _create


@pytest.fixture
def make_queen(client):
    def _create(headers: dict, queen_number: str = "Q-001", **extra):
        r = client.post("/queens", json={"queen_number": queen_number, **extra}, headers=headers)
        assert r.status_code == 201, r.text
        return r.json()
    return _create


@pytest.fixture
def make_hive(client):
    def _create(headers: dict, hive_number: str = "H-01", **extra):
        r = client.post("/hives", json={"hive_number": hive_number, **extra}, headers=headers)
        assert r.status_code == 201, r.text
        return r.json()
    return _create


@pytest.fixture
def make_inspection(client):
    def _create(headers: dict, hive_id: int, inspection_date, **extra):
        body = {"hive_id": hive_id, "inspection_date": str(inspection_date), **extra}
        r = client.post("/inspections", json=body, headers=headers)
        assert r.status_code == 201, r.text
        return r.json()
    return _create
