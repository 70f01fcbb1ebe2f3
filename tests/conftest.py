import os

# Settings se leen al importar la app: fijar el entorno antes
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from enums.roles import Role
from models import Base, User
from utils.db import get_db
from utils.security import hash_password
from helpers import headers_for


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def make_user(db):
    counter = {"n": 0}

    def _make(role: Role, employee_id: int | None = None, password: str = "secret123") -> User:
        counter["n"] += 1
        user = User(
            username=f"{role.value.lower()}{counter['n']}",
            full_name=f"{role.value.title()} {counter['n']}",
            email=f"{role.value.lower()}{counter['n']}@agripay.ci",
            password_hash=hash_password(password),
            role=role,
            employee_id=employee_id,
            status="a",
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture()
def admin_headers(make_user):
    return headers_for(make_user(Role.ADMIN))


@pytest.fixture()
def manager_headers(make_user):
    return headers_for(make_user(Role.MANAGER))


@pytest.fixture()
def create_employee(client, manager_headers):
    def _create(name: str = "Kouassi", crop: str = "HEVEA") -> dict:
        resp = client.post("/employees", json={"name": name, "crop": crop}, headers=manager_headers)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create
