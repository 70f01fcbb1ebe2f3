from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session, sessionmaker

from main import app
from utils.db import get_db


class UnreachableStoreSession(Session):
    """Sesión que autentica (get) pero falla al leer colecciones."""

    def query(self, *entities, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))


class ConflictingCommitSession(Session):
    def commit(self):
        raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))


def _override_with(engine, session_class):
    factory = sessionmaker(bind=engine, class_=session_class, autocommit=False, autoflush=False)

    def override_get_db():
        session = factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db


def test_unreachable_store_returns_503(client, engine, manager_headers):
    _override_with(engine, UnreachableStoreSession)

    resp = client.get("/dashboard", headers=manager_headers)

    assert resp.status_code == 503
    body = resp.json()
    assert body["error"] == "store_unavailable"
    assert body["retry"] is True


def test_integrity_error_returns_409(client, engine, manager_headers):
    _override_with(engine, ConflictingCommitSession)

    resp = client.post("/employees", json={"name": "Kouassi", "crop": "HEVEA"}, headers=manager_headers)

    assert resp.status_code == 409
    assert resp.json()["error"] == "conflict"
