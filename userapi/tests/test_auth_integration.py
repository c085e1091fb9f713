from __future__ import annotations

import pytest
from userapi.app import create_app
from userapi.infrastructure.db import ENGINE, Base, SessionLocal
from userapi.infrastructure.db.models import User


@pytest.fixture(autouse=True)
def reset_database() -> None:
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


def test_register_login_update_delete_flow() -> None:
    app = create_app()

    with app.test_client() as client:
        created = client.post(
            "/users", json={"name": "Ana", "email": "ana@x.com", "password": "pw1"}
        )
        assert created.status_code == 201
        user_id = created.get_json()["id"]

        login = client.post("/login", json={"email": "ana@x.com", "password": "pw1"})
        assert login.status_code == 200
        token = login.get_json()["jwt"]
        headers = {"authorization": token}

        me = client.get("/login", headers=headers)
        assert me.get_json() == {"id": user_id, "name": "Ana", "email": "ana@x.com"}

        listed = client.get("/users", headers=headers)
        assert listed.status_code == 200
        assert [row["email"] for row in listed.get_json()] == ["ana@x.com"]

        updated = client.put(
            f"/users/{user_id}",
            json={"name": "Ana", "email": "ana@x.com", "password": "pw2"},
            headers=headers,
        )
        assert updated.status_code == 200
        assert client.post(
            "/login", json={"email": "ana@x.com", "password": "pw1"}
        ).status_code == 401

        assert client.delete(f"/users/{user_id}", headers=headers).status_code == 200
        assert client.get("/login", headers=headers).status_code == 401

    session = SessionLocal()
    try:
        assert session.query(User).count() == 0
    finally:
        session.close()


def test_password_is_stored_as_bcrypt_digest() -> None:
    app = create_app()

    with app.test_client() as client:
        client.post("/users", json={"name": "Bo", "email": "bo@x.com", "password": "pw1"})

    session = SessionLocal()
    try:
        stored = session.query(User).one()
        assert stored.password_hash != "pw1"
        assert stored.password_hash.startswith("$2b$10$")
    finally:
        session.close()


def test_duplicate_email_is_a_store_error() -> None:
    app = create_app()

    with app.test_client() as client:
        body = {"name": "Bo", "email": "bo@x.com", "password": "pw1"}
        assert client.post("/users", json=body).status_code == 201

        response = client.post("/users", json=body)

    assert response.status_code == 500
    assert response.get_json() == {
        "error": "user_create_failed",
        "message": "Error creating user",
    }


def test_health_reports_database() -> None:
    app = create_app()

    with app.test_client() as client:
        response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_login_with_overlong_password_is_wrong_password() -> None:
    app = create_app()

    with app.test_client() as client:
        client.post("/users", json={"name": "Ana", "email": "ana@x.com", "password": "pw1"})

        response = client.post("/login", json={"email": "ana@x.com", "password": "x" * 73})

    assert response.status_code == 401
    assert response.get_json()["error"] == "invalid_password"


def test_update_with_overlong_password_changes_nothing() -> None:
    app = create_app()

    with app.test_client() as client:
        created = client.post(
            "/users", json={"name": "Ana", "email": "ana@x.com", "password": "pw1"}
        )
        user_id = created.get_json()["id"]
        token = client.post(
            "/login", json={"email": "ana@x.com", "password": "pw1"}
        ).get_json()["jwt"]

        response = client.put(
            f"/users/{user_id}",
            json={"name": "Ana", "email": "ana@x.com", "password": "x" * 73},
            headers={"authorization": token},
        )
        assert response.status_code == 401
        assert response.get_json()["context"]["fields"] == ["password"]

        relogin = client.post("/login", json={"email": "ana@x.com", "password": "pw1"})
        assert relogin.status_code == 200
