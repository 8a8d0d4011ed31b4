"""Registration and token endpoints."""

from __future__ import annotations

from gameshelf.infrastructure.models import UserModel
from gameshelf.infrastructure.security import FRIEND_CODE_ALPHABET, get_password_hash


def test_register_login_and_read_profile(client, register) -> None:
    user, headers = register("alice", full_name="Alice Liddell")
    assert user["email"] == "alice@gamers.io"
    assert len(user["friend_code"]) == 8
    assert set(user["friend_code"]) <= set(FRIEND_CODE_ALPHABET)
    assert "password" not in user

    me = client.get("/users/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["username"] == "alice"


def test_duplicate_registration_is_rejected(client, register) -> None:
    register("alice")
    response = client.post(
        "/users",
        json={"username": "alice2", "email": "ALICE@gamers.io", "password": "supersecret"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "This email address is already registered"

    response = client.post(
        "/users",
        json={"username": "Alice", "email": "other@gamers.io", "password": "supersecret"},
    )
    assert response.status_code == 400


def test_short_password_is_rejected(client) -> None:
    response = client.post(
        "/users",
        json={"username": "alice", "email": "alice@gamers.io", "password": "short"},
    )
    assert response.status_code == 422


def test_login_with_wrong_password(client, register) -> None:
    register("alice")
    response = client.post(
        "/auth/token", data={"username": "alice@gamers.io", "password": "wrong-password"}
    )
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_login_rejects_inactive_user(client, register, session) -> None:
    register("alice")
    session.query(UserModel).filter_by(username="alice").update({"is_active": False})
    session.commit()

    response = client.post(
        "/auth/token", data={"username": "alice@gamers.io", "password": "supersecret"}
    )
    assert response.status_code == 403


def test_password_change_invalidates_issued_tokens(client, register, session) -> None:
    _, headers = register("alice")
    session.query(UserModel).filter_by(username="alice").update(
        {"password": get_password_hash("another-secret")}
    )
    session.commit()

    response = client.get("/users/me", headers=headers)
    assert response.status_code == 401


def test_garbage_token_is_rejected(client) -> None:
    response = client.get("/users/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
