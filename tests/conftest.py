"""Shared fixtures: a throw-away SQLite database and an API client."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "gameshelf_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["SITE_URL"] = "https://shelf.gamers.io"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ.pop("SENDGRID_API_KEY", None)
os.environ.pop("SENDGRID_SENDER", None)

from fastapi.testclient import TestClient  # noqa: E402

from gameshelf.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from gameshelf.infrastructure import security  # noqa: E402
from gameshelf.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from main import create_app  # noqa: E402

DEFAULT_PASSWORD = "supersecret"

# Full-strength hashing makes every registration take a noticeable time.
security.pwd_context.update(pbkdf2_sha256__rounds=1_000)


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure every test starts from empty tables."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def register(client: TestClient):
    """Return a helper registering a user and returning ``(user, auth_headers)``."""

    def _register(username: str, *, full_name: str | None = None, password: str = DEFAULT_PASSWORD):
        email = f"{username.lower()}@gamers.io"
        response = client.post(
            "/users",
            json={
                "username": username,
                "full_name": full_name,
                "email": email,
                "password": password,
            },
        )
        assert response.status_code == 201, response.text
        token_response = client.post(
            "/auth/token", data={"username": email, "password": password}
        )
        assert token_response.status_code == 200, token_response.text
        token = token_response.json()["access_token"]
        return response.json(), {"Authorization": f"Bearer {token}"}

    return _register


@pytest.fixture()
def add_game(client: TestClient):
    """Return a helper adding a game to a user's collection or wishlist."""

    def _add_game(
        headers: dict[str, str],
        title: str,
        *,
        console: str = "SNES",
        status: str = "WISHLIST",
    ) -> dict:
        game_response = client.post(
            "/games",
            json={"title": title, "console_name": console},
            headers=headers,
        )
        assert game_response.status_code == 201, game_response.text
        entry_response = client.post(
            "/collection",
            json={"game_id": game_response.json()["id"], "status": status},
            headers=headers,
        )
        assert entry_response.status_code == 201, entry_response.text
        return entry_response.json()

    return _add_game


@pytest.fixture()
def share_token(client: TestClient):
    """Return a helper fetching the active share token of a user."""

    def _share_token(headers: dict[str, str]) -> str:
        response = client.get("/wishlist/share", headers=headers)
        assert response.status_code == 200, response.text
        return response.json()["token"]

    return _share_token
