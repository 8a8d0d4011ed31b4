"""Public collector profiles."""

from __future__ import annotations


def _make_public(client, headers: dict[str, str]) -> dict:
    response = client.patch("/users/me", json={"is_public": True}, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


def test_profiles_are_private_by_default(client, register) -> None:
    alice, _ = register("alice")
    assert alice["is_public"] is False

    assert client.get("/profiles/search").json() == {"profiles": [], "count": 0}
    response = client.get(f"/profiles/{alice['id']}/games")
    assert response.status_code == 403
    assert response.json()["detail"] == "This profile is private"


def test_search_lists_public_profiles_by_username(client, register) -> None:
    _, zoe = register("zoe_gamer")
    _, alice = register("alice", full_name="Alice Liddell")
    register("alina")
    _make_public(client, zoe)
    _make_public(client, alice)

    everyone = client.get("/profiles/search").json()
    assert [profile["username"] for profile in everyone["profiles"]] == ["alice", "zoe_gamer"]
    assert everyone["profiles"][0]["fullName"] == "Alice Liddell"

    matches = client.get("/profiles/search", params={"username": "ALI"}).json()
    assert [profile["username"] for profile in matches["profiles"]] == ["alice"]

    underscore = client.get("/profiles/search", params={"username": "_"}).json()
    assert [profile["username"] for profile in underscore["profiles"]] == ["zoe_gamer"]


def test_public_collection_hides_the_wishlist(client, register, add_game) -> None:
    alice, headers = register("alice")
    add_game(headers, "Chrono Trigger")
    owned = add_game(headers, "Super Metroid", status="COMPLETED")
    _make_public(client, headers)

    response = client.get(f"/profiles/{alice['id']}/games")
    assert response.status_code == 200
    payload = response.json()
    assert payload["profile"]["username"] == "alice"
    assert [entry["id"] for entry in payload["games"]] == [owned["id"]]
    assert payload["games"][0]["game"]["title"] == "Super Metroid"
    assert payload["games"][0]["status"] == "COMPLETED"


def test_profile_can_go_private_again(client, register) -> None:
    alice, headers = register("alice")
    _make_public(client, headers)
    assert client.get(f"/profiles/{alice['id']}/games").status_code == 200

    response = client.patch("/users/me", json={"is_public": False}, headers=headers)
    assert response.json()["is_public"] is False
    assert client.get(f"/profiles/{alice['id']}/games").status_code == 403


def test_unknown_profile_is_not_found(client) -> None:
    assert client.get("/profiles/9999/games").status_code == 404


def test_profile_update_keeps_unsent_fields(client, register) -> None:
    _, headers = register("alice", full_name="Alice Liddell")

    response = client.patch(
        "/users/me", json={"avatar_url": "https://img.gamers.io/alice.png"}, headers=headers
    )
    assert response.status_code == 200
    assert response.json()["full_name"] == "Alice Liddell"
    assert response.json()["avatar_url"] == "https://img.gamers.io/alice.png"

    rejected = client.patch("/users/me", json={"email": "x@gamers.io"}, headers=headers)
    assert rejected.status_code == 422
    assert client.patch("/users/me", json={"is_public": True}).status_code == 401
