"""Collection endpoints and their effect on pending purchase notifications."""

from __future__ import annotations


def test_add_list_and_update_entry(client, register, add_game) -> None:
    _, alice = register("alice")
    entry = add_game(alice, "Chrono Trigger", status="NOT_STARTED")
    assert entry["buy"] is False
    assert entry["game"]["console_name"] == "SNES"

    response = client.patch(
        f"/collection/{entry['id']}",
        json={"status": "completed", "rating": 10, "notes": "Best ending"},
        headers=alice,
    )
    assert response.status_code == 200
    assert response.json()["status"] == "COMPLETED"
    assert response.json()["rating"] == 10

    completed = client.get("/collection", params={"status": "COMPLETED"}, headers=alice).json()
    assert [item["id"] for item in completed] == [entry["id"]]
    assert client.get("/collection", params={"status": "WISHLIST"}, headers=alice).json() == []


def test_duplicate_and_invalid_entries_are_rejected(client, register, add_game) -> None:
    _, alice = register("alice")
    entry = add_game(alice, "Chrono Trigger")

    duplicate = client.post(
        "/collection", json={"game_id": entry["game_id"]}, headers=alice
    )
    assert duplicate.status_code == 400

    unknown_game = client.post("/collection", json={"game_id": 9999}, headers=alice)
    assert unknown_game.status_code == 404

    bad_status = client.patch(
        f"/collection/{entry['id']}", json={"status": "SOLD"}, headers=alice
    )
    assert bad_status.status_code == 400

    bad_rating = client.patch(f"/collection/{entry['id']}", json={"rating": 11}, headers=alice)
    assert bad_rating.status_code == 400


def test_leaving_wishlist_withdraws_purchase_intent(
    client, register, add_game, share_token
) -> None:
    _, alice = register("alice")
    entry = add_game(alice, "Chrono Trigger")
    client.post(
        "/wishlist/buy",
        json={"token": share_token(alice), "itemId": entry["id"], "buy": True},
    )
    assert client.get("/notifications", headers=alice).json()["wishlistCount"] == 1

    response = client.patch(
        f"/collection/{entry['id']}", json={"status": "IN_PROGRESS"}, headers=alice
    )
    assert response.status_code == 200
    assert response.json()["buy"] is False
    assert client.get("/notifications", headers=alice).json()["count"] == 0


def test_delete_entry_dismisses_notification(client, register, add_game, share_token) -> None:
    _, alice = register("alice")
    entry = add_game(alice, "Chrono Trigger")
    client.post(
        "/wishlist/buy",
        json={"token": share_token(alice), "itemId": entry["id"], "buy": True},
    )

    assert client.delete(f"/collection/{entry['id']}", headers=alice).status_code == 204
    assert client.get("/collection", headers=alice).json() == []
    assert client.get("/notifications", headers=alice).json()["count"] == 0
    assert client.delete(f"/collection/{entry['id']}", headers=alice).status_code == 404


def test_entries_of_other_users_are_invisible(client, register, add_game) -> None:
    _, alice = register("alice")
    _, bob = register("bob")
    entry = add_game(alice, "Chrono Trigger")

    assert client.patch(
        f"/collection/{entry['id']}", json={"notes": "mine"}, headers=bob
    ).status_code == 404
    assert client.delete(f"/collection/{entry['id']}", headers=bob).status_code == 404


def test_game_catalogue_search(client, register) -> None:
    _, alice = register("alice")
    for title in ("Chrono Trigger", "Chrono Cross", "Xenogears"):
        client.post(
            "/games", json={"title": title, "console_name": "PlayStation"}, headers=alice
        )

    results = client.get("/games", params={"search": "chrono"}, headers=alice).json()
    assert [game["title"] for game in results] == ["Chrono Cross", "Chrono Trigger"]

    game_id = results[0]["id"]
    assert client.get(f"/games/{game_id}", headers=alice).json()["console_name"] == "PlayStation"
    assert client.get("/games/9999", headers=alice).status_code == 404


def test_game_requires_title(client, register) -> None:
    _, alice = register("alice")
    response = client.post(
        "/games", json={"title": "   ", "console_name": "SNES"}, headers=alice
    )
    assert response.status_code == 400
