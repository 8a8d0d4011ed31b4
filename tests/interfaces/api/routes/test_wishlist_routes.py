"""Purchase-intent workflow exercised through the HTTP API."""

from __future__ import annotations

from fastapi.testclient import TestClient


def _live_wishlist_notifications(client: TestClient, headers: dict[str, str]) -> list[dict]:
    response = client.get("/notifications", headers=headers)
    assert response.status_code == 200, response.text
    return [
        notification
        for notification in response.json()["notifications"]
        if notification["type"] == "wishlist"
    ]


def _entry(client: TestClient, headers: dict[str, str], entry_id: int) -> dict:
    response = client.get("/collection", headers=headers)
    assert response.status_code == 200
    return next(entry for entry in response.json() if entry["id"] == entry_id)


def test_chrono_trigger_gift_is_validated(client, register, add_game, share_token) -> None:
    _, alice = register("alice", full_name="Alice Liddell")
    item = add_game(alice, "Chrono Trigger")
    assert item["status"] == "WISHLIST"
    assert item["buy"] is None

    token = share_token(alice)

    response = client.post(
        "/wishlist/buy", json={"token": token, "itemId": item["id"], "buy": True}
    )
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert _entry(client, alice, item["id"])["buy"] is True

    notifications = _live_wishlist_notifications(client, alice)
    assert len(notifications) == 1
    notification = notifications[0]
    assert notification["userGameId"] == item["id"]
    assert notification["game"]["title"] == "Chrono Trigger"

    validate = client.patch(f"/notifications/{notification['id']}/validate", headers=alice)
    assert validate.status_code == 200
    assert validate.json() == {
        "success": True,
        "itemId": item["id"],
        "status": "NOT_STARTED",
        "buy": False,
    }

    entry = _entry(client, alice, item["id"])
    assert entry["status"] == "NOT_STARTED"
    assert entry["buy"] is False
    assert _live_wishlist_notifications(client, alice) == []

    again = client.patch(f"/notifications/{notification['id']}/validate", headers=alice)
    assert again.status_code == 409
    assert again.json()["detail"] == "This notification has already been processed"


def test_chrono_trigger_gift_is_refused(client, register, add_game, share_token) -> None:
    _, alice = register("alice")
    item = add_game(alice, "Chrono Trigger")
    token = share_token(alice)
    client.post("/wishlist/buy", json={"token": token, "itemId": item["id"], "buy": True})

    notification = _live_wishlist_notifications(client, alice)[0]
    refuse = client.patch(f"/notifications/{notification['id']}/refuse", headers=alice)
    assert refuse.status_code == 200
    assert refuse.json()["status"] == "WISHLIST"
    assert refuse.json()["buy"] is False

    shared = client.get(f"/wishlist/{token}").json()
    assert [entry["itemId"] for entry in shared["items"]] == [item["id"]]
    assert shared["items"][0]["buy"] is False

    second = client.patch(f"/notifications/{notification['id']}/refuse", headers=alice)
    assert second.status_code == 409


def test_toggle_buy_twice_keeps_a_single_notification(
    client, register, add_game, share_token
) -> None:
    _, alice = register("alice")
    item = add_game(alice, "Earthbound")
    token = share_token(alice)

    for _ in range(2):
        response = client.post(
            "/wishlist/buy", json={"token": token, "itemId": item["id"], "buy": True}
        )
        assert response.status_code == 200

    assert len(_live_wishlist_notifications(client, alice)) == 1


def test_toggle_buy_round_trip_leaves_no_live_notification(
    client, register, add_game, share_token
) -> None:
    _, alice = register("alice")
    item = add_game(alice, "Secret of Mana")
    token = share_token(alice)

    client.post("/wishlist/buy", json={"token": token, "itemId": item["id"], "buy": True})
    client.post("/wishlist/buy", json={"token": token, "itemId": item["id"], "buy": False})

    assert _entry(client, alice, item["id"])["buy"] is False
    assert _live_wishlist_notifications(client, alice) == []


def test_share_token_only_reaches_its_owner_items(
    client, register, add_game, share_token
) -> None:
    _, alice = register("alice")
    _, bob = register("bob")
    add_game(alice, "Chrono Trigger")
    bobs_item = add_game(bob, "Final Fantasy VI")
    alice_token = share_token(alice)

    response = client.post(
        "/wishlist/buy", json={"token": alice_token, "itemId": bobs_item["id"], "buy": True}
    )
    assert response.status_code == 404
    assert _entry(client, bob, bobs_item["id"])["buy"] is None
    assert _live_wishlist_notifications(client, bob) == []


def test_buy_requires_a_wishlist_item(client, register, add_game, share_token) -> None:
    _, alice = register("alice")
    owned = add_game(alice, "Super Metroid", status="IN_PROGRESS")
    token = share_token(alice)

    response = client.post(
        "/wishlist/buy", json={"token": token, "itemId": owned["id"], "buy": True}
    )
    assert response.status_code == 400


def test_buy_with_unknown_token_is_rejected(client, register, add_game) -> None:
    _, alice = register("alice")
    item = add_game(alice, "Chrono Trigger")

    response = client.post(
        "/wishlist/buy", json={"token": "f" * 64, "itemId": item["id"], "buy": True}
    )
    assert response.status_code == 404


def test_owner_can_toggle_buy_with_session(client, register, add_game) -> None:
    _, alice = register("alice")
    item = add_game(alice, "Chrono Trigger")

    response = client.post(
        "/wishlist/buy", json={"itemId": item["id"], "buy": True}, headers=alice
    )
    assert response.status_code == 200
    assert len(_live_wishlist_notifications(client, alice)) == 1


def test_buy_without_token_or_session_is_unauthorized(client, register, add_game) -> None:
    _, alice = register("alice")
    item = add_game(alice, "Chrono Trigger")

    response = client.post("/wishlist/buy", json={"itemId": item["id"], "buy": True})
    assert response.status_code == 401


def test_shared_wishlist_view_is_sorted_by_title(
    client, register, add_game, share_token
) -> None:
    _, alice = register("alice", full_name="Alice Liddell")
    add_game(alice, "zelda: a link to the past")
    add_game(alice, "Chrono Trigger")
    add_game(alice, "Super Mario World")
    add_game(alice, "Donkey Kong Country", status="COMPLETED")
    token = share_token(alice)

    response = client.get(f"/wishlist/{token}")
    assert response.status_code == 200
    payload = response.json()
    assert payload["owner"] == {"username": "alice", "fullName": "Alice Liddell"}
    assert [entry["game"]["title"] for entry in payload["items"]] == [
        "Chrono Trigger",
        "Super Mario World",
        "zelda: a link to the past",
    ]
    assert payload["items"][0]["game"]["consoleName"] == "SNES"
    assert all(entry["buy"] is False for entry in payload["items"])


def test_share_link_lifecycle(client, register, add_game) -> None:
    _, alice = register("alice")
    add_game(alice, "Chrono Trigger")

    first = client.get("/wishlist/share", headers=alice).json()
    assert len(first["token"]) == 64
    assert first["shareUrl"] == f"https://shelf.gamers.io/wishlist/{first['token']}"
    assert client.get("/wishlist/share", headers=alice).json()["token"] == first["token"]

    rotated = client.post("/wishlist/share", headers=alice).json()
    assert rotated["token"] != first["token"]
    assert client.get(f"/wishlist/{first['token']}").status_code == 404
    assert client.get(f"/wishlist/{rotated['token']}").status_code == 200

    disabled = client.post(
        "/wishlist/share/toggle", json={"isActive": False}, headers=alice
    )
    assert disabled.json()["isActive"] is False
    assert disabled.json()["token"] == rotated["token"]
    assert client.get(f"/wishlist/{rotated['token']}").status_code == 404

    enabled = client.post("/wishlist/share/toggle", json={"isActive": True}, headers=alice)
    assert enabled.json() == {
        "isActive": True,
        "token": rotated["token"],
        "shareUrl": f"https://shelf.gamers.io/wishlist/{rotated['token']}",
    }
    assert client.get(f"/wishlist/{rotated['token']}").status_code == 200


def test_toggle_without_previous_share(client, register) -> None:
    _, alice = register("alice")

    disabled = client.post("/wishlist/share/toggle", json={"isActive": False}, headers=alice)
    assert disabled.json() == {"isActive": False, "token": None, "shareUrl": None}

    enabled = client.post("/wishlist/share/toggle", json={"isActive": True}, headers=alice)
    assert enabled.json()["isActive"] is True
    assert len(enabled.json()["token"]) == 64


def test_share_routes_require_authentication(client) -> None:
    assert client.get("/wishlist/share").status_code == 401
    assert client.post("/wishlist/share").status_code == 401


def test_reading_a_disabled_share_keeps_it_disabled(client, register) -> None:
    _, alice = register("alice")
    issued = client.get("/wishlist/share", headers=alice).json()

    client.post("/wishlist/share/toggle", json={"isActive": False}, headers=alice)

    while_disabled = client.get("/wishlist/share", headers=alice).json()
    assert while_disabled["isActive"] is False
    assert while_disabled["token"] == issued["token"]
    assert client.get(f"/wishlist/{issued['token']}").status_code == 404

    enabled = client.post("/wishlist/share/toggle", json={"isActive": True}, headers=alice)
    assert enabled.json()["token"] == issued["token"]
    assert client.get("/wishlist/share", headers=alice).json() == issued


def test_share_token_buy_ignores_a_stale_session(client, register, add_game, share_token) -> None:
    _, alice = register("alice")
    item = add_game(alice, "Chrono Trigger")
    token = share_token(alice)

    response = client.post(
        "/wishlist/buy",
        json={"token": token, "itemId": item["id"], "buy": True},
        headers={"Authorization": "Bearer expired.or.garbage"},
    )
    assert response.status_code == 200
    assert len(_live_wishlist_notifications(client, alice)) == 1


def test_owner_buy_with_stale_session_is_unauthorized(client, register, add_game) -> None:
    _, alice = register("alice")
    item = add_game(alice, "Chrono Trigger")

    response = client.post(
        "/wishlist/buy",
        json={"itemId": item["id"], "buy": True},
        headers={"Authorization": "Bearer expired.or.garbage"},
    )
    assert response.status_code == 401
