"""Notification inbox endpoints."""

from __future__ import annotations

import pytest
from fastapi import WebSocketDisconnect

from gameshelf.infrastructure.models import UserGameModel


def _buy(client, token: str, item_id: int) -> None:
    response = client.post("/wishlist/buy", json={"token": token, "itemId": item_id, "buy": True})
    assert response.status_code == 200, response.text


def test_list_reports_counts_newest_first(client, register, add_game, share_token) -> None:
    _, alice = register("alice")
    first = add_game(alice, "Chrono Trigger")
    second = add_game(alice, "EarthBound")
    token = share_token(alice)
    _buy(client, token, first["id"])
    _buy(client, token, second["id"])

    payload = client.get("/notifications", headers=alice).json()
    assert payload["count"] == 2
    assert payload["wishlistCount"] == 2
    assert payload["achievementCount"] == 0
    assert payload["friendCount"] == 0
    assert [n["userGameId"] for n in payload["notifications"]] == [second["id"], first["id"]]


def test_dismiss_resets_buy_and_rejects_repeat(client, register, add_game, share_token) -> None:
    _, alice = register("alice")
    item = add_game(alice, "Chrono Trigger")
    _buy(client, share_token(alice), item["id"])
    notification = client.get("/notifications", headers=alice).json()["notifications"][0]

    response = client.patch(f"/notifications/{notification['id']}/dismiss", headers=alice)
    assert response.status_code == 200
    entries = client.get("/collection", headers=alice).json()
    assert entries[0]["buy"] is False
    assert entries[0]["status"] == "WISHLIST"
    assert client.get("/notifications", headers=alice).json()["count"] == 0

    repeat = client.patch(f"/notifications/{notification['id']}/dismiss", headers=alice)
    assert repeat.status_code == 409
    assert repeat.json()["detail"] == "Notification already dismissed"


def test_new_purchase_intent_after_dismiss_creates_fresh_notification(
    client, register, add_game, share_token
) -> None:
    _, alice = register("alice")
    item = add_game(alice, "Chrono Trigger")
    token = share_token(alice)
    _buy(client, token, item["id"])
    first = client.get("/notifications", headers=alice).json()["notifications"][0]
    client.patch(f"/notifications/{first['id']}/dismiss", headers=alice)

    _buy(client, token, item["id"])
    notifications = client.get("/notifications", headers=alice).json()["notifications"]
    assert len(notifications) == 1
    assert notifications[0]["id"] != first["id"]


def test_notifications_are_private(client, register, add_game, share_token) -> None:
    _, alice = register("alice")
    _, mallory = register("mallory")
    item = add_game(alice, "Chrono Trigger")
    _buy(client, share_token(alice), item["id"])
    notification_id = client.get("/notifications", headers=alice).json()["notifications"][0]["id"]

    for action in ("validate", "refuse", "dismiss", "read"):
        response = client.patch(f"/notifications/{notification_id}/{action}", headers=mallory)
        assert response.status_code == 404, action

    assert client.get("/notifications", headers=alice).json()["count"] == 1


def test_mark_read(client, register, add_game, share_token) -> None:
    _, alice = register("alice")
    item = add_game(alice, "Chrono Trigger")
    _buy(client, share_token(alice), item["id"])
    notification = client.get("/notifications", headers=alice).json()["notifications"][0]
    assert notification["isRead"] is False

    assert client.patch(f"/notifications/{notification['id']}/read", headers=alice).status_code == 200
    refreshed = client.get("/notifications", headers=alice).json()["notifications"][0]
    assert refreshed["isRead"] is True
    assert refreshed["readAt"] is not None

    assert client.patch(f"/notifications/{notification['id']}/read", headers=alice).status_code == 404


def test_validate_rejects_item_that_left_the_wishlist(
    client, register, add_game, share_token, session
) -> None:
    _, alice = register("alice")
    item = add_game(alice, "Chrono Trigger")
    _buy(client, share_token(alice), item["id"])
    notification = client.get("/notifications", headers=alice).json()["notifications"][0]

    # Simulate a write that bypassed the collection use cases.
    session.query(UserGameModel).filter_by(id=item["id"]).update({"status": "COMPLETED"})
    session.commit()

    response = client.patch(f"/notifications/{notification['id']}/validate", headers=alice)
    assert response.status_code == 400
    assert response.json()["detail"] == "This game is no longer in the wishlist"


def test_listing_dismisses_orphaned_notifications(
    client, register, add_game, share_token, session
) -> None:
    _, alice = register("alice")
    kept = add_game(alice, "Chrono Trigger")
    moved = add_game(alice, "Super Metroid")
    deleted = add_game(alice, "Earthbound")
    token = share_token(alice)
    for entry in (kept, moved, deleted):
        _buy(client, token, entry["id"])

    session.query(UserGameModel).filter_by(id=moved["id"]).update({"status": "IN_PROGRESS"})
    session.query(UserGameModel).filter_by(id=deleted["id"]).delete()
    session.commit()

    payload = client.get("/notifications", headers=alice).json()
    assert payload["count"] == 1
    assert payload["notifications"][0]["userGameId"] == kept["id"]

    # The orphans were dismissed, not merely hidden.
    again = client.get("/notifications", headers=alice).json()
    assert again["count"] == 1


def test_notifications_require_authentication(client) -> None:
    assert client.get("/notifications").status_code == 401
    assert client.patch("/notifications/1/validate").status_code == 401


def test_websocket_answers_ping(client, register) -> None:
    _, headers = register("alice")
    token = headers["Authorization"].removeprefix("Bearer ")

    with client.websocket_connect(f"/notifications/ws?token={token}") as websocket:
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}


@pytest.mark.parametrize("query", ["", "?token=not-a-jwt"])
def test_websocket_rejects_missing_or_bad_token(client, query: str) -> None:
    with pytest.raises(WebSocketDisconnect) as exc_info:
        with client.websocket_connect(f"/notifications/ws{query}") as websocket:
            websocket.receive_json()

    assert exc_info.value.code == 1008
