"""Use-case level checks of the purchase-intent workflow."""

from __future__ import annotations

import pytest

from gameshelf.application.use_cases import create_user
from gameshelf.application.use_cases.collection import add_to_collection
from gameshelf.application.use_cases.games import create_game
from gameshelf.application.use_cases.notifications import (
    list_active_notifications,
    validate_purchase,
)
from gameshelf.application.use_cases.wishlist import get_or_create_share, toggle_buy
from gameshelf.domain.entities import NOTIFICATION_TYPE_WISHLIST
from gameshelf.domain.errors import AlreadyProcessed, InvalidShareToken, Unauthorized
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.models import NotificationModel
from gameshelf.infrastructure.repositories import NotificationRepository, UserGameRepository


@pytest.fixture()
def wishlist_item(session):
    owner = create_user(
        session,
        username="alice",
        full_name="Alice",
        email="alice@gamers.io",
        password="supersecret",
    )
    game = create_game(session, title="Chrono Trigger", console_name="SNES")
    item = add_to_collection(session, user_id=owner.id, game_id=game.id)
    return owner, item


def _live_rows(session, item_id: int) -> int:
    return (
        session.query(NotificationModel)
        .filter_by(user_game_id=item_id, is_dismissed=False)
        .count()
    )


def test_repeated_toggle_keeps_a_single_live_notification(session, wishlist_item) -> None:
    owner, item = wishlist_item
    token = get_or_create_share(session, user_id=owner.id).token

    for _ in range(3):
        updated = toggle_buy(session, item_id=item.id, buy=True, token=token)
        assert updated.buy is True

    assert _live_rows(session, item.id) == 1

    toggle_buy(session, item_id=item.id, buy=False, user_id=owner.id)
    assert _live_rows(session, item.id) == 0


def test_toggle_requires_a_caller(session, wishlist_item) -> None:
    _, item = wishlist_item

    with pytest.raises(Unauthorized):
        toggle_buy(session, item_id=item.id, buy=True)
    with pytest.raises(InvalidShareToken):
        toggle_buy(session, item_id=item.id, buy=True, token="   ")


def test_create_if_absent_reports_existing_row(session, wishlist_item) -> None:
    owner, item = wishlist_item
    repository = NotificationRepository(session)

    with atomic(session):
        first, created = repository.create_if_absent(
            user_id=owner.id, notification_type=NOTIFICATION_TYPE_WISHLIST, reference_id=item.id
        )
    with atomic(session):
        second, created_again = repository.create_if_absent(
            user_id=owner.id, notification_type=NOTIFICATION_TYPE_WISHLIST, reference_id=item.id
        )

    assert created is True
    assert created_again is False
    assert first.id == second.id


def test_atomic_rolls_back_every_step(session, wishlist_item) -> None:
    owner, item = wishlist_item

    with pytest.raises(RuntimeError):
        with atomic(session):
            UserGameRepository(session).set_buy(item.id, True, user_id=owner.id)
            NotificationRepository(session).create_if_absent(
                user_id=owner.id,
                notification_type=NOTIFICATION_TYPE_WISHLIST,
                reference_id=item.id,
            )
            raise RuntimeError("boom")

    assert UserGameRepository(session).get(item.id).buy is None
    assert _live_rows(session, item.id) == 0


def test_validate_purchase_is_single_shot(session, wishlist_item) -> None:
    owner, item = wishlist_item
    toggle_buy(session, item_id=item.id, buy=True, user_id=owner.id)
    feed = list_active_notifications(session, user_id=owner.id)
    notification_id = feed.notifications[0].notification.id

    result = validate_purchase(session, notification_id=notification_id, user_id=owner.id)
    assert result.status == "NOT_STARTED"
    assert result.buy is False

    with pytest.raises(AlreadyProcessed):
        validate_purchase(session, notification_id=notification_id, user_id=owner.id)
    assert list_active_notifications(session, user_id=owner.id).count == 0
