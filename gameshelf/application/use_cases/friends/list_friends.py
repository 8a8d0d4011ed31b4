"""Use case listing a user's friends."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from gameshelf.domain.entities import User
from gameshelf.infrastructure.repositories import FriendshipRepository, UserRepository


def list_friends(session: Session, *, user_id: int) -> Sequence[User]:
    """Return the active friends of ``user_id`` ordered by username."""

    friendships = FriendshipRepository(session).list_for_user(user_id)
    friend_ids = [friendship.other(user_id) for friendship in friendships]
    return UserRepository(session).list_by_ids(friend_ids)
