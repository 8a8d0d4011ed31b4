"""Use case for editing the caller's public profile."""

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from gameshelf.domain.entities import User
from gameshelf.domain.errors import NotFound
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)


def _clean(value: str | None, current: str | None) -> str | None:
    if value is None:
        return current
    return value.strip() or None


def update_profile(
    session: Session,
    *,
    user_id: int,
    full_name: str | None = None,
    avatar_url: str | None = None,
    is_public: bool | None = None,
) -> User:
    """Update the provided fields; ``None`` leaves a field unchanged."""

    repository = UserRepository(session)
    current_user = repository.get(user_id)
    if current_user is None:
        raise NotFound("User not found")

    updated_user = replace(
        current_user,
        full_name=_clean(full_name, current_user.full_name),
        avatar_url=_clean(avatar_url, current_user.avatar_url),
        is_public=is_public if is_public is not None else current_user.is_public,
    )

    with atomic(session):
        user = repository.update(updated_user)
    if user.is_public != current_user.is_public:
        visibility = "public" if user.is_public else "private"
        logger.info("User %s made their profile %s", user_id, visibility)
    return user
