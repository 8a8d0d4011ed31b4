"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from gameshelf.domain.entities import User
from gameshelf.infrastructure.models import UserModel
from gameshelf.utils import ensure_app_timezone


def _contains_pattern(term: str) -> str:
    escaped = term.strip().lower()
    for char in ("\\", "%", "_"):
        escaped = escaped.replace(char, "\\" + char)
    return f"%{escaped}%"


class UserRepository:
    """Provide persistence operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.email) == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def get_by_username(self, username: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.username) == username.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def get_by_friend_code(self, friend_code: str) -> User | None:
        model = self.session.query(UserModel).filter_by(friend_code=friend_code).first()
        return self._to_entity(model) if model else None

    def friend_code_exists(self, friend_code: str) -> bool:
        query = self.session.query(UserModel.id).filter_by(friend_code=friend_code)
        return self.session.query(query.exists()).scalar()

    def get_map_by_ids(self, user_ids: Sequence[int]) -> dict[int, User]:
        if not user_ids:
            return {}

        unique_ids = {int(user_id) for user_id in user_ids}
        query = self.session.query(UserModel).filter(UserModel.id.in_(unique_ids))
        return {model.id: self._to_entity(model) for model in query.all()}

    def list_by_ids(self, user_ids: Sequence[int]) -> Sequence[User]:
        if not user_ids:
            return []
        query = (
            self.session.query(UserModel)
            .filter(UserModel.id.in_(set(user_ids)))
            .filter(UserModel.is_active.is_(True))
            .order_by(func.lower(UserModel.username))
        )
        return [self._to_entity(model) for model in query.all()]

    def search_public(self, term: str | None = None, *, limit: int = 50) -> Sequence[User]:
        """Return active public profiles whose username contains ``term``."""

        query = (
            self.session.query(UserModel)
            .filter(UserModel.is_public.is_(True))
            .filter(UserModel.is_active.is_(True))
        )
        if term:
            query = query.filter(
                func.lower(UserModel.username).like(_contains_pattern(term), escape="\\")
            )
        query = query.order_by(func.lower(UserModel.username)).limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def create(self, user: User) -> User:
        model = UserModel(
            username=user.username,
            full_name=user.full_name,
            email=user.email,
            password=user.password,
            avatar_url=user.avatar_url,
            friend_code=user.friend_code,
            is_active=user.is_active,
            is_public=user.is_public,
        )
        if user.created_at is not None:
            model.created_at = user.created_at
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if model is None:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)

        model.full_name = user.full_name
        model.avatar_url = user.avatar_url
        model.is_public = user.is_public
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            full_name=model.full_name,
            email=model.email,
            password=model.password,
            avatar_url=model.avatar_url,
            friend_code=model.friend_code,
            is_active=model.is_active,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            is_public=bool(model.is_public),
        )


__all__ = ["UserRepository"]
