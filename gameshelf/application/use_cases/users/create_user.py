"""Use case for registering users."""

import logging

from sqlalchemy.orm import Session

from gameshelf.domain.entities import User
from gameshelf.domain.errors import InvalidInput
from gameshelf.infrastructure.database import atomic
from gameshelf.infrastructure.repositories import UserRepository
from gameshelf.infrastructure.security import generate_friend_code, get_password_hash
from gameshelf.utils import now_in_app_timezone

from .validators import ensure_valid_password, ensure_valid_username, normalize_email

logger = logging.getLogger(__name__)

_FRIEND_CODE_ATTEMPTS = 10


def _mint_friend_code(repository: UserRepository) -> str:
    for _ in range(_FRIEND_CODE_ATTEMPTS):
        code = generate_friend_code()
        if not repository.friend_code_exists(code):
            return code
    raise RuntimeError("Could not allocate a unique friend code")


def create_user(
    session: Session,
    *,
    username: str,
    full_name: str | None,
    email: str,
    password: str,
    avatar_url: str | None = None,
) -> User:
    """Create a new user ensuring unique usernames and email addresses."""

    repository = UserRepository(session)

    username = ensure_valid_username(username)
    email = normalize_email(email)
    ensure_valid_password(password)

    if repository.get_by_email(email):
        raise InvalidInput("This email address is already registered")
    if repository.get_by_username(username):
        raise InvalidInput("This username is already taken")

    user = User(
        id=None,
        username=username,
        full_name=(full_name or "").strip() or None,
        email=email,
        password=get_password_hash(password),
        avatar_url=avatar_url,
        friend_code=_mint_friend_code(repository),
        is_active=True,
        created_at=now_in_app_timezone(),
        updated_at=None,
    )

    with atomic(session):
        created = repository.create(user)

    logger.info("Registered user %s (id=%s)", created.username, created.id)
    return created
