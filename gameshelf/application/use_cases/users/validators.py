"""Common validation helpers for user use cases."""

import re

from gameshelf.domain.errors import InvalidInput

MIN_PASSWORD_LENGTH = 8
_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]{3,30}$")


def normalize_email(email: str) -> str:
    normalized = email.strip().lower()
    if normalized.count("@") != 1 or normalized.startswith("@") or normalized.endswith("@"):
        raise InvalidInput("A valid email address is required")
    return normalized


def ensure_valid_username(username: str) -> str:
    """Return the trimmed username or raise :class:`InvalidInput`."""

    normalized = username.strip()
    if not _USERNAME_PATTERN.match(normalized):
        raise InvalidInput(
            "Usernames are 3 to 30 characters long and use letters, digits, '.', '_' or '-'"
        )
    return normalized


def ensure_valid_password(password: str) -> str:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise InvalidInput(
            f"Password must contain at least {MIN_PASSWORD_LENGTH} characters"
        )
    return password
