"""Security helpers for hashing and token generation."""

from datetime import datetime, timedelta, timezone
from hashlib import sha256
import secrets
import string

from jose import JWTError, jwt
from passlib.context import CryptContext

from gameshelf.config import get_settings

FRIEND_CODE_LENGTH = 8
FRIEND_CODE_ALPHABET = string.ascii_uppercase + string.digits
SHARE_TOKEN_BYTES = 32

pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__rounds=310_000,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


# ---- JWT ----
settings = get_settings()


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode({**data, "exp": expire}, settings.secret_key, algorithm="HS256")


def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.secret_key, algorithms=["HS256"])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def generate_share_token() -> str:
    """Return a 256-bit random token encoded as 64 hex characters."""

    return secrets.token_hex(SHARE_TOKEN_BYTES)


def generate_friend_code() -> str:
    """Return a random friend code such as ``K7Q2ZP4M``."""

    return "".join(
        secrets.choice(FRIEND_CODE_ALPHABET) for _ in range(FRIEND_CODE_LENGTH)
    )


def password_signature(hashed_password: str, is_active: bool) -> str:
    """Return the token claim that ties a JWT to the current password and status."""

    return sha256(f"{hashed_password}:{int(is_active)}".encode()).hexdigest()
