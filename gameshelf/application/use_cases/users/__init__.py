"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .create_user import create_user
from .update_profile import update_profile

__all__ = [
    "AuthenticationStatus",
    "authenticate_user",
    "create_user",
    "update_profile",
]
