"""Error taxonomy raised by the application use cases.

Every error derives from :class:`GameShelfError`, a ``ValueError`` so callers
that only care about "the operation was rejected" can keep catching
``ValueError``. The HTTP layer maps each class to a status code.
"""

from __future__ import annotations


class GameShelfError(ValueError):
    """Base class for expected, user-facing failures."""

    default_message = "Operation failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(GameShelfError):
    """Missing or invalid session."""

    default_message = "Not authenticated"


class InvalidShareToken(Unauthorized):
    """Unknown or inactive share token; both cases look the same to callers."""

    default_message = "Invalid or expired share link"


class Forbidden(GameShelfError):
    """The entity exists but its owner keeps it private."""

    default_message = "Access denied"


class NotFound(GameShelfError):
    """Entity absent or not visible to the caller."""

    default_message = "Not found"


class InvalidInput(GameShelfError):
    """Request data rejected by a use case."""

    default_message = "Invalid input"


class InvalidState(GameShelfError):
    """Operation not allowed for the entity's current status or flags."""

    default_message = "Operation not allowed in the current state"


class AlreadyProcessed(GameShelfError):
    """The notification was already validated, refused or dismissed."""

    default_message = "This notification has already been processed"


class AlreadyDismissed(AlreadyProcessed):
    default_message = "Notification already dismissed"


class UpstreamFailure(GameShelfError):
    """An external collaborator failed or was unreachable."""

    default_message = "An external service is unavailable, please retry later"


__all__ = [
    "GameShelfError",
    "Unauthorized",
    "InvalidShareToken",
    "Forbidden",
    "NotFound",
    "InvalidInput",
    "InvalidState",
    "AlreadyProcessed",
    "AlreadyDismissed",
    "UpstreamFailure",
]
