"""Use case forwarding a contact-form message to support."""

import logging

from gameshelf.domain.errors import UpstreamFailure
from gameshelf.infrastructure.email import send_support_message_email

logger = logging.getLogger(__name__)


def send_contact_message(*, name: str, email: str, subject: str, message: str) -> None:
    """Send the message to the support mailbox or raise :class:`UpstreamFailure`."""

    delivered = send_support_message_email(
        name=name.strip(),
        email=email.strip(),
        subject=subject.strip(),
        message=message.strip(),
    )
    if not delivered:
        raise UpstreamFailure("Your message could not be sent, please retry later")
    logger.info("Forwarded contact message from %s", email)
