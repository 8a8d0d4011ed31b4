"""Utility helpers for sending transactional email notifications via SendGrid."""

from __future__ import annotations

import json
import logging
from html import escape
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from gameshelf.config import get_settings

logger = logging.getLogger(__name__)


def _describe_sendgrid_errors(body: Any) -> str | None:
    """Summarize the ``errors`` array SendGrid returns with rejected requests.

    Each entry becomes ``field: message`` (or just ``message``). Bodies that
    are not JSON are returned as text.
    """

    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8", errors="replace")
    if isinstance(body, str):
        text = body.strip()
        if not text:
            return None
        try:
            body = json.loads(text)
        except json.JSONDecodeError:
            return text
    if not isinstance(body, dict):
        return None

    described = []
    for error in body.get("errors") or ():
        if not isinstance(error, dict) or not error.get("message"):
            continue
        field = error.get("field")
        described.append(f"{field}: {error['message']}" if field else str(error["message"]))
    return "; ".join(described) or json.dumps(body, default=str)


def _log_sendgrid_failure(source: Any, *, raised: bool) -> None:
    status_code = getattr(source, "status_code", None)
    details = _describe_sendgrid_errors(getattr(source, "body", None))

    if status_code and details:
        logger.error("SendGrid request failed with status %s: %s", status_code, details)
    elif status_code:
        logger.error("SendGrid request failed with status %s", status_code)
    elif details:
        logger.error("SendGrid request failed: %s", details)
    elif raised:
        logger.exception("Error sending email via SendGrid: %s", source)
    else:
        logger.error("SendGrid returned an unexpected response: %r", source)


def send_email(
    subject: str,
    html_content: str,
    recipient: str,
    *,
    reply_to: str | None = None,
) -> bool:
    """Send an email using the configured SendGrid credentials.

    Returns ``False`` when email is not configured or delivery failed; the
    failure is logged.
    """

    settings = get_settings()
    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.warning("SendGrid configuration incomplete; skipping email delivery")
        return False

    message = Mail(
        from_email=settings.sendgrid_sender,
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
    )
    if reply_to:
        message.reply_to = reply_to

    try:
        client = SendGridAPIClient(settings.sendgrid_api_key)
        response = client.send(message)
    except Exception as exc:  # network and HTTP errors raised by python-http-client
        _log_sendgrid_failure(exc, raised=True)
        return False

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        _log_sendgrid_failure(response, raised=False)
        return False

    return True


def send_support_message_email(
    *, name: str, email: str, subject: str, message: str
) -> bool:
    """Forward a contact-form message to the support mailbox."""

    settings = get_settings()
    if not settings.support_email:
        logger.warning("SUPPORT_EMAIL is not configured; dropping contact message")
        return False

    body = escape(message).replace("\n", "<br>")
    html_content = "".join(
        (
            "<p>New message from the GameShelf contact form.</p>",
            f"<p><strong>Name:</strong> {escape(name)}<br>",
            f"<strong>Email:</strong> {escape(email)}</p>",
            f"<p>{body}</p>",
        )
    )
    return send_email(
        f"[GameShelf] {subject}",
        html_content,
        settings.support_email,
        reply_to=email,
    )
