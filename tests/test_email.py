"""Unit tests for the SendGrid email helper utilities."""

from __future__ import annotations

import json
import types

import pytest

from gameshelf.application.use_cases.contact import send_contact_message
from gameshelf.domain.errors import UpstreamFailure
from gameshelf.infrastructure import email as email_module


class DummySettings:
    sendgrid_api_key = "SG.fake"
    sendgrid_sender = "sender@gamers.io"
    support_email = "support@gamers.io"


class RecordingClient:
    """Stand-in for ``SendGridAPIClient`` remembering what it was asked to send."""

    sent: list = []

    def __init__(self, api_key: str):
        self.api_key = api_key

    def send(self, message):
        RecordingClient.sent.append(message)
        return types.SimpleNamespace(status_code=202, body=None)


@pytest.fixture()
def configured(monkeypatch: pytest.MonkeyPatch):
    RecordingClient.sent = []
    monkeypatch.setattr(email_module, "get_settings", lambda: DummySettings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", RecordingClient)
    return RecordingClient


def test_send_email_without_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    """When SendGrid settings are missing the helper should exit early."""

    class UnconfiguredSettings:
        sendgrid_api_key = None
        sendgrid_sender = None

    monkeypatch.setattr(email_module, "get_settings", lambda: UnconfiguredSettings())

    assert email_module.send_email("Subject", "<p>Body</p>", "user@gamers.io") is False


def test_send_email_success(configured) -> None:
    assert email_module.send_email("Subject", "<p>Body</p>", "user@gamers.io") is True
    assert len(configured.sent) == 1


def test_send_email_logs_forbidden_error(monkeypatch: pytest.MonkeyPatch, caplog):
    """Forbidden responses from SendGrid should surface meaningful log details."""

    class FakeForbiddenError(Exception):
        status_code = 403
        body = json.dumps(
            {"errors": [{"message": "The provided authorization grant is invalid."}]}
        ).encode()

    class FailingClient(RecordingClient):
        def send(self, message):
            raise FakeForbiddenError()

    monkeypatch.setattr(email_module, "get_settings", lambda: DummySettings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", FailingClient)

    with caplog.at_level("ERROR"):
        result = email_module.send_email("Subject", "<p>Body</p>", "user@gamers.io")

    assert result is False
    assert "status 403" in caplog.text
    assert "authorization grant is invalid" in caplog.text


def test_send_email_rejects_unexpected_status(monkeypatch: pytest.MonkeyPatch, caplog):
    class ServerErrorClient(RecordingClient):
        def send(self, message):
            return types.SimpleNamespace(status_code=500, body=b"upstream exploded")

    monkeypatch.setattr(email_module, "get_settings", lambda: DummySettings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", ServerErrorClient)

    with caplog.at_level("ERROR"):
        assert email_module.send_email("Subject", "<p>Body</p>", "user@gamers.io") is False
    assert "status 500: upstream exploded" in caplog.text


def test_support_message_requires_support_mailbox(monkeypatch: pytest.MonkeyPatch) -> None:
    class NoSupportSettings(DummySettings):
        support_email = None

    monkeypatch.setattr(email_module, "get_settings", lambda: NoSupportSettings())

    assert (
        email_module.send_support_message_email(
            name="Alice", email="alice@gamers.io", subject="Hi", message="Hello there"
        )
        is False
    )


def test_support_message_escapes_user_content(configured) -> None:
    delivered = email_module.send_support_message_email(
        name="<b>Alice</b>",
        email="alice@gamers.io",
        subject="Missing cover",
        message="Line one\nLine <two>",
    )

    assert delivered is True
    payload = configured.sent[0].get()
    assert payload["subject"] == "[GameShelf] Missing cover"
    assert payload["reply_to"]["email"] == "alice@gamers.io"
    html = payload["content"][0]["value"]
    assert "&lt;b&gt;Alice&lt;/b&gt;" in html
    assert "Line one<br>Line &lt;two&gt;" in html


def test_contact_message_raises_when_delivery_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(email_module, "get_settings", lambda: DummySettings())

    class FailingClient(RecordingClient):
        def send(self, message):
            raise ConnectionError("network unreachable")

    monkeypatch.setattr(email_module, "SendGridAPIClient", FailingClient)

    with pytest.raises(UpstreamFailure):
        send_contact_message(
            name="Alice", email="alice@gamers.io", subject="Hi", message="Hello there"
        )


def test_contact_route_accepts_message(client, configured) -> None:
    response = client.post(
        "/contact",
        json={
            "name": "Alice",
            "email": "alice@gamers.io",
            "subject": "Missing cover",
            "message": "The cover of Chrono Trigger is missing.",
        },
    )

    assert response.status_code == 202
    assert len(configured.sent) == 1


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        (None, None),
        (b"  ", None),
        (b"upstream exploded", "upstream exploded"),
        (
            json.dumps(
                {
                    "errors": [
                        {"field": "from", "message": "Sender not verified"},
                        {"message": "Too many requests"},
                        {"help": "no message here"},
                    ]
                }
            ),
            "from: Sender not verified; Too many requests",
        ),
        ({"unexpected": True}, '{"unexpected": true}'),
    ],
)
def test_sendgrid_error_bodies_are_summarized(body, expected) -> None:
    assert email_module._describe_sendgrid_errors(body) == expected
