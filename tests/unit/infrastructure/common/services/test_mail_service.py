"""Unit tests for SmtpMailService."""

from email.message import EmailMessage
from typing import Any

import pytest

from lms.config import Settings
from lms.infrastructure.common.services.mail_service import SmtpMailService


@pytest.fixture
def smtp_settings() -> Settings:
    return Settings(
        SMTP_HOST="smtp.example.com",
        SMTP_PORT=587,
        SMTP_USER="mailer@example.com",
        SMTP_PASSWORD="smtp-secret",  # noqa: S106
    )


class TestRender:
    """Each template renders with the context its sender passes."""

    def test_activation_mail(self) -> None:
        html = SmtpMailService(Settings()).render(
            "activation-mail.html",
            {"user": {"name": "Ada"}, "activation_code": "482913", "expires_in_minutes": 5},
        )

        assert "Welcome, Ada!" in html
        assert "482913" in html
        assert "expires in 5 minutes" in html

    def test_order_confirmation(self) -> None:
        html = SmtpMailService(Settings()).render(
            "order-confirmation.html",
            {
                "user": {"name": "Ada"},
                "order": {
                    "id": "17",
                    "date": "October 19, 2026",
                    "items": [{"title": "Python Fundamentals", "quantity": 1, "price": 49.0}],
                    "total_amount": 49.0,
                },
                "dashboard_url": "http://localhost:3000/dashboard",
            },
        )

        assert "Thank you for your order, Ada!" in html
        assert "#17" in html
        assert "October 19, 2026" in html
        assert "Python Fundamentals" in html
        assert "$49.00" in html
        assert 'href="http://localhost:3000/dashboard"' in html

    def test_question_reply(self) -> None:
        html = SmtpMailService(Settings()).render(
            "question-reply.html", {"user": {"name": "Ada"}, "title": "Variables"}
        )

        assert "Hello Ada," in html
        assert "<strong>Variables</strong>" in html

    def test_names_are_escaped(self) -> None:
        html = SmtpMailService(Settings()).render(
            "question-reply.html", {"user": {"name": "<script>"}, "title": "Variables"}
        )

        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestSend:
    def test_skipped_without_smtp_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        service = SmtpMailService(Settings())
        delivered: list[EmailMessage] = []
        monkeypatch.setattr(service, "_deliver", delivered.append)

        sent = service.send(
            "ada@example.com", "Question Reply", "question-reply.html", {"user": {"name": "Ada"}}
        )

        assert sent is False
        assert delivered == []

    def test_delivers_rendered_message(
        self, smtp_settings: Settings, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        service = SmtpMailService(smtp_settings)
        delivered: list[EmailMessage] = []
        monkeypatch.setattr(service, "_deliver", delivered.append)

        sent = service.send(
            "ada@example.com",
            "Question Reply",
            "question-reply.html",
            {"user": {"name": "Ada"}, "title": "Variables"},
        )

        assert sent is True
        assert len(delivered) == 1
        message = delivered[0]
        assert message["To"] == "ada@example.com"
        assert message["Subject"] == "Question Reply"
        assert "mailer@example.com" in message["From"]
        html = message.get_body(preferencelist=("html",))
        assert html is not None
        assert "Hello Ada," in html.get_content()

    def test_delivery_failure_is_reported_not_raised(
        self, smtp_settings: Settings, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        service = SmtpMailService(smtp_settings)

        def failing_deliver(message: EmailMessage) -> None:
            raise ConnectionRefusedError("smtp.example.com refused the connection")

        monkeypatch.setattr(service, "_deliver", failing_deliver)

        sent = service.send(
            "ada@example.com",
            "Activate your account",
            "activation-mail.html",
            {"user": {"name": "Ada"}, "activation_code": "482913", "expires_in_minutes": 5},
        )

        assert sent is False

    def test_unknown_template_is_reported_not_raised(
        self, smtp_settings: Settings, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        service = SmtpMailService(smtp_settings)
        delivered: list[Any] = []
        monkeypatch.setattr(service, "_deliver", delivered.append)

        assert service.send("ada@example.com", "Hello", "missing.html", {}) is False
        assert delivered == []
