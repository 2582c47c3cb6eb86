"""Template-rendered email delivery over SMTP."""

import logging
import smtplib
from email.message import EmailMessage
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from lms.config import TEMPLATES_DIR, Settings, get_settings

logger = logging.getLogger(__name__)


class SmtpMailService:
    """
    Renders Jinja2 templates and sends them as HTML email.

    Delivery is best-effort: a missing SMTP configuration or any delivery
    failure is logged and reported as False, never raised.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.environment = Environment(
            loader=FileSystemLoader(TEMPLATES_DIR),
            autoescape=select_autoescape(["html"]),
        )

    def render(self, template: str, data: dict[str, Any]) -> str:
        return self.environment.get_template(template).render(**data)

    def send(self, email: str, subject: str, template: str, data: dict[str, Any]) -> bool:
        """
        Send a templated email.

        Args:
            email: Recipient address
            subject: Subject line
            template: Template file name under the templates directory
            data: Template context

        Returns:
            True if the message was handed to the SMTP server
        """
        if not self.settings.smtp_enabled:
            logger.warning(f"SMTP not configured, skipping '{template}' email to {email}")
            return False

        try:
            html = self.render(template, data)

            message = EmailMessage()
            message["Subject"] = subject
            message["From"] = f'"{self.settings.SMTP_FROM_NAME}" <{self.settings.SMTP_USER}>'
            message["To"] = email
            message.set_content("This message requires an HTML capable mail client.")
            message.add_alternative(html, subtype="html")

            self._deliver(message)
        except Exception as e:
            logger.error(f"Failed to send '{template}' email to {email}: {e!s}", exc_info=True)
            return False

        logger.info(f"Sent '{template}' email to {email}")
        return True

    def _deliver(self, message: EmailMessage) -> None:
        host = self.settings.SMTP_HOST or ""
        port = self.settings.SMTP_PORT or 0
        user = self.settings.SMTP_USER or ""
        password = self.settings.SMTP_PASSWORD or ""

        if port == 465:
            with smtplib.SMTP_SSL(host, port, timeout=10) as server:
                server.login(user, password)
                server.send_message(message)
            return

        with smtplib.SMTP(host, port, timeout=10) as server:
            server.starttls()
            server.login(user, password)
            server.send_message(message)
