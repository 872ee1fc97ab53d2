"""
Email delivery over SMTP.

``NotificationService.send`` formats a MIME message and hands it to
the mail server configured in ``settings``.  ``smtplib`` is blocking,
so the session runs in a worker thread.  Failures are raised as
``DeliveryError`` and are not retried.
"""

import asyncio
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from ticketing_api.app.core.config import settings
from ticketing_api.app.core.errors import DeliveryError


logger = logging.getLogger(__name__)


class NotificationService:
    """Send notification emails."""

    @classmethod
    def build_message(cls, to: str, subject: str, html_body: str) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = (
            f"{settings.mail_from_name} <{settings.mail_from}>"
            if settings.mail_from_name
            else settings.mail_from
        )
        msg["To"] = to
        msg.attach(MIMEText(html_body, "html", "utf-8"))
        return msg

    @classmethod
    def _deliver(cls, msg: MIMEMultipart) -> None:
        with smtplib.SMTP(
            settings.smtp_host, settings.smtp_port, timeout=settings.smtp_timeout_seconds
        ) as server:
            if settings.smtp_use_tls:
                server.starttls()
            if settings.smtp_username:
                server.login(settings.smtp_username, settings.smtp_password)
            server.send_message(msg)

    @classmethod
    async def send(cls, to: str, subject: str, html_body: str) -> None:
        """Send ``html_body`` to ``to`` with the given subject.

        When no SMTP host is configured the message is logged and
        dropped, which keeps local development free of a mail server.
        """
        if not to:
            raise DeliveryError("Recipient address is empty")
        if not settings.smtp_host:
            logger.warning("SMTP_HOST not configured; skipping email '%s' to %s", subject, to)
            return
        msg = cls.build_message(to, subject, html_body)
        try:
            await asyncio.to_thread(cls._deliver, msg)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("Failed to send email '%s' to %s: %s", subject, to, exc)
            raise DeliveryError(f"Failed to send email to {to}: {exc}") from exc
        logger.info("Sent email '%s' to %s", subject, to)
