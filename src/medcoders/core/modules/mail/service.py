import asyncio
from email.message import EmailMessage
from typing import Any

import aiosmtplib
import structlog
from pymongo.asynchronous.database import AsyncDatabase

from medcoders.core.core import Service
from medcoders.errors import ConfigurationError, MailDeliveryError

logger = structlog.get_logger(__name__)

SMTP_TIMEOUT_SECONDS = 30
IMPLICIT_TLS_PORT = 465


class MailService(Service):
    """Outgoing transactional email over SMTP."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._tasks: set[asyncio.Task[None]] = set()

    async def on_stop(self) -> None:
        """Let queued emails finish before the process exits."""
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    def _build_message(self, to: str, subject: str, html: str, cc: list[str] | None) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.core.config.mail_sender
        message["To"] = to
        if cc:
            message["Cc"] = ", ".join(cc)
        message["Subject"] = subject
        message.set_content(html, subtype="html")
        return message

    async def send_email(self, to: str, subject: str, html: str, cc: list[str] | None = None) -> None:
        """Send an HTML email.

        Raises:
            ConfigurationError: If SMTP credentials are not configured
            MailDeliveryError: If the SMTP server rejects or cannot be reached
        """
        config = self.core.config
        if not config.smtp_user or not config.smtp_password:
            raise ConfigurationError("SMTP credentials are not configured, set SMTP_USER and SMTP_PASSWORD")

        message = self._build_message(to, subject, html, cc)
        try:
            response = await aiosmtplib.send(
                message,
                hostname=config.smtp_host,
                port=config.smtp_port,
                username=config.smtp_user,
                password=config.smtp_password,
                use_tls=config.smtp_port == IMPLICIT_TLS_PORT,
                timeout=SMTP_TIMEOUT_SECONDS,
            )
        except aiosmtplib.SMTPException as e:
            logger.warning("email_send_failed", to=to, subject=subject, error=str(e))
            raise MailDeliveryError(f"Failed to send email: {e}") from e

        logger.info("email_sent", to=to, cc=cc, subject=subject, response=str(response))

    def send_in_background(self, to: str, subject: str, html: str, cc: list[str] | None = None) -> None:
        """Queue an email without waiting for it. Failures are logged, never raised to the caller."""
        task = asyncio.create_task(self._send_logged(to, subject, html, cc))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _send_logged(self, to: str, subject: str, html: str, cc: list[str] | None) -> None:
        try:
            await self.send_email(to, subject, html, cc)
        except (ConfigurationError, MailDeliveryError):
            logger.exception("background_email_failed", to=to, subject=subject)
