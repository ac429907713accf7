"""Service for sending emails."""

import logging
import smtplib
from email.errors import MessageError
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from ..domain.models import ContactMessage

logger = logging.getLogger(__name__)


class EmailService:
    """Service for sending emails via SMTP."""

    def __init__(
        self,
        smtp_host: Optional[str] = None,
        smtp_port: int = 587,
        smtp_username: Optional[str] = None,
        smtp_password: Optional[str] = None,
        from_email: Optional[str] = None,
        from_name: str = "School Website",
    ):
        self.smtp_host = smtp_host or ""
        self.smtp_port = smtp_port
        self.smtp_username = smtp_username or ""
        self.smtp_password = smtp_password or ""
        self.from_email = from_email or smtp_username or ""
        self.from_name = from_name
        self.enabled = bool(self.smtp_host and self.smtp_username and self.from_email)

    def send_password_reset_email(self, to_email: str, reset_url: str) -> bool:
        """
        Send the password reset link to an administrator.

        Args:
            to_email: Recipient email
            reset_url: Link carrying the reset token

        Returns:
            True if sent (or logged while SMTP is disabled), False otherwise
        """
        if not self.enabled:
            logger.info("SMTP disabled; password reset link for %s: %s", to_email, reset_url)
            return True

        subject = "Admin password reset"
        text_body = (
            "A password reset was requested for your admin account.\n\n"
            f"Open the link below within one hour to choose a new password:\n{reset_url}\n\n"
            "If you did not request this, you can ignore this email.\n"
        )
        return self._send_email(to_email, subject, text_body)

    def send_contact_notification(self, to_email: str, contact: ContactMessage) -> bool:
        """Relay a contact form submission to the school inbox."""
        if not self.enabled:
            logger.warning("Cannot relay contact message %s - SMTP is not configured", contact.id)
            return False

        lines = [
            "New contact form submission",
            f"Name: {contact.full_name}",
            f"Email: {contact.email}",
        ]
        if contact.phone:
            lines.append(f"Phone: {contact.phone}")
        lines.extend([f"Subject: {contact.subject}", "", contact.message])
        return self._send_email(
            to_email,
            f"Contact Form: {contact.subject}",
            "\n".join(lines),
            reply_to=contact.email,
        )

    def _send_email(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        reply_to: Optional[str] = None,
    ) -> bool:
        """
        Send an email via SMTP.

        Returns:
            True if sent successfully, False otherwise
        """
        if any("\r" in value or "\n" in value for value in (to_email, subject, reply_to or "")):
            logger.error("Refusing to send email to %r: header value contains a line break", to_email)
            return False

        try:
            msg = MIMEMultipart("alternative")
            msg["Subject"] = subject
            msg["From"] = f"{self.from_name} <{self.from_email}>"
            msg["To"] = to_email
            if reply_to:
                msg["Reply-To"] = reply_to

            msg.attach(MIMEText(text_body, "plain", "utf-8"))

            with smtplib.SMTP(self.smtp_host, self.smtp_port) as server:
                server.starttls()
                server.login(self.smtp_username, self.smtp_password)
                server.send_message(msg)

            logger.info("Email sent to %s", to_email)
            return True

        except (smtplib.SMTPException, MessageError, OSError):
            logger.exception("Failed to send email to %s", to_email)
            return False
