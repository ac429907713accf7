import logging
from typing import List, Optional

from ...domain.models import CONTACT_STATUSES, ContactMessage
from ...domain.ports.persistence import ContactMessageRepository
from ...services.email_service import EmailService

logger = logging.getLogger(__name__)


class ContactMessageNotFound(LookupError):
    pass


class ContactService:
    """Stores contact form submissions and relays them to the school inbox."""

    def __init__(
        self,
        repository: ContactMessageRepository,
        email_service: EmailService,
        recipient: Optional[str] = None,
    ) -> None:
        self._repository = repository
        self._email = email_service
        self._recipient = recipient

    def submit(
        self,
        first_name: str,
        last_name: str,
        email: str,
        subject: str,
        message: str,
        phone: Optional[str] = None,
    ) -> ContactMessage:
        fields = {
            "first name": first_name.strip(),
            "last name": last_name.strip(),
            "subject": subject.strip(),
            "message": message.strip(),
        }
        missing = [name for name, value in fields.items() if not value]
        if missing:
            raise ValueError(f"Missing required fields: {', '.join(missing)}")
        if _has_line_break(fields["subject"]) or _has_line_break(email):
            raise ValueError("Subject and email must be a single line")
        contact = self._repository.create_contact_message(
            first_name=fields["first name"],
            last_name=fields["last name"],
            email=email.strip(),
            phone=(phone or "").strip() or None,
            subject=fields["subject"],
            message=fields["message"],
        )
        if self._recipient:
            if not self._email.send_contact_notification(self._recipient, contact):
                logger.warning("Contact message %s stored but not relayed", contact.id)
        else:
            logger.info("CONTACT_RECIPIENT not set; contact message %s stored only", contact.id)
        return contact

    def list_messages(self) -> List[ContactMessage]:
        return self._repository.get_contact_messages()

    def update_status(self, message_id: int, status: str) -> ContactMessage:
        if status not in CONTACT_STATUSES:
            raise ValueError(f"Status must be one of: {', '.join(CONTACT_STATUSES)}")
        self._require(message_id)
        return self._repository.update_contact_message_status(message_id, status)

    def delete(self, message_id: int) -> None:
        self._require(message_id)
        self._repository.delete_contact_message(message_id)

    def _require(self, message_id: int) -> ContactMessage:
        contact = self._repository.get_contact_message(message_id)
        if contact is None:
            raise ContactMessageNotFound(f"Contact message {message_id} not found")
        return contact


def _has_line_break(value: str) -> bool:
    # Both values end up in mail headers.
    return "\r" in value or "\n" in value
