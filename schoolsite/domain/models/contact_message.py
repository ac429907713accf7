from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

CONTACT_STATUSES = ("unread", "read", "archived")


@dataclass(slots=True)
class ContactMessage:
    id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str]
    subject: str
    message: str
    status: str
    created_at: datetime
    updated_at: datetime

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
